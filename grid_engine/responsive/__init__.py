"""
Responsive declarations.
This package resolves breakpoints, converts typographic units and builds
width-gated declaration blocks.
"""

from .breakpoints import (
    BreakpointToken, Direction, ResolvedBreakpoint, Unresolved, UnresolvedBreakpoint,
    breakpoint, parse_token, resolve,
)
from .units import ConvertedValue, PropertyKind, convert
from .declarations import DeclarationBlock, GenerationResult, generate

__all__ = [
    'BreakpointToken', 'Direction', 'ResolvedBreakpoint', 'Unresolved',
    'UnresolvedBreakpoint', 'breakpoint', 'parse_token', 'resolve',
    'ConvertedValue', 'PropertyKind', 'convert',
    'DeclarationBlock', 'GenerationResult', 'generate',
]
