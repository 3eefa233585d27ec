"""
Grid Engine - responsive breakpoint and grid stylesheet generation.
"""

import logging

from grid_engine.errors import ConfigError, DomainError, GridEngineError, InvalidGridConfig
from grid_engine.grid import (
    ColumnSpec, GridConfig, PushPull, column_width, push_pull_offset,
    setup_columns, setup_push_pull,
)
from grid_engine.responsive import (
    BreakpointToken, DeclarationBlock, Direction, GenerationResult,
    ResolvedBreakpoint, Unresolved, convert, generate, resolve,
)

logger = logging.getLogger(__name__)

# Package information
__version__ = "0.1.0"
__description__ = "Responsive breakpoint and grid stylesheet generation"

__all__ = [
    'BreakpointToken', 'ColumnSpec', 'ConfigError', 'DeclarationBlock',
    'Direction', 'DomainError', 'GenerationResult', 'GridConfig',
    'GridEngineError', 'InvalidGridConfig', 'PushPull', 'ResolvedBreakpoint',
    'Unresolved', 'column_width', 'convert', 'generate', 'push_pull_offset',
    'resolve', 'setup_columns', 'setup_push_pull',
]

logger.debug(f"Grid Engine v{__version__} initialized")
