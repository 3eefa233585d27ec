"""
Breakpoint resolution.
This module resolves symbolic or literal width tokens against a breakpoint map.
"""

import logging
import math
import xml.dom
from enum import Enum
from typing import Dict, Optional, Union

import cssutils

# Silence cssutils value warnings, tokens are validated here
cssutils.log.setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)

Number = Union[int, float]
BreakpointMap = Dict[str, Number]


def format_number(value: Number) -> str:
    """
    Format a number the way it is written into a stylesheet.

    Args:
        value: Number to format

    Returns:
        str: Number with at most 10 decimal places and no trailing zeros
    """
    text = f"{value:.10f}".rstrip('0').rstrip('.')
    if text in ('-0', ''):
        return '0'
    return text


def _is_valid_width(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


class Direction(Enum):
    """Direction of a width-gated condition."""
    MIN = "min"
    MAX = "max"


class BreakpointToken:
    """
    A breakpoint reference, either a name in the breakpoint map or a literal width.

    Build tokens with ``BreakpointToken.named`` or ``BreakpointToken.literal``.
    """

    __slots__ = ('_name', '_width')

    def __init__(self, name: Optional[str] = None, width: Optional[Number] = None):
        """
        Initialize a token.

        Args:
            name: Breakpoint name (for named tokens)
            width: Width in pixels (for literal tokens)
        """
        if (name is None) == (width is None):
            raise ValueError("A breakpoint token is either named or literal")
        if width is not None and not _is_valid_width(width):
            raise ValueError(f"Invalid literal breakpoint width: {width!r}")
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_width', width)

    def __setattr__(self, key, value):
        raise AttributeError("BreakpointToken is immutable")

    @classmethod
    def named(cls, name: str) -> 'BreakpointToken':
        return cls(name=name)

    @classmethod
    def literal(cls, width: Number) -> 'BreakpointToken':
        return cls(width=width)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def width(self) -> Optional[Number]:
        return self._width

    @property
    def is_literal(self) -> bool:
        return self._width is not None

    def __eq__(self, other):
        if not isinstance(other, BreakpointToken):
            return NotImplemented
        return self._name == other._name and self._width == other._width

    def __hash__(self):
        return hash((self._name, self._width))

    def __repr__(self):
        if self.is_literal:
            return f"Literal({format_number(self._width)})"
        return f"Named({self._name!r})"


class Unresolved:
    """A named breakpoint that could not be resolved."""

    def __init__(self, name: str, reason: str = "not in breakpoint map"):
        """
        Initialize an unresolved marker.

        Args:
            name: The offending breakpoint name
            reason: Why resolution failed
        """
        self.name = name
        self.reason = reason

    def __eq__(self, other):
        if not isinstance(other, Unresolved):
            return NotImplemented
        return self.name == other.name and self.reason == other.reason

    def __repr__(self):
        return f"Unresolved({self.name!r})"

    def __str__(self):
        return f"Unresolved breakpoint '{self.name}': {self.reason}"


# Alias used in diagnostics lists
UnresolvedBreakpoint = Unresolved


class ResolvedBreakpoint:
    """A concrete width condition for a conditional block."""

    def __init__(self, direction: Direction, width: Number):
        """
        Initialize a resolved breakpoint.

        Args:
            direction: Minimum or maximum width condition
            width: Non-negative width in pixels
        """
        if not _is_valid_width(width):
            raise ValueError(f"Invalid breakpoint width: {width!r}")
        self.direction = direction
        self.width = width

    def media_text(self) -> str:
        """
        Render the condition as a media query.

        Returns:
            str: Media query text, e.g. ``all and (min-width: 450px)``
        """
        return f"all and ({self.direction.value}-width: {format_number(self.width)}px)"

    def __eq__(self, other):
        if not isinstance(other, ResolvedBreakpoint):
            return NotImplemented
        return self.direction == other.direction and self.width == other.width

    def __repr__(self):
        return f"ResolvedBreakpoint({self.direction.value}, {format_number(self.width)})"


LITERAL_SUFFIX = "-literal"


def pixel_width(text: str) -> Optional[Number]:
    """
    Read a width from CSS text that is exactly one number or pixel dimension.

    Args:
        text: CSS text such as ``"450px"`` or ``"450"``

    Returns:
        The width, or None when the text is anything else
    """
    text = text.strip()
    if not text or not (text[0].isdigit() or text[0] in '.-+'):
        return None
    try:
        value = cssutils.css.PropertyValue(text)
    except xml.dom.DOMException:
        return None
    if len(value) != 1:
        return None
    item = value[0]
    if item.type == cssutils.css.Value.NUMBER:
        return item.value
    if item.type == cssutils.css.Value.DIMENSION and item.dimension == 'px':
        return item.value
    return None


def parse_token(raw: Union['BreakpointToken', str, Number],
                breakpoint_map: Optional[BreakpointMap] = None) -> BreakpointToken:
    """
    Turn a configuration key into a breakpoint token.

    A key present in the breakpoint map is always a name, so maps may use
    keys such as ``"2xl"``. Otherwise numbers and strings that are exactly
    a pixel dimension (``"450px"``, ``"450"``) become literal tokens, as
    does a pixel dimension marked with a ``-literal`` suffix
    (``"450px-literal"``). Any other string is a name, and an unknown name
    is reported when it is resolved.

    Args:
        raw: Token, number or string
        breakpoint_map: Mapping of breakpoint names to widths

    Returns:
        BreakpointToken: The parsed token

    Raises:
        ValueError: For a negative or non-finite literal width, or a
            ``-literal`` key that is not a pixel dimension
    """
    if isinstance(raw, BreakpointToken):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return BreakpointToken.literal(raw)
    if not isinstance(raw, str):
        raise ValueError(f"Unsupported breakpoint token: {raw!r}")

    text = raw.strip()
    if breakpoint_map and text in breakpoint_map:
        return BreakpointToken.named(text)

    if text.endswith(LITERAL_SUFFIX):
        width = pixel_width(text[:-len(LITERAL_SUFFIX)])
        if width is None:
            raise ValueError(f"Literal breakpoints must be given in pixels: {raw!r}")
        return BreakpointToken.literal(width)

    width = pixel_width(text)
    if width is None:
        return BreakpointToken.named(text)
    return BreakpointToken.literal(width)


def resolve(token: BreakpointToken, breakpoint_map: BreakpointMap) -> Union[Number, Unresolved]:
    """
    Resolve a token to a width.

    Args:
        token: Named or literal token
        breakpoint_map: Mapping of breakpoint names to widths

    Returns:
        The width for the token, or an Unresolved marker for an unknown name
    """
    if token.is_literal:
        return token.width

    if token.name not in breakpoint_map:
        return Unresolved(token.name)

    width = breakpoint_map[token.name]
    if not _is_valid_width(width):
        return Unresolved(token.name, f"invalid width {width!r}")
    return width


def breakpoint(token: BreakpointToken, breakpoint_map: BreakpointMap,
               direction: Direction = Direction.MIN) -> Union[ResolvedBreakpoint, Unresolved]:
    """
    Build a width condition from a token.

    Args:
        token: Named or literal token
        breakpoint_map: Mapping of breakpoint names to widths
        direction: Minimum or maximum width condition

    Returns:
        ResolvedBreakpoint, or the Unresolved marker when the name is unknown
    """
    width = resolve(token, breakpoint_map)
    if isinstance(width, Unresolved):
        logger.debug(f"Could not build breakpoint for {token!r}: {width.reason}")
        return width
    return ResolvedBreakpoint(direction, width)
