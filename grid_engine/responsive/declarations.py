"""
Responsive declaration generation.
This module expands a property set into a base block and one min-width
block per breakpoint override.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .breakpoints import (
    BreakpointMap, BreakpointToken, Direction, Number, ResolvedBreakpoint,
    Unresolved, parse_token, resolve,
)
from .units import Value, expand

logger = logging.getLogger(__name__)

Declaration = Tuple[str, str]


class DeclarationBlock:
    """
    An ordered list of declarations, optionally gated by a width condition.

    A block without a condition is the unconditional base block.
    """

    def __init__(self, declarations: Sequence[Declaration],
                 condition: Optional[ResolvedBreakpoint] = None):
        """
        Initialize a declaration block.

        Args:
            declarations: Non-empty (property, value text) pairs
            condition: Width condition, None for the base block
        """
        if not declarations:
            raise ValueError("A declaration block needs at least one declaration")
        self.declarations = tuple(declarations)
        self.condition = condition

    @property
    def is_conditional(self) -> bool:
        return self.condition is not None

    def to_css(self) -> str:
        """
        Render the declarations as CSS declaration text.

        Returns:
            str: Declarations joined with semicolons
        """
        return "; ".join(f"{prop}: {value}" for prop, value in self.declarations)

    def __eq__(self, other):
        if not isinstance(other, DeclarationBlock):
            return NotImplemented
        return self.condition == other.condition and self.declarations == other.declarations

    def __repr__(self):
        return f"DeclarationBlock({self.condition!r}, {list(self.declarations)!r})"


class GenerationResult:
    """Blocks produced by a generation call plus the breakpoints it skipped."""

    def __init__(self, blocks: List[DeclarationBlock], warnings: List[Unresolved]):
        self.blocks = blocks
        self.warnings = warnings

    @property
    def ok(self) -> bool:
        """Whether every override resolved."""
        return not self.warnings

    def __iter__(self):
        return iter(self.blocks)

    def __len__(self):
        return len(self.blocks)

    def __eq__(self, other):
        if not isinstance(other, GenerationResult):
            return NotImplemented
        return self.blocks == other.blocks and self.warnings == other.warnings


OverrideItems = Union[Mapping, Iterable[Tuple[Union[BreakpointToken, str, Number], Value]]]


def _override_items(overrides: OverrideItems,
                    breakpoint_map: BreakpointMap) -> List[Tuple[BreakpointToken, Value]]:
    items = overrides.items() if isinstance(overrides, Mapping) else overrides
    return [(parse_token(token, breakpoint_map), value) for token, value in items]


def _expand_all(properties: Sequence[str], value: Value, base_font_size: Number,
                base_line_height: Number, use_unit_mixins: bool) -> List[Declaration]:
    declarations = []
    for property_name in properties:
        declarations.extend(
            expand(property_name, value, base_font_size, base_line_height, use_unit_mixins)
        )
    return declarations


def generate(properties: Sequence[str], base_value: Value, overrides: OverrideItems,
             breakpoint_map: BreakpointMap, use_unit_mixins: bool = True,
             base_font_size: Number = 16, base_line_height: Number = 24) -> GenerationResult:
    """
    Generate the base block and the responsive override blocks.

    Overrides are emitted in the order given, each under a min-width
    condition. An override whose breakpoint name is not in the map is
    skipped and reported in ``GenerationResult.warnings``. Overrides that
    resolve to the same width are still emitted separately. String keys
    found in the breakpoint map are names; other keys that are exactly a
    pixel width (or carry a ``-literal`` suffix) are literal widths.

    Args:
        properties: Property names, duplicates allowed
        base_value: Value for the unconditional block
        overrides: Mapping (or pairs) of breakpoint token to value
        breakpoint_map: Mapping of breakpoint names to widths
        use_unit_mixins: Whether font-size and line-height are converted
        base_font_size: Root font size in pixels
        base_line_height: Base line-height in pixels

    Returns:
        GenerationResult: Ordered blocks and unresolved breakpoint warnings

    Raises:
        DomainError: When a line-height value of zero is converted
    """
    items = _override_items(overrides, breakpoint_map)
    blocks = []
    warnings = []

    if not properties:
        logger.debug("No properties given, nothing to generate")
        return GenerationResult(blocks, warnings)

    blocks.append(DeclarationBlock(
        _expand_all(properties, base_value, base_font_size, base_line_height, use_unit_mixins)
    ))

    for token, value in items:
        width = resolve(token, breakpoint_map)
        if isinstance(width, Unresolved):
            logger.warning(f"Skipping override for {', '.join(properties)}: {width}")
            warnings.append(width)
            continue

        blocks.append(DeclarationBlock(
            _expand_all(properties, value, base_font_size, base_line_height, use_unit_mixins),
            ResolvedBreakpoint(Direction.MIN, width),
        ))

    logger.debug(f"Generated {len(blocks)} blocks for {', '.join(properties)}")
    return GenerationResult(blocks, warnings)
