"""
Grid setup generation.
This module emits one row per column index for widths and push/pull
offsets, and turns those rows into selector-keyed style rules.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..responsive.breakpoints import format_number
from .columns import ColumnSpec, GridConfig, PushPull, column_width, push_pull_offset

logger = logging.getLogger(__name__)

DEFAULT_NAMING = {
    "column": "col-",
    "push": "push-",
    "pull": "pull-",
    "gutters": "gutters",
}


class ColumnSetup:
    """Gutter-less and gutter-aware widths for one column index."""

    def __init__(self, index: int, width: float, gutters_width: float, gutters_margin: float):
        self.index = index
        self.width = width
        self.gutters_width = gutters_width
        self.gutters_margin = gutters_margin

    def __repr__(self):
        return f"ColumnSetup({self.index}, {self.width}, {self.gutters_width})"


class PushPullSetup:
    """Gutter-less and gutter-aware offsets for one push/pull index."""

    def __init__(self, index: int, offset: float, gutters_offset: float):
        self.index = index
        self.offset = offset
        self.gutters_offset = gutters_offset

    def __repr__(self):
        return f"PushPullSetup({self.index}, {self.offset}, {self.gutters_offset})"


class StyleRule:
    """A selector with its ordered declarations."""

    def __init__(self, selector: str, declarations: Sequence[Tuple[str, str]]):
        self.selector = selector
        self.declarations = tuple(declarations)

    def to_css(self) -> str:
        body = "; ".join(f"{prop}: {value}" for prop, value in self.declarations)
        return f"{self.selector} {{ {body} }}"

    def __eq__(self, other):
        if not isinstance(other, StyleRule):
            return NotImplemented
        return self.selector == other.selector and self.declarations == other.declarations

    def __repr__(self):
        return f"StyleRule({self.selector!r}, {list(self.declarations)!r})"


def percent(value: float) -> str:
    """Format a number as a percentage."""
    return f"{format_number(value)}%"


def setup_columns(config: GridConfig) -> List[ColumnSetup]:
    """
    Compute column widths for every index from 1 to the column count.

    Args:
        config: Grid configuration

    Returns:
        List of ColumnSetup rows, one per index
    """
    plain = config.with_gutters(False)
    gutters = config.with_gutters(True)

    rows = []
    for index in range(1, config.column_count + 1):
        plain_width = column_width(ColumnSpec(index, is_first=True), plain)
        gutter_width = column_width(ColumnSpec(index, is_first=False), gutters)
        rows.append(ColumnSetup(index, plain_width.width, gutter_width.width, gutter_width.left_offset))
    return rows


def setup_push_pull(option: PushPull, config: GridConfig) -> List[PushPullSetup]:
    """
    Compute push or pull offsets for every index below the column count.

    Shifting by the full column count is a no-op and is not emitted.

    Args:
        option: Push or pull
        config: Grid configuration

    Returns:
        List of PushPullSetup rows, one per index
    """
    plain = config.with_gutters(False)
    gutters = config.with_gutters(True)

    return [
        PushPullSetup(
            index,
            push_pull_offset(option, index, plain),
            push_pull_offset(option, index, gutters),
        )
        for index in range(1, config.column_count)
    ]


def _naming(naming: Optional[Dict[str, str]]) -> Dict[str, str]:
    merged = dict(DEFAULT_NAMING)
    if naming:
        merged.update(naming)
    return merged


def column_rules(config: GridConfig, naming: Optional[Dict[str, str]] = None) -> List[StyleRule]:
    """
    Build column style rules.

    Args:
        config: Grid configuration
        naming: Class name prefixes, see DEFAULT_NAMING

    Returns:
        List of StyleRule, plain column rules first, then the gutters context
    """
    names = _naming(naming)
    rows = setup_columns(config)
    context = f".{names['gutters']}"

    rules = [
        StyleRule(f".{names['column']}{row.index}", [("width", percent(row.width))])
        for row in rows
    ]

    for row in rows:
        selector = f"{context} .{names['column']}{row.index}"
        declarations = [("width", percent(row.gutters_width))]
        if config.column_count > 1:
            declarations.append(("margin-left", percent(row.gutters_margin)))
        rules.append(StyleRule(selector, declarations))
        if config.column_count > 1:
            rules.append(StyleRule(f"{selector}:first-child", [("margin-left", "0")]))

    logger.debug(f"Built {len(rules)} column rules for {config.column_count} columns")
    return rules


def push_pull_rules(option: PushPull, config: GridConfig,
                    naming: Optional[Dict[str, str]] = None) -> List[StyleRule]:
    """
    Build push or pull style rules.

    Args:
        option: Push or pull
        config: Grid configuration
        naming: Class name prefixes, see DEFAULT_NAMING

    Returns:
        List of StyleRule, plain rules first, then the gutters context
    """
    names = _naming(naming)
    prefix = names[option.value]
    rows = setup_push_pull(option, config)

    rules = [
        StyleRule(f".{prefix}{row.index}",
                  [("position", "relative"), (option.side, percent(row.offset))])
        for row in rows
    ]
    rules.extend(
        StyleRule(f".{names['gutters']} .{prefix}{row.index}",
                  [(option.side, percent(row.gutters_offset))])
        for row in rows
    )
    return rules
