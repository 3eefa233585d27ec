"""
Grid column arithmetic.
This module computes column widths, gutter margins and push/pull offsets
as percentages of the row width.
"""

import logging
import math
from enum import Enum
from typing import Union

from ..errors import InvalidGridConfig

logger = logging.getLogger(__name__)


class GridConfig:
    """
    Numeric grid configuration.

    Rejects column counts below one and gutters outside [0, 100).
    """

    def __init__(self, column_count: int, use_gutters: bool = False,
                 gutter_percent: Union[int, float] = 0):
        """
        Initialize a grid configuration.

        Args:
            column_count: Number of columns in a row
            use_gutters: Whether columns are separated by gutters
            gutter_percent: Gutter width as a percentage of the row
        """
        if isinstance(column_count, bool) or not isinstance(column_count, int):
            raise InvalidGridConfig(f"Column count must be an integer, got {column_count!r}")
        if column_count < 1:
            raise InvalidGridConfig(f"Column count must be at least 1, got {column_count}")
        if isinstance(gutter_percent, bool) or not isinstance(gutter_percent, (int, float)):
            raise InvalidGridConfig(f"Gutter percent must be a number, got {gutter_percent!r}")
        if math.isnan(gutter_percent) or not 0 <= gutter_percent < 100:
            raise InvalidGridConfig(f"Gutter percent must be in [0, 100), got {gutter_percent!r}")

        self.column_count = column_count
        self.use_gutters = use_gutters
        self.gutter_percent = gutter_percent

    def with_gutters(self, use_gutters: bool = True) -> 'GridConfig':
        """Return a copy with gutters switched on or off."""
        return GridConfig(self.column_count, use_gutters, self.gutter_percent)

    def __repr__(self):
        return (f"GridConfig(column_count={self.column_count}, "
                f"use_gutters={self.use_gutters}, gutter_percent={self.gutter_percent})")


class ColumnSpec:
    """A column span within a row."""

    def __init__(self, index: int, is_first: bool = False):
        self.index = index
        self.is_first = is_first


class ColumnWidth:
    """Width and leading gutter margin of a column, in percent."""

    def __init__(self, width: float, left_offset: float = 0):
        self.width = width
        self.left_offset = left_offset

    def __repr__(self):
        return f"ColumnWidth(width={self.width}, left_offset={self.left_offset})"


class PushPull(Enum):
    """Direction a column is shifted."""
    PUSH = "push"
    PULL = "pull"

    @property
    def side(self) -> str:
        """The offset property the shift is applied to."""
        return "left" if self is PushPull.PUSH else "right"


def _check_index(index: int, config: GridConfig) -> None:
    if isinstance(index, bool) or not isinstance(index, int) or not 1 <= index <= config.column_count:
        raise InvalidGridConfig(
            f"Column index must be between 1 and {config.column_count}, got {index!r}"
        )


def column_width(spec: ColumnSpec, config: GridConfig) -> ColumnWidth:
    """
    Compute the width of a column spanning ``spec.index`` grid units.

    With gutters, each unit shrinks so that the gutters between all columns
    fit in the row, and a span absorbs the gutters it covers. The first
    column of a row carries no leading gutter.

    Args:
        spec: Column span and position
        config: Grid configuration

    Returns:
        ColumnWidth: Width and left margin in percent
    """
    _check_index(spec.index, config)
    count = config.column_count

    if not config.use_gutters:
        return ColumnWidth(100 * spec.index / count)

    gutter = config.gutter_percent
    unit_width = (100 - gutter * (count - 1)) / count
    width = unit_width * spec.index + gutter * (spec.index - 1)

    # single-column rows never have a gutter
    left_offset = gutter if not spec.is_first and count > 1 else 0
    return ColumnWidth(width, left_offset)


def push_pull_offset(option: PushPull, index: int, config: GridConfig) -> float:
    """
    Compute the horizontal shift for a push or pull by ``index`` columns.

    With gutters the full gutter percentage is subtracted once, whatever
    the index. This differs from ``column_width``, which scales gutters by
    the span, and is kept to match existing stylesheets.

    Args:
        option: Push (applied to ``left``) or pull (applied to ``right``)
        index: Number of columns to shift by
        config: Grid configuration

    Returns:
        float: Offset in percent
    """
    _check_index(index, config)
    offset = 100 * index / config.column_count
    if config.use_gutters:
        offset -= config.gutter_percent
    logger.debug(f"{option.value} {index}/{config.column_count}: {option.side} {offset}%")
    return offset
