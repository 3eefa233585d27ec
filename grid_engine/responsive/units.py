"""
Unit conversion for font-size and line-height.
"""

import logging
import math
from enum import Enum
from typing import List, Optional, Union

from ..errors import DomainError
from .breakpoints import Number, format_number, pixel_width

logger = logging.getLogger(__name__)

Value = Union[int, float, str]


class PropertyKind(Enum):
    """Properties that receive unit conversion."""
    FONT_SIZE = "font-size"
    LINE_HEIGHT = "line-height"
    GENERIC = "generic"

    @classmethod
    def of(cls, property_name: str) -> 'PropertyKind':
        """
        Classify a property name.

        Args:
            property_name: CSS property name

        Returns:
            PropertyKind: FONT_SIZE, LINE_HEIGHT, or GENERIC for anything else
        """
        name = property_name.strip().lower()
        if name == cls.FONT_SIZE.value:
            return cls.FONT_SIZE
        if name == cls.LINE_HEIGHT.value:
            return cls.LINE_HEIGHT
        return cls.GENERIC


class ConvertedValue:
    """Result of a unit conversion."""

    def __init__(self, display_value: str, normalized_value: str):
        """
        Initialize a converted value.

        Args:
            display_value: Raw value, used as a fallback
            normalized_value: Root-relative or unitless value
        """
        self.display_value = display_value
        self.normalized_value = normalized_value

    def __eq__(self, other):
        if not isinstance(other, ConvertedValue):
            return NotImplemented
        return (self.display_value == other.display_value
                and self.normalized_value == other.normalized_value)

    def __repr__(self):
        return f"ConvertedValue({self.display_value!r}, {self.normalized_value!r})"


def to_number(value: Value) -> Optional[Number]:
    """
    Read a numeric value from a number or a pixel/unitless string.

    Args:
        value: Number or CSS text such as ``"12px"``

    Returns:
        The number, or None when the value is not a plain pixel size
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    return pixel_width(str(value))


def format_value(value: Value) -> str:
    """Format a raw value verbatim."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def _check_base(name: str, base: Number) -> None:
    if isinstance(base, bool) or not isinstance(base, (int, float)) \
            or not math.isfinite(base) or base <= 0:
        raise DomainError(f"{name} must be positive, got {base!r}")


def convert(property_name: str, raw_value: Number, base_font_size: Number,
            base_line_height: Number) -> ConvertedValue:
    """
    Convert a raw size into normalized units.

    font-size becomes rem relative to the base font size, keeping the pixel
    value as a fallback. line-height snaps to the smallest multiple of the
    base line-height that fits the raw value, expressed as a unitless ratio
    of the raw value. Any other property passes through.

    Args:
        property_name: CSS property name
        raw_value: Size in pixels
        base_font_size: Root font size in pixels
        base_line_height: Base line-height in pixels

    Returns:
        ConvertedValue: Display and normalized values

    Raises:
        DomainError: For a zero line-height value, a non-finite value or a non-positive base
    """
    kind = PropertyKind.of(property_name)

    if kind is not PropertyKind.GENERIC and not math.isfinite(raw_value):
        raise DomainError(f"Cannot convert non-finite {property_name} value {raw_value!r}")

    if kind is PropertyKind.FONT_SIZE:
        _check_base("Base font size", base_font_size)
        return ConvertedValue(
            f"{format_number(raw_value)}px",
            f"{format_number(raw_value / base_font_size)}rem",
        )

    if kind is PropertyKind.LINE_HEIGHT:
        _check_base("Base line-height", base_line_height)
        if raw_value == 0:
            raise DomainError("Cannot compute line-height for a zero value")
        ratio = math.ceil(raw_value / base_line_height) * (base_line_height / raw_value)
        return ConvertedValue(f"{format_number(raw_value)}px", format_number(ratio))

    text = format_value(raw_value)
    return ConvertedValue(text, text)


def expand(property_name: str, value: Value, base_font_size: Number,
           base_line_height: Number, use_unit_mixins: bool = True) -> List[tuple]:
    """
    Expand one property/value pair into its declarations.

    Args:
        property_name: CSS property name
        value: Number or CSS text
        base_font_size: Root font size in pixels
        base_line_height: Base line-height in pixels
        use_unit_mixins: Whether font-size and line-height are converted

    Returns:
        List of (property, value text) tuples
    """
    kind = PropertyKind.of(property_name)
    if not use_unit_mixins or kind is PropertyKind.GENERIC:
        return [(property_name, format_value(value))]

    number = to_number(value)
    if number is None:
        # keywords such as "inherit" or values in other units
        logger.debug(f"Not converting non-pixel {property_name} value {value!r}")
        return [(property_name, format_value(value))]

    converted = convert(property_name, number, base_font_size, base_line_height)
    if kind is PropertyKind.FONT_SIZE:
        return [
            (property_name, converted.display_value),
            (property_name, converted.normalized_value),
        ]
    return [(property_name, converted.normalized_value)]
