"""
tokens.py — Dimension strings to spacing-scale tokens.

Maps the free-form width/height strings of a skeleton element onto the closed
spacing vocabulary used in exported code. Lookups never fail: anything that is
not a recognized percentage or pixel breakpoint becomes an arbitrary-value
token carrying the original literal, e.g. ``[37%]`` or ``[2rem]``.
"""

import logging
import re
from typing import Optional, Union

from skeletonne.dsl.schema import Axis, BorderRadius
from skeletonne.dsl.units import (
    HEIGHT_PREFIX,
    HEIGHT_PX_STEPS,
    PERCENT_FRACTIONS,
    PERCENT_SUFFIX,
    PIXEL_SUFFIX,
    WIDTH_PREFIX,
    WIDTH_PX_STEPS,
)

logger = logging.getLogger(__name__)

# Leading integer, the way browsers parse "33.3333" -> 33
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_leading_int(text: str) -> Optional[int]:
    """Parse the leading integer of ``text``, or None if it has none."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def arbitrary_token(value: str) -> str:
    """Wrap a literal measurement as an arbitrary-value token."""
    return f"[{value}]"


def dimension_token(value: str, axis: Union[Axis, str]) -> str:
    """Resolve a dimension string to a scale token.

    Args:
        value: Raw dimension, e.g. ``"50%"``, ``"24px"`` or ``"2rem"``.
        axis: ``width`` or ``height``; selects the pixel table.

    Returns:
        The scale token (``"1/2"``, ``"6"``) or an arbitrary-value token
        wrapping ``value`` unchanged.
    """
    axis = Axis(axis)

    if value.endswith(PERCENT_SUFFIX):
        percent = parse_leading_int(value[: -len(PERCENT_SUFFIX)])
        if percent in PERCENT_FRACTIONS:
            return PERCENT_FRACTIONS[percent]
        return arbitrary_token(value)

    if value.endswith(PIXEL_SUFFIX):
        pixels = parse_leading_int(value[: -len(PIXEL_SUFFIX)])
        table = HEIGHT_PX_STEPS if axis == Axis.HEIGHT else WIDTH_PX_STEPS
        if pixels in table:
            return table[pixels]

    logger.debug(f"No scale step for {axis.value} {value!r}, using arbitrary value")
    return arbitrary_token(value)


def to_tailwind_class(value: str, axis: Union[Axis, str]) -> str:
    """Width/height utility class for a dimension, e.g. ``w-1/2`` or ``h-[2rem]``."""
    axis = Axis(axis)
    prefix = WIDTH_PREFIX if axis == Axis.WIDTH else HEIGHT_PREFIX
    return f"{prefix}{dimension_token(value, axis)}"


def radius_class(radius: Union[BorderRadius, str]) -> str:
    """Border-radius utility class."""
    radius = BorderRadius(radius)
    if radius == BorderRadius.FULL:
        return "rounded-full"
    if radius == BorderRadius.NONE:
        return "rounded-none"
    return f"rounded-{radius.value}"


def background_class(color: Optional[str]) -> Optional[str]:
    """Arbitrary-value background class, or None for default styling."""
    if not color:
        return None
    return f"bg-[{color}]"
