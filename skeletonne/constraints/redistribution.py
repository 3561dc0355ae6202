"""Width redistribution constraint for horizontal rows."""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional

from skeletonne.dsl.schema import SkeletonElement
from skeletonne.dsl.units import (
    FULL_WIDTH_PERCENT,
    SHARE_DECIMALS,
    format_share,
    parse_percent,
)

logger = logging.getLogger(__name__)


@dataclass
class RedistributionConstraint:
    """Gives every member of a row an equal share of the row's width."""

    elements: tuple[SkeletonElement, ...]
    row_id: Optional[str] = None  # None = every row

    def apply(self) -> tuple[SkeletonElement, ...]:
        """Apply the constraint.

        Returns:
            Elements with member widths rewritten; everything else is passed
            through as the same object.
        """
        counts = self._row_sizes()
        if not counts:
            if self.row_id is not None:
                logger.debug(f"Row {self.row_id} has no members, nothing to redistribute")
            return tuple(self.elements)

        fixed = []
        for element in self.elements:
            if element.is_horizontal and element.row_id in counts:
                share = format_share(counts[element.row_id])
                if element.width != share:
                    element = element.with_updates(width=share)
            fixed.append(element)

        return tuple(fixed)

    def _row_sizes(self) -> Counter:
        """Member count per affected row."""
        counts: Counter = Counter()
        for element in self.elements:
            if not element.is_horizontal or element.row_id is None:
                continue
            if self.row_id is None or element.row_id == self.row_id:
                counts[element.row_id] += 1
        return counts


def redistribute_widths(
    elements: Iterable[SkeletonElement],
    row_id: Optional[str] = None,
) -> tuple[SkeletonElement, ...]:
    """Convenience function to redistribute row widths.

    Args:
        elements: Master element list.
        row_id: Only rebalance this row; all rows when omitted.

    Returns:
        New element tuple.
    """
    constraint = RedistributionConstraint(tuple(elements), row_id)
    return constraint.apply()


def row_width_total(elements: Iterable[SkeletonElement], row_id: str) -> Optional[float]:
    """Sum of member width percentages, or None if any width is not a percentage."""
    total = 0.0
    for element in elements:
        if element.row_id != row_id:
            continue
        percent = parse_percent(element.width)
        if percent is None:
            return None
        total += percent
    return round(total, SHARE_DECIMALS)


def is_balanced(elements: Iterable[SkeletonElement], row_id: str) -> bool:
    """Whether the row's widths add up to 100% within rounding tolerance."""
    members = [e for e in elements if e.row_id == row_id]
    total = row_width_total(members, row_id)
    if total is None:
        return False
    tolerance = 10 ** -SHARE_DECIMALS * max(len(members), 1)
    return abs(total - FULL_WIDTH_PERCENT) <= tolerance
