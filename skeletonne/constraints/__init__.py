"""Constraint module - keeps row widths consistent."""

from skeletonne.constraints.redistribution import (
    RedistributionConstraint,
    is_balanced,
    redistribute_widths,
    row_width_total,
)

__all__ = [
    "RedistributionConstraint",
    "is_balanced",
    "redistribute_widths",
    "row_width_total",
]
