"""
grouping.py — Rebuild visual rows from the flat element list.

The master list is the only source of rendering order. A row is emitted at the
position of its first member; later members are pulled forward into it, so
rows whose members are scattered across the list still render together.

Both the live preview and the code generator call ``group_elements``; they
never group on their own.
"""

import logging
from collections import defaultdict
from typing import Iterable, Union

from skeletonne.dsl.schema import Row, SkeletonElement, Standalone

logger = logging.getLogger(__name__)

SINGLE_ROW_PREFIX = "single-"


def row_key(element: SkeletonElement) -> str:
    """Grouping key; horizontal elements without a row get their own."""
    if element.row_id is not None:
        return element.row_id
    return f"{SINGLE_ROW_PREFIX}{element.id}"


def group_elements(elements: Iterable[SkeletonElement]) -> list[Union[Standalone, Row]]:
    """Group an ordered element list into render units.

    Args:
        elements: Master list in rendering order.

    Returns:
        Standalone units for vertical elements and Row units for horizontal
        ones, in first-occurrence order.
    """
    elements = list(elements)

    members: dict[str, list[SkeletonElement]] = defaultdict(list)
    for element in elements:
        if element.is_horizontal and element.row_id is not None:
            members[element.row_id].append(element)

    units: list[Union[Standalone, Row]] = []
    seen: set[str] = set()

    for element in elements:
        if not element.is_horizontal:
            units.append(Standalone(element=element))
            continue

        if element.row_id is None:
            # Synthetic keys never enter `seen`; a real row may use the same string.
            logger.debug(f"Horizontal element {element.id} has no row, rendering alone")
            units.append(Row(key=row_key(element), elements=(element,)))
            continue

        if element.row_id in seen:
            continue
        seen.add(element.row_id)
        units.append(Row(key=element.row_id, elements=tuple(members[element.row_id])))

    return units


def flatten_units(units: Iterable[Union[Standalone, Row]]) -> list[SkeletonElement]:
    """Elements of the given units in render order."""
    flat: list[SkeletonElement] = []
    for unit in units:
        if isinstance(unit, Standalone):
            flat.append(unit.element)
        else:
            flat.extend(unit.elements)
    return flat
