"""
layout_policy.py — Structural mutations of the element list.

Every operation takes a PlaygroundState snapshot and returns a new one; the
input is never modified. Row membership changes here and only here, and every
change that alters a row's membership rebalances that row afterwards.

Row selection for a new horizontal element follows the last element of the
list:
- list empty            -> new row
- last is vertical      -> last element turns horizontal and shares a new row
- last is horizontal    -> join its row

Rows are not required to be contiguous, so "the row of the last element" is
not always the most recently created row.
"""

import logging
from typing import Union

from skeletonne.constraints.redistribution import redistribute_widths
from skeletonne.dsl.schema import (
    AddSkeleton,
    Orientation,
    PlaygroundState,
    RemoveSkeleton,
    SkeletonElement,
    SkeletonUpdate,
    UpdateSkeleton,
)
from skeletonne.engine.ids import IdFactory

logger = logging.getLogger(__name__)


def _replace(
    elements: tuple[SkeletonElement, ...],
    replacement: SkeletonElement,
) -> tuple[SkeletonElement, ...]:
    return tuple(replacement if e.id == replacement.id else e for e in elements)


def add_skeleton(
    state: PlaygroundState,
    orientation: Orientation,
    ids: IdFactory,
) -> PlaygroundState:
    """Append a new element with default dimensions.

    Args:
        state: Current snapshot.
        orientation: Orientation of the new element.
        ids: Source of fresh element/row ids.

    Returns:
        New snapshot; for horizontal adds, the affected row is rebalanced.
    """
    orientation = Orientation(orientation)
    elements = state.skeletons
    new_id = ids.element_id(state.ids)

    if orientation == Orientation.VERTICAL:
        element = SkeletonElement(id=new_id, orientation=Orientation.VERTICAL)
        return PlaygroundState(skeletons=elements + (element,))

    last = elements[-1] if elements else None

    if last is not None and last.is_horizontal and last.row_id is not None:
        row_id = last.row_id
    else:
        row_id = ids.row_id(state.row_ids)
        if last is not None:
            # The trailing element joins the new row with the added one
            elements = _replace(
                elements,
                last.with_updates(orientation=Orientation.HORIZONTAL, row_id=row_id),
            )

    element = SkeletonElement(id=new_id, orientation=Orientation.HORIZONTAL, row_id=row_id)
    elements = redistribute_widths(elements + (element,), row_id)
    logger.debug(f"Added {new_id} to row {row_id}")
    return PlaygroundState(skeletons=elements)


def remove_skeleton(state: PlaygroundState, skeleton_id: str) -> PlaygroundState:
    """Delete an element; its former row is rebalanced among the survivors."""
    target = state.find(skeleton_id)
    if target is None:
        logger.debug(f"Remove ignored, unknown skeleton {skeleton_id}")
        return state

    elements = tuple(e for e in state.skeletons if e.id != skeleton_id)
    if target.is_horizontal and target.row_id is not None:
        elements = redistribute_widths(elements, target.row_id)
    return PlaygroundState(skeletons=elements)


def update_skeleton(
    state: PlaygroundState,
    skeleton_id: str,
    updates: SkeletonUpdate,
    ids: IdFactory,
) -> PlaygroundState:
    """Merge field updates into one element.

    Plain field edits (width, height, radius, color) have no grouping side
    effects, so a width edit may leave its row unbalanced until the next
    structural change. An orientation change moves the element in or out of
    a row and rebalances the rows involved.
    """
    target = state.find(skeleton_id)
    if target is None:
        logger.debug(f"Update ignored, unknown skeleton {skeleton_id}")
        return state

    changes = updates.changes()
    orientation = updates.orientation

    if orientation is None or orientation == target.orientation:
        merged = target.with_updates(**changes)
        return PlaygroundState(skeletons=_replace(state.skeletons, merged))

    if orientation == Orientation.HORIZONTAL:
        row_id = ids.row_id(state.row_ids)
        merged = target.with_updates(**changes, orientation=orientation, row_id=row_id)
        elements = redistribute_widths(_replace(state.skeletons, merged), row_id)
        return PlaygroundState(skeletons=elements)

    old_row_id = target.row_id
    merged = target.with_updates(**changes, orientation=orientation, row_id=None)
    elements = _replace(state.skeletons, merged)
    if old_row_id is not None:
        elements = redistribute_widths(elements, old_row_id)
    return PlaygroundState(skeletons=elements)


def reduce(
    state: PlaygroundState,
    action: Union[AddSkeleton, RemoveSkeleton, UpdateSkeleton],
    ids: IdFactory,
) -> PlaygroundState:
    """Apply one action to a snapshot."""
    if isinstance(action, AddSkeleton):
        return add_skeleton(state, action.orientation, ids)
    elif isinstance(action, RemoveSkeleton):
        return remove_skeleton(state, action.id)
    elif isinstance(action, UpdateSkeleton):
        return update_skeleton(state, action.id, action.updates, ids)

    raise TypeError(f"Unsupported action: {type(action).__name__}")
