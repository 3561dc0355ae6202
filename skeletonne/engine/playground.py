"""
playground.py — Explicit state container for an editing session.

Holds the current snapshot and applies actions through the layout policy.
Each dispatch swaps the snapshot in one assignment, so readers only ever see
complete states. Callers that share a Playground between writers must
serialize their dispatches.
"""

import logging
from typing import Optional, Union

from skeletonne.dsl.schema import (
    AddSkeleton,
    Orientation,
    PlaygroundState,
    RemoveSkeleton,
    Row,
    SkeletonUpdate,
    Standalone,
    UpdateSkeleton,
    default_state,
)
from skeletonne.engine.grouping import group_elements
from skeletonne.engine.ids import IdFactory, SequentialIdFactory
from skeletonne.engine.layout_policy import reduce

logger = logging.getLogger(__name__)


class Playground:
    """Value + reducer pair for one design."""

    def __init__(
        self,
        state: Optional[PlaygroundState] = None,
        ids: Optional[IdFactory] = None,
    ):
        self._state = state if state is not None else default_state()
        self.ids = ids or SequentialIdFactory()

    @property
    def state(self) -> PlaygroundState:
        return self._state

    def dispatch(
        self, action: Union[AddSkeleton, RemoveSkeleton, UpdateSkeleton]
    ) -> PlaygroundState:
        """Apply an action and make the result current."""
        self._state = reduce(self._state, action, self.ids)
        logger.debug(f"{action.type} -> {len(self._state.skeletons)} skeletons")
        return self._state

    def add(self, orientation: Orientation = Orientation.VERTICAL) -> PlaygroundState:
        return self.dispatch(AddSkeleton(orientation=orientation))

    def remove(self, skeleton_id: str) -> PlaygroundState:
        return self.dispatch(RemoveSkeleton(id=skeleton_id))

    def update(self, skeleton_id: str, **fields) -> PlaygroundState:
        return self.dispatch(UpdateSkeleton(id=skeleton_id, updates=SkeletonUpdate(**fields)))

    def units(self) -> list[Union[Standalone, Row]]:
        """Render units for the current snapshot."""
        return group_elements(self._state.skeletons)
