"""
ids.py — Identifier factories for elements and rows.

Two strategies:
- ``SequentialIdFactory``: monotonic counter, deterministic (tests, CLI)
- ``UuidIdFactory``: random uuid4 fragments, safe for stateless API calls
  where the incoming snapshot was built elsewhere

Both skip any id already present in the snapshot.
"""

import itertools
import uuid
from typing import Collection, Protocol


class IdFactory(Protocol):
    """Produces fresh element and row identifiers."""

    def element_id(self, taken: Collection[str] = ()) -> str: ...

    def row_id(self, taken: Collection[str] = ()) -> str: ...


class SequentialIdFactory:
    """Counter-based identifiers: ``sk-1``, ``sk-2``, ``row-1``..."""

    def __init__(self, start: int = 1):
        self._elements = itertools.count(start)
        self._rows = itertools.count(start)

    def element_id(self, taken: Collection[str] = ()) -> str:
        while True:
            candidate = f"sk-{next(self._elements)}"
            if candidate not in taken:
                return candidate

    def row_id(self, taken: Collection[str] = ()) -> str:
        while True:
            candidate = f"row-{next(self._rows)}"
            if candidate not in taken:
                return candidate


class UuidIdFactory:
    """Random identifiers: ``sk-3f9c1a2b``, ``row-77d0e4c1``."""

    def element_id(self, taken: Collection[str] = ()) -> str:
        return self._fresh("sk", taken)

    def row_id(self, taken: Collection[str] = ()) -> str:
        return self._fresh("row", taken)

    @staticmethod
    def _fresh(prefix: str, taken: Collection[str]) -> str:
        while True:
            candidate = f"{prefix}-{uuid.uuid4().hex[:8]}"
            if candidate not in taken:
                return candidate


def get_id_factory(strategy: str) -> IdFactory:
    """Build the factory named by ``strategy`` (``uuid`` or ``sequential``)."""
    if strategy == "sequential":
        return SequentialIdFactory()
    if strategy == "uuid":
        return UuidIdFactory()
    raise ValueError(f"Unknown id strategy: {strategy}")
