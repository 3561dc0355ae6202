"""Layout engine - tokens, grouping and mutation policy."""

from skeletonne.engine.grouping import flatten_units, group_elements, row_key
from skeletonne.engine.ids import IdFactory, SequentialIdFactory, UuidIdFactory, get_id_factory
from skeletonne.engine.layout_policy import add_skeleton, reduce, remove_skeleton, update_skeleton
from skeletonne.engine.playground import Playground
from skeletonne.engine.tokens import dimension_token, radius_class, to_tailwind_class

__all__ = [
    # Tokens
    "dimension_token",
    "radius_class",
    "to_tailwind_class",
    # Grouping
    "flatten_units",
    "group_elements",
    "row_key",
    # Ids
    "IdFactory",
    "SequentialIdFactory",
    "UuidIdFactory",
    "get_id_factory",
    # Policy
    "add_skeleton",
    "reduce",
    "remove_skeleton",
    "update_skeleton",
    "Playground",
]
