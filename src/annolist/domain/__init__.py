from .models import AggregateFlags, ObjectState, StatesOrdering, ViewState, is_collapsed
from .ordering import sort_and_map
from .aggregate import aggregate

__all__ = [
    "AggregateFlags",
    "ObjectState",
    "StatesOrdering",
    "ViewState",
    "aggregate",
    "is_collapsed",
    "sort_and_map",
]
