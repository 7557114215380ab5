"""Sorting of object states into display order."""

from __future__ import annotations

from typing import Iterable, List

from annolist.errors import UnknownOrderingError

from .models import ObjectState, StatesOrdering


def sort_and_map(states: Iterable[ObjectState], ordering: StatesOrdering) -> List[int]:
    """Return the ``client_id`` of every state in display order.

    ``sorted`` is stable, so objects sharing an ``updated`` version keep
    their input order under :attr:`StatesOrdering.UPDATED`. The input is
    never modified.
    """
    if ordering is StatesOrdering.ID_ASCENT:
        ordered = sorted(states, key=lambda state: state.client_id)
    elif ordering is StatesOrdering.ID_DESCENT:
        ordered = sorted(states, key=lambda state: state.client_id, reverse=True)
    elif ordering is StatesOrdering.UPDATED:
        ordered = sorted(states, key=lambda state: -state.updated)
    else:
        raise UnknownOrderingError(f"Unknown states ordering: {ordering!r}")

    return [state.client_id for state in ordered]
