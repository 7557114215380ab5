"""Reduction of a state collection into the list header indicators."""

from __future__ import annotations

from typing import Iterable, Mapping

from .models import AggregateFlags, ObjectState, is_collapsed


def aggregate(states: Iterable[ObjectState], collapsed: Mapping[int, bool]) -> AggregateFlags:
    """Compute the all-hidden / all-locked / all-collapsed flags in one pass.

    Each flag starts at ``True`` so an empty collection reports every flag
    set.
    """
    all_hidden = True
    all_locked = True
    all_collapsed = True

    for state in states:
        all_hidden = all_hidden and state.hidden
        all_locked = all_locked and state.lock
        all_collapsed = all_collapsed and is_collapsed(collapsed, state.client_id)

    return AggregateFlags(
        all_hidden=bool(all_hidden),
        all_locked=bool(all_locked),
        all_collapsed=bool(all_collapsed),
    )
