"""Value types describing the objects shown on the current frame."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Mapping, Sequence

from annolist.errors import UnknownOrderingError


class StatesOrdering(Enum):
    ID_ASCENT = "ID_ASCENT"
    ID_DESCENT = "ID_DESCENT"
    UPDATED = "UPDATED"

    @classmethod
    def parse(cls, value: "StatesOrdering | str") -> "StatesOrdering":
        """Return the member for *value*, accepting members or their names."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value)]
        except KeyError:
            raise UnknownOrderingError(f"Unknown states ordering: {value!r}") from None


@dataclass(frozen=True)
class ObjectState:
    """One annotated object on the current frame.

    ``updated`` is a version counter; the session bumps it every time the
    object is stored.
    """

    client_id: int
    hidden: bool = False
    lock: bool = False
    updated: int = 0

    def with_changes(self, **changes) -> ObjectState:
        return replace(self, **changes)


@dataclass(frozen=True)
class AggregateFlags:
    all_hidden: bool = True
    all_locked: bool = True
    all_collapsed: bool = True


@dataclass(frozen=True)
class ViewState:
    """Derived list state; replaced as a whole, never patched."""

    ordering: StatesOrdering = StatesOrdering.ID_ASCENT
    source_states: Sequence[ObjectState] = field(default_factory=tuple)
    ordered_ids: tuple[int, ...] = ()


def is_collapsed(collapsed: Mapping[int, bool], client_id: int) -> bool:
    # Items the user never touched start collapsed.
    return bool(collapsed.get(client_id, True))
