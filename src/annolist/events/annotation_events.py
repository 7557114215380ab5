from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple

from .domain_events import DomainEvent


@dataclass(frozen=True)
class AnnotationsUpdatedEvent(DomainEvent):
    """A fresh object-state collection for a frame is available."""
    job: Any = None
    frame_number: int = 0
    states: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class FiltersChangedEvent(DomainEvent):
    filters: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CollapsedChangedEvent(DomainEvent):
    collapsed: Mapping[int, bool] = field(default_factory=dict)


@dataclass(frozen=True)
class PersistFailedEvent(DomainEvent):
    job: Any = None
    frame_number: int = 0
    error: str = ""
