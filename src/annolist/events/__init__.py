from .bus import EventBus, Subscription
from .domain_events import DomainEvent
from .annotation_events import (
    AnnotationsUpdatedEvent,
    CollapsedChangedEvent,
    FiltersChangedEvent,
    PersistFailedEvent,
)

__all__ = [
    "AnnotationsUpdatedEvent",
    "CollapsedChangedEvent",
    "DomainEvent",
    "EventBus",
    "FiltersChangedEvent",
    "PersistFailedEvent",
    "Subscription",
]
