from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4


@dataclass(frozen=True)
class DomainEvent:
    """Base of every event published on the annolist bus.

    ``source`` names the publisher, e.g. ``"memory_session"``.
    ``request_id`` echoes the persist/fetch request the event answers and is
    ``None`` for pushes nobody asked for (frame navigation, collapse changes).
    """
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)
    source: str = ""
    request_id: Optional[int] = None

    @property
    def answers_request(self) -> bool:
        return self.request_id is not None
