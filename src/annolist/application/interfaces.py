from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from annolist.domain.models import ObjectState


class IAnnotationSession(ABC):
    """Interface for the layer that stores annotation states.

    Every call returns immediately. The resulting collection is delivered
    later as an ``AnnotationsUpdatedEvent`` carrying the same
    ``request_id``; failures are delivered as ``PersistFailedEvent``.
    """

    @abstractmethod
    def persist(
        self,
        job: Any,
        frame_number: int,
        states: Sequence[ObjectState],
        request_id: Optional[int] = None,
    ) -> None:
        """Store *states* for *frame_number* in a single batch."""
        pass

    @abstractmethod
    def update_filters(self, filters: Sequence[str]) -> None:
        """Replace the active filters used by subsequent fetches."""
        pass

    @abstractmethod
    def fetch(self, job: Any, request_id: Optional[int] = None) -> None:
        """Re-read the states of the current frame under the active filters."""
        pass


class ICollapseStore(ABC):
    """Interface for the view-local store of expanded/collapsed list items."""

    @abstractmethod
    def set_collapsed(self, states: Sequence[ObjectState], collapsed: bool) -> None:
        pass
