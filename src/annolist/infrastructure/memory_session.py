"""In-memory annotation session.

Keeps the object states of every frame in process memory and reports
completions on the ``EventBus`` the same way a remote session would.  In
deferred mode completions are queued until :meth:`flush` or
:meth:`complete` is called, which lets callers replay responses in any
order.
"""

from __future__ import annotations

import itertools
import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from annolist.application.interfaces import IAnnotationSession, ICollapseStore
from annolist.domain.models import ObjectState
from annolist.errors import PersistenceError
from annolist.events.annotation_events import (
    AnnotationsUpdatedEvent,
    CollapsedChangedEvent,
    FiltersChangedEvent,
    PersistFailedEvent,
)
from annolist.events.bus import EventBus

# Builds a predicate from the opaque filter strings.
FilterFactory = Callable[[Sequence[str]], Callable[[ObjectState], bool]]


class InMemoryAnnotationSession(IAnnotationSession, ICollapseStore):
    def __init__(
        self,
        event_bus: EventBus,
        frames: Optional[Mapping[int, Iterable[ObjectState]]] = None,
        *,
        current_frame: int = 0,
        filter_factory: Optional[FilterFactory] = None,
        deferred: bool = False,
    ) -> None:
        self._events = event_bus
        self._frames: Dict[int, Dict[int, ObjectState]] = {}
        for frame_number, states in (frames or {}).items():
            self._frames[frame_number] = {state.client_id: state for state in states}
        self._current_frame = current_frame
        self._filter_factory = filter_factory
        self._filters: Tuple[str, ...] = ()
        self._collapsed: Dict[int, bool] = {}
        self._deferred = deferred
        self._pending: List[Tuple[Optional[int], Callable[[], None]]] = []
        self._persist_error: Optional[PersistenceError] = None
        highest = max(
            (state.updated for stored in self._frames.values() for state in stored.values()),
            default=0,
        )
        self._versions = itertools.count(highest + 1)
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def current_frame(self) -> int:
        return self._current_frame

    @property
    def filters(self) -> Tuple[str, ...]:
        return self._filters

    @property
    def collapsed(self) -> Mapping[int, bool]:
        return MappingProxyType(self._collapsed)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def states(self, frame_number: Optional[int] = None) -> Tuple[ObjectState, ...]:
        """Return the stored states of *frame_number* that pass the filters."""
        if frame_number is None:
            frame_number = self._current_frame
        stored = self._frames.get(frame_number, {}).values()
        if self._filter_factory is None or not self._filters:
            return tuple(stored)
        predicate = self._filter_factory(self._filters)
        return tuple(state for state in stored if predicate(state))

    def fail_next_persist(self, message: str) -> None:
        self._persist_error = PersistenceError(message)

    # ------------------------------------------------------------------
    # IAnnotationSession
    # ------------------------------------------------------------------
    def persist(
        self,
        job: Any,
        frame_number: int,
        states: Sequence[ObjectState],
        request_id: Optional[int] = None,
    ) -> None:
        if self._persist_error is not None:
            error, self._persist_error = self._persist_error, None
            self._logger.error(f"Persist of {len(states)} objects failed: {error}")
            self._schedule(request_id, lambda: self._events.publish(PersistFailedEvent(
                job=job,
                frame_number=frame_number,
                error=str(error),
                request_id=request_id,
                source="memory_session",
            )))
            return

        version = next(self._versions)
        stored = self._frames.setdefault(frame_number, {})
        for state in states:
            stored[state.client_id] = state.with_changes(updated=version)
        self._logger.debug(f"Stored {len(states)} objects on frame {frame_number} at version {version}")
        self._schedule_update(job, frame_number, request_id)

    def update_filters(self, filters: Sequence[str]) -> None:
        self._filters = tuple(filters)
        self._events.publish(FiltersChangedEvent(filters=self._filters, source="memory_session"))

    def fetch(self, job: Any, request_id: Optional[int] = None) -> None:
        self._schedule_update(job, self._current_frame, request_id)

    def navigate(self, job: Any, frame_number: int) -> None:
        """Switch the current frame and push its states without a request id."""
        self._current_frame = frame_number
        self._schedule_update(job, frame_number, None)

    # ------------------------------------------------------------------
    # ICollapseStore
    # ------------------------------------------------------------------
    def set_collapsed(self, states: Sequence[ObjectState], collapsed: bool) -> None:
        for state in states:
            self._collapsed[state.client_id] = bool(collapsed)
        self._events.publish(CollapsedChangedEvent(collapsed=dict(self._collapsed), source="memory_session"))

    # ------------------------------------------------------------------
    # Completion delivery
    # ------------------------------------------------------------------
    def flush(self) -> int:
        """Deliver every queued completion in issue order."""
        delivered = 0
        while self._pending:
            _, deliver = self._pending.pop(0)
            deliver()
            delivered += 1
        return delivered

    def complete(self, request_id: int) -> None:
        """Deliver the queued completion of *request_id* out of order."""
        for index, (pending_id, deliver) in enumerate(self._pending):
            if pending_id == request_id:
                del self._pending[index]
                deliver()
                return
        raise KeyError(request_id)

    def _schedule_update(self, job: Any, frame_number: int, request_id: Optional[int]) -> None:
        # Snapshot now so a later completion reflects the state at issue time.
        snapshot = self.states(frame_number)
        self._schedule(request_id, lambda: self._events.publish(AnnotationsUpdatedEvent(
            job=job,
            frame_number=frame_number,
            states=snapshot,
            request_id=request_id,
            source="memory_session",
        )))

    def _schedule(self, request_id: Optional[int], deliver: Callable[[], None]) -> None:
        if self._deferred:
            self._pending.append((request_id, deliver))
        else:
            deliver()
