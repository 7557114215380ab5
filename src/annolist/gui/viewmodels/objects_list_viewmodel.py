"""ObjectsListViewModel (MVVM), no Qt dependency.

Coordinates the side-bar list of objects on the current frame: display
order, the header indicators (all hidden / all locked / all collapsed), bulk
lock/visibility changes, filter changes and the collapse-all actions.

The object states themselves belong to the annotation session.  The view
model only holds the latest snapshot it was given; every change is sent back
to the session and becomes visible once the session publishes the resulting
collection as an ``AnnotationsUpdatedEvent``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from annolist.application.interfaces import IAnnotationSession, ICollapseStore
from annolist.application.services.bulk_mutator import BulkMutator, PersistRequest
from annolist.application.services.filter_controller import FilterController
from annolist.application.services.request_sequencer import RequestSequencer
from annolist.config import DEFAULT_LIST_HEIGHT, DEFAULT_ORDERING
from annolist.domain.aggregate import aggregate
from annolist.domain.models import AggregateFlags, ObjectState, StatesOrdering, ViewState
from annolist.domain.ordering import sort_and_map
from annolist.events.annotation_events import (
    AnnotationsUpdatedEvent,
    CollapsedChangedEvent,
    FiltersChangedEvent,
    PersistFailedEvent,
)
from annolist.events.bus import EventBus
from annolist.gui.shortcuts import ShortcutAction
from annolist.gui.viewmodels.base import BaseViewModel
from annolist.gui.viewmodels.signal import ObservableProperty, Signal


def recompute(previous: ViewState, new_states: Sequence[ObjectState]) -> ViewState:
    """Return the view state for *new_states*.

    When *new_states* is the very collection *previous* was built from, the
    previous state is returned untouched and no sort happens.
    """
    if new_states is previous.source_states:
        return previous
    return ViewState(
        ordering=previous.ordering,
        source_states=new_states,
        ordered_ids=tuple(sort_and_map(new_states, previous.ordering)),
    )


class ObjectsListViewModel(BaseViewModel):
    """Objects list ViewModel: pure Python, no Qt dependency.

    Persist and fetch requests are stamped by a :class:`RequestSequencer`.
    Completions for a request older than the newest one already applied are
    dropped, so a slow persist cannot overwrite a later filter refetch.

    Until the session answers a bulk change, the copies it was sent stay
    pending.  The next bulk change and the toggles build on the pending
    copies, so consecutive actions accumulate instead of reverting each
    other.
    """

    def __init__(
        self,
        session: IAnnotationSession,
        collapse_store: ICollapseStore,
        event_bus: EventBus,
        *,
        job: Any = None,
        frame_number: int = 0,
        ordering: StatesOrdering | str = DEFAULT_ORDERING,
        list_height: int = DEFAULT_LIST_HEIGHT,
        sequencer: Optional[RequestSequencer] = None,
    ) -> None:
        super().__init__()
        self._collapse_store = collapse_store
        self._sequencer = sequencer or RequestSequencer()
        self._mutator = BulkMutator(session, self._sequencer)
        self._filter_controller = FilterController(session, self._sequencer)
        self._job = job
        self._frame_number = frame_number
        self._view_state = ViewState(ordering=StatesOrdering.parse(ordering))
        self._collapsed: Mapping[int, bool] = {}
        self._flags = AggregateFlags()
        self._pending: Optional[PersistRequest] = None
        self._settled_id: Optional[int] = None

        # Observable properties
        self.ordering = ObservableProperty(self._view_state.ordering)
        self.ordered_ids = ObservableProperty(())
        self.filters = ObservableProperty(())
        self.states_hidden = ObservableProperty(True)
        self.states_locked = ObservableProperty(True)
        self.states_collapsed = ObservableProperty(True)
        self.list_height = ObservableProperty(list_height)

        # Signals
        self.states_updated = Signal()  # emits the new collection
        self.stale_update_dropped = Signal()  # emits request_id

        # Event subscriptions
        self.subscribe_event(event_bus, AnnotationsUpdatedEvent, self._on_annotations_updated)
        self.subscribe_event(event_bus, CollapsedChangedEvent, self._on_collapsed_event)
        self.subscribe_event(event_bus, FiltersChangedEvent, self._on_filters_event)
        self.subscribe_event(event_bus, PersistFailedEvent, self._on_persist_failed)

    # -- read-only state ----------------------------------------------------

    @property
    def view_state(self) -> ViewState:
        return self._view_state

    @property
    def states(self) -> Sequence[ObjectState]:
        return self._view_state.source_states

    @property
    def flags(self) -> AggregateFlags:
        return self._flags

    @property
    def pending_request_id(self) -> Optional[int]:
        """Id of the newest bulk change the session has not answered yet."""
        return self._pending.request_id if self._pending is not None else None

    @property
    def job(self) -> Any:
        return self._job

    @property
    def frame_number(self) -> int:
        return self._frame_number

    # -- host inputs --------------------------------------------------------

    def set_context(self, job: Any, frame_number: int) -> None:
        """Record the session handle and frame used by later requests."""
        if job != self._job or frame_number != self._frame_number:
            self._pending = None
        self._job = job
        self._frame_number = frame_number

    def set_list_height(self, height: int) -> None:
        self.list_height.value = height

    def on_collection_changed(self, states: Sequence[ObjectState]) -> None:
        """Accept a new snapshot of the frame's object states."""
        new_view_state = recompute(self._view_state, states)
        if new_view_state is self._view_state:
            self._logger.debug("Object collection unchanged; keeping current order")
            return
        self._view_state = new_view_state
        self.ordered_ids.value = new_view_state.ordered_ids
        self._refresh_flags()
        self.states_updated.emit(new_view_state.source_states)

    def on_collapsed_changed(self, collapsed: Mapping[int, bool]) -> None:
        self._collapsed = dict(collapsed)
        self._refresh_flags()

    # -- renderer actions ---------------------------------------------------

    def change_ordering(self, ordering: StatesOrdering | str) -> None:
        """Re-sort the held collection; nothing is fetched."""
        ordering = StatesOrdering.parse(ordering)
        states = self._view_state.source_states
        self._view_state = ViewState(
            ordering=ordering,
            source_states=states,
            ordered_ids=tuple(sort_and_map(states, ordering)),
        )
        self.ordering.value = ordering
        self.ordered_ids.value = self._view_state.ordered_ids

    def change_filters(self, filters: Sequence[str]) -> None:
        self._filter_controller.set_filters(self._job, filters)
        self.filters.value = self._filter_controller.filters

    def lock_all(self) -> None:
        self._lock_all_states(True)

    def unlock_all(self) -> None:
        self._lock_all_states(False)

    def hide_all(self) -> None:
        self._hide_all_states(True)

    def show_all(self) -> None:
        self._hide_all_states(False)

    def collapse_all(self) -> None:
        self._collapse_all_states(True)

    def expand_all(self) -> None:
        self._collapse_all_states(False)

    def toggle_lock_all(self) -> None:
        self._lock_all_states(not self._working_flags().all_locked)

    def toggle_hidden_all(self) -> None:
        self._hide_all_states(not self._working_flags().all_hidden)

    def toggle_collapse_all(self) -> None:
        self._collapse_all_states(not self._flags.all_collapsed)

    def shortcut_handlers(self) -> Dict[ShortcutAction, Callable[[], None]]:
        """Handlers for the keyboard shortcuts; same code path as the buttons."""
        return {
            ShortcutAction.SWITCH_ALL_LOCK: self.toggle_lock_all,
            ShortcutAction.SWITCH_ALL_HIDDEN: self.toggle_hidden_all,
        }

    # -- internals ----------------------------------------------------------

    def _working_states(self) -> Sequence[ObjectState]:
        if self._pending is not None:
            return self._pending.states
        return self.states

    def _working_flags(self) -> AggregateFlags:
        if self._pending is None:
            return self._flags
        return aggregate(self._pending.states, self._collapsed)

    def _lock_all_states(self, locked: bool) -> None:
        self._track_pending(self._mutator.set_lock_for_all(
            self._job, self._frame_number, self._working_states(), locked
        ))

    def _hide_all_states(self, hidden: bool) -> None:
        self._track_pending(self._mutator.set_hidden_for_all(
            self._job, self._frame_number, self._working_states(), hidden
        ))

    def _track_pending(self, request: PersistRequest) -> None:
        # A synchronous session answers inside persist().
        if self._settled_id is None or request.request_id > self._settled_id:
            self._pending = request

    def _settle_pending(self, request_id: Optional[int]) -> None:
        if request_id is None:
            return
        if self._settled_id is None or request_id > self._settled_id:
            self._settled_id = request_id
        if self._pending is not None and request_id >= self._pending.request_id:
            self._pending = None

    def _collapse_all_states(self, collapsed: bool) -> None:
        self._collapse_store.set_collapsed(list(self.states), collapsed)

    def _refresh_flags(self) -> None:
        self._flags = aggregate(self._view_state.source_states, self._collapsed)
        self.states_hidden.value = self._flags.all_hidden
        self.states_locked.value = self._flags.all_locked
        self.states_collapsed.value = self._flags.all_collapsed

    # -- EventBus handlers --------------------------------------------------

    def _on_annotations_updated(self, event: AnnotationsUpdatedEvent) -> None:
        if event.frame_number != self._frame_number:
            self._logger.debug(
                f"Ignoring states for frame {event.frame_number}; showing frame {self._frame_number}"
            )
            return
        if event.answers_request and not self._sequencer.accept(event.request_id):
            self._logger.warning(
                f"Dropping stale result of request {event.request_id} "
                f"(already applied {self._sequencer.last_applied})"
            )
            self.stale_update_dropped.emit(event.request_id)
            return
        self._settle_pending(event.request_id)
        self.on_collection_changed(event.states)

    def _on_collapsed_event(self, event: CollapsedChangedEvent) -> None:
        self.on_collapsed_changed(event.collapsed)

    def _on_filters_event(self, event: FiltersChangedEvent) -> None:
        self.filters.value = tuple(event.filters)

    def _on_persist_failed(self, event: PersistFailedEvent) -> None:
        self._settle_pending(event.request_id)
        self.report_error(f"Failed to save objects on frame {event.frame_number}: {event.error}")
