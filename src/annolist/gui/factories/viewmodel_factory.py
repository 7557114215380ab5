"""ViewModelFactory: builds the objects list and its shortcut dispatcher."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from annolist.application.interfaces import IAnnotationSession, ICollapseStore
from annolist.config import DEFAULT_ORDERING
from annolist.errors.handler import ErrorHandler
from annolist.events.bus import EventBus
from annolist.gui.shortcuts import DEFAULT_KEYMAP, ShortcutDispatcher
from annolist.gui.viewmodels.objects_list_viewmodel import ObjectsListViewModel

if TYPE_CHECKING:
    from annolist.settings.manager import SettingsManager


class ViewModelFactory:
    """Creates view models wired to one session and event bus.

    When an :class:`ErrorHandler` is given, failed persists on the bus are
    routed to it.
    """

    def __init__(
        self,
        session: IAnnotationSession,
        collapse_store: ICollapseStore,
        event_bus: EventBus,
        settings: Optional["SettingsManager"] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self._session = session
        self._collapse_store = collapse_store
        self._event_bus = event_bus
        self._settings = settings
        self._error_subscription = error_handler.watch_persist_failures() if error_handler else None

    def create_objects_list_vm(self, job: Any = None, frame_number: int = 0) -> ObjectsListViewModel:
        ordering = self._settings.default_ordering() if self._settings else DEFAULT_ORDERING
        return ObjectsListViewModel(
            self._session,
            self._collapse_store,
            self._event_bus,
            job=job,
            frame_number=frame_number,
            ordering=ordering,
        )

    def create_shortcut_dispatcher(self, vm: ObjectsListViewModel) -> ShortcutDispatcher:
        keymap = self._settings.keymap() if self._settings else DEFAULT_KEYMAP
        return ShortcutDispatcher(vm.shortcut_handlers(), keymap)
