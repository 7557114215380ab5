"""BaseViewModel: pure Python, no Qt dependency.

Owns the event-bus subscriptions of a view model and the ``error_occurred``
signal every view model exposes to its view.
"""

from __future__ import annotations

import logging
from typing import Callable, Type

from annolist.events.bus import EventBus, Subscription
from annolist.gui.viewmodels.signal import Signal


class BaseViewModel:
    def __init__(self) -> None:
        self._subscriptions: list[tuple[EventBus, Subscription]] = []
        self._disposed = False
        self._logger = logging.getLogger(type(self).__module__)
        self.error_occurred = Signal()

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def subscribe_event(
        self,
        event_bus: EventBus,
        event_type: Type,
        handler: Callable,
    ) -> Subscription:
        """Subscribe to an event type and track the subscription."""
        sub = event_bus.subscribe(event_type, handler)
        self._subscriptions.append((event_bus, sub))
        return sub

    def report_error(self, message: str) -> None:
        self._logger.error(message)
        self.error_occurred.emit(message)

    def dispose(self) -> None:
        """Remove all tracked subscriptions from their event buses."""
        for event_bus, sub in self._subscriptions:
            event_bus.unsubscribe(sub)
        self._subscriptions.clear()
        self._disposed = True
