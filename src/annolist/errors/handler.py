import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from annolist.errors import PersistenceError
from annolist.events.annotation_events import PersistFailedEvent
from annolist.events.bus import EventBus, Subscription
from annolist.events.domain_events import DomainEvent


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass(frozen=True)
class ErrorOccurredEvent(DomainEvent):
    error: Optional[Exception] = None
    severity: ErrorSeverity = ErrorSeverity.ERROR
    context: dict = field(default_factory=dict)


class ErrorHandler:
    """Host-side sink for failures reported by the annotation session.

    Each failure is logged at its severity and republished as an
    :class:`ErrorOccurredEvent`.  ERROR and CRITICAL failures also reach the
    registered UI callback.
    """

    def __init__(self, logger: logging.Logger, event_bus: EventBus):
        self._logger = logger
        self._events = event_bus
        self._ui_callback: Optional[Callable[[str, ErrorSeverity], None]] = None

    def register_ui_callback(self, callback: Callable[[str, ErrorSeverity], None]):
        self._ui_callback = callback

    def watch_persist_failures(self) -> Subscription:
        """Route every ``PersistFailedEvent`` on the bus through :meth:`handle`."""
        return self._events.subscribe(PersistFailedEvent, self._on_persist_failed)

    def handle(self, error: Exception, severity: ErrorSeverity = ErrorSeverity.ERROR, context: dict = None):
        context = context or {}
        log_method = getattr(self._logger, severity.value, self._logger.error)
        log_method(f"{error.__class__.__name__}: {error}", extra=context)

        self._events.publish(ErrorOccurredEvent(
            error=error,
            severity=severity,
            context=context,
            source="error_handler",
            request_id=context.get("request_id"),
        ))

        if self._ui_callback and severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL):
            self._ui_callback(str(error), severity)

    def _on_persist_failed(self, event: PersistFailedEvent) -> None:
        self.handle(
            PersistenceError(event.error),
            ErrorSeverity.ERROR,
            {"job": event.job, "frame_number": event.frame_number, "request_id": event.request_id},
        )
