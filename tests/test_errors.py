import logging
from unittest.mock import Mock

from annolist.errors import (
    AnnoListError,
    ApplicationError,
    DomainError,
    InfrastructureError,
    PersistenceError,
    SettingsError,
    SettingsLoadError,
    SettingsValidationError,
    UnknownOrderingError,
    UnknownShortcutError,
)
from annolist.errors.handler import ErrorHandler, ErrorOccurredEvent, ErrorSeverity
from annolist.events.annotation_events import PersistFailedEvent
from annolist.events.bus import EventBus


def test_layers_share_root():
    for cls in (DomainError, InfrastructureError, ApplicationError, SettingsError):
        assert issubclass(cls, AnnoListError)


def test_leaf_errors_in_their_layer():
    assert issubclass(UnknownOrderingError, DomainError)
    assert issubclass(UnknownShortcutError, DomainError)
    assert issubclass(PersistenceError, InfrastructureError)
    assert issubclass(SettingsLoadError, SettingsError)
    assert issubclass(SettingsValidationError, SettingsError)


def test_handle_error_logs_and_publishes():
    logger = Mock(spec=logging.Logger)
    event_bus = Mock(spec=EventBus)
    handler = ErrorHandler(logger, event_bus)

    error = PersistenceError("save failed")
    handler.handle(error, ErrorSeverity.ERROR, {"frame": 3})

    logger.error.assert_called_once()
    event = event_bus.publish.call_args[0][0]
    assert isinstance(event, ErrorOccurredEvent)
    assert event.error is error
    assert event.context == {"frame": 3}


def test_warning_uses_warning_level():
    logger = Mock(spec=logging.Logger)
    handler = ErrorHandler(logger, Mock(spec=EventBus))

    handler.handle(Exception("slow"), ErrorSeverity.WARNING)

    logger.warning.assert_called_once()
    logger.error.assert_not_called()


def test_ui_callback_only_for_errors():
    handler = ErrorHandler(Mock(spec=logging.Logger), Mock(spec=EventBus))
    callback = Mock()
    handler.register_ui_callback(callback)

    handler.handle(Exception("info"), ErrorSeverity.INFO)
    handler.handle(RuntimeError("ui error"), ErrorSeverity.CRITICAL)

    callback.assert_called_once_with("ui error", ErrorSeverity.CRITICAL)


def test_persist_failures_are_routed_with_frame_context():
    bus = EventBus()
    logger = Mock(spec=logging.Logger)
    handler = ErrorHandler(logger, bus)
    callback = Mock()
    handler.register_ui_callback(callback)
    published = []
    bus.subscribe(ErrorOccurredEvent, published.append)

    handler.watch_persist_failures()
    bus.publish(PersistFailedEvent(job="job", frame_number=7, error="server unavailable", request_id=3))

    assert len(published) == 1
    event = published[0]
    assert isinstance(event.error, PersistenceError)
    assert event.context == {"job": "job", "frame_number": 7, "request_id": 3}
    assert event.request_id == 3
    callback.assert_called_once_with("server unavailable", ErrorSeverity.ERROR)
    logger.error.assert_called_once()


def test_cancelled_watch_stops_routing():
    bus = EventBus()
    logger = Mock(spec=logging.Logger)
    subscription = ErrorHandler(logger, bus).watch_persist_failures()

    bus.unsubscribe(subscription)
    bus.publish(PersistFailedEvent(error="late"))

    logger.error.assert_not_called()
