import logging
from unittest.mock import Mock

from tsundoc.errors import NetworkFailureError, ServiceError
from tsundoc.errors.handler import ErrorHandler, ErrorOccurredEvent, ErrorSeverity
from tsundoc.events.bus import EventBus


def test_handle_error_logs_and_publishes():
    logger = Mock(spec=logging.Logger)
    event_bus = Mock(spec=EventBus)
    handler = ErrorHandler(logger, event_bus)

    error = ValueError("test error")
    handler.handle(error, ErrorSeverity.ERROR, {"sequence": 3})

    logger.error.assert_called()
    event = event_bus.publish.call_args[0][0]
    assert isinstance(event, ErrorOccurredEvent)
    assert event.error is error
    assert event.severity == ErrorSeverity.ERROR
    assert event.context == {"sequence": 3}


def test_ui_callback_receives_user_message_for_fetch_errors():
    handler = ErrorHandler(Mock(spec=logging.Logger), EventBus())
    callback = Mock()
    handler.register_ui_callback(callback)

    handler.handle(ServiceError("myBooks returned errors: nope", "nope"), ErrorSeverity.ERROR)

    callback.assert_called_with("nope", ErrorSeverity.ERROR)


def test_ui_callback_receives_str_for_other_errors():
    handler = ErrorHandler(Mock(spec=logging.Logger), EventBus())
    callback = Mock()
    handler.register_ui_callback(callback)

    handler.handle(RuntimeError("ui error"), ErrorSeverity.CRITICAL)

    callback.assert_called_with("ui error", ErrorSeverity.CRITICAL)


def test_warning_severity_stays_out_of_ui():
    logger = Mock(spec=logging.Logger)
    handler = ErrorHandler(logger, EventBus())
    callback = Mock()
    handler.register_ui_callback(callback)

    handler.handle(NetworkFailureError("offline"), ErrorSeverity.WARNING)

    logger.warning.assert_called()
    callback.assert_not_called()


def test_fetch_error_user_message_defaults_to_message():
    error = NetworkFailureError("offline")

    assert error.user_message == "offline"
    assert str(error) == "offline"


def test_failing_ui_callback_does_not_escape():
    logger = Mock(spec=logging.Logger)
    event_bus = Mock(spec=EventBus)
    handler = ErrorHandler(logger, event_bus)
    handler.register_ui_callback(Mock(side_effect=RuntimeError("dialog closed")))

    handler.handle(NetworkFailureError("offline"), ErrorSeverity.ERROR)

    event_bus.publish.assert_called_once()
    assert logger.error.call_count == 2
