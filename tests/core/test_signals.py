import pytest
from unittest.mock import MagicMock
from essentials.core.events import Signal


def test_signal_event():
    """Verify connect / emit / disconnect."""
    sig = Signal("test_signal")
    mock_handler = MagicMock()

    sig.connect(mock_handler)
    sig.emit("data", 123)

    mock_handler.assert_called_once_with("data", 123)

    sig.disconnect(mock_handler)
    sig.emit("data2")
    assert mock_handler.call_count == 1


def test_duplicate_connect_is_ignored():
    sig = Signal("dup")
    handler = MagicMock()

    sig.connect(handler)
    sig.connect(handler)
    sig.emit()

    assert sig.subscriber_count == 1
    handler.assert_called_once_with()


def test_disconnect_unknown_callback_is_noop():
    sig = Signal("unknown")
    sig.disconnect(MagicMock())
    assert sig.subscriber_count == 0


def test_connect_works_as_decorator():
    sig = Signal("decorated")
    seen = []

    @sig.connect
    def on_emit(value):
        seen.append(value)

    sig.emit(5)
    assert seen == [5]
    assert callable(on_emit)


def test_subscriber_may_disconnect_itself_during_emit():
    sig = Signal("self_remove")
    other = MagicMock()

    def once():
        sig.disconnect(once)

    sig.connect(once)
    sig.connect(other)
    sig.emit()
    sig.emit()

    assert other.call_count == 2
    assert sig.subscriber_count == 1


def test_error_in_subscriber_does_not_block_others(caplog):
    sig = Signal("err_evt")
    results = []

    def buggy_callback():
        raise ValueError("Bug")

    def worker_callback():
        results.append("ok")

    sig.connect(buggy_callback)
    sig.connect(worker_callback)
    sig.emit()

    assert results == ["ok"]
    assert "Bug" in caplog.text
