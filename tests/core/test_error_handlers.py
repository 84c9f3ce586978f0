import pytest
from unittest.mock import MagicMock

from essentials.core.errors import (
    CommandError,
    IMessageBox,
    MessageBoxButton,
    MessageBoxErrorHandler,
    MessageBoxImage,
    MessageBoxResult,
    SignalMessageBox,
    UnitTestErrorHandler,
    describe_failure,
)
from essentials.core.messaging import MsgLevel


def raised(error):
    try:
        raise error
    except Exception as e:
        return e


def test_describe_failure():
    assert describe_failure("checkout", ConnectionError("network error")) == \
        "Could not checkout because network error"


class TestMessageBoxErrorHandler:

    def test_logs_and_shows_message(self, caplog):
        box = MagicMock(spec=IMessageBox)
        handler = MessageBoxErrorHandler(box)

        handler.handle_error("checkout", raised(ConnectionError("network error")))

        box.show.assert_called_once_with(
            "Could not checkout because network error", "Error",
            MessageBoxButton.OK, MessageBoxImage.ERROR,
        )
        assert "Could not checkout because network error" in caplog.text

    def test_custom_caption(self):
        box = MagicMock(spec=IMessageBox)
        MessageBoxErrorHandler(box, caption="Oops").handle_error("save", raised(IOError("x")))

        assert box.show.call_args.args[1] == "Oops"

    def test_never_raises_when_message_box_fails(self, caplog):
        box = MagicMock(spec=IMessageBox)
        box.show.side_effect = RuntimeError("no display")

        MessageBoxErrorHandler(box).handle_error("checkout", raised(ValueError("bad")))

        assert "no display" in caplog.text


class TestUnitTestErrorHandler:

    def test_raises_command_error_chained_to_original(self):
        original = ConnectionError("network error")

        with pytest.raises(CommandError) as exc_info:
            UnitTestErrorHandler().handle_error("checkout", original)

        assert str(exc_info.value) == "Could not checkout"
        assert exc_info.value.__cause__ is original
        assert exc_info.value.original is original


class TestSignalMessageBox:

    def test_broadcasts_system_message(self):
        box = SignalMessageBox()
        received = []
        box.on_message.connect(received.append)

        answer = box.show("Could not save", "Error", icon=MessageBoxImage.ERROR)

        assert answer == MessageBoxResult.OK
        assert len(received) == 1
        assert received[0].level == MsgLevel.ERROR
        assert received[0].caption == "Error"
        assert received[0].body == "Could not save"
        assert list(box.history) == received

    @pytest.mark.parametrize("icon, level", [
        (MessageBoxImage.WARNING, MsgLevel.WARNING),
        (MessageBoxImage.QUESTION, MsgLevel.QUESTION),
        (MessageBoxImage.INFORMATION, MsgLevel.INFO),
        (MessageBoxImage.NONE, MsgLevel.INFO),
    ])
    def test_level_follows_icon(self, icon, level):
        box = SignalMessageBox()
        box.show("text", "caption", icon=icon)
        assert box.history[-1].level == level

    def test_enum_values_match_desktop_conventions(self):
        assert MessageBoxResult.YES == 6
        assert MessageBoxButton.YES_NO_CANCEL == 3
        assert MessageBoxImage.ERROR == 16


def test_signal_message_box_history_is_bounded():
    box = SignalMessageBox(history_size=3)

    for i in range(5):
        box.show(f"message {i}", "Info")

    assert [m.body for m in box.history] == ["message 2", "message 3", "message 4"]
