"""
Message Box - Presentation layer used by MessageBoxErrorHandler.

IMessageBox mirrors the classic desktop message box call. SignalMessageBox is
a headless implementation that turns each call into a SystemMessage and
broadcasts it, so a UI (or a log panel, or a test) can subscribe.
"""
from abc import ABC, abstractmethod
from collections import deque
from enum import IntEnum

from loguru import logger

from ..events import Signal
from ..messaging import MessageBuilder, SystemMessage


class MessageBoxResult(IntEnum):
    NONE = 0
    OK = 1
    CANCEL = 2
    YES = 6
    NO = 7


class MessageBoxButton(IntEnum):
    OK = 0
    OK_CANCEL = 1
    YES_NO_CANCEL = 3
    YES_NO = 4


class MessageBoxImage(IntEnum):
    NONE = 0
    ERROR = 16
    QUESTION = 32
    WARNING = 48
    INFORMATION = 64


class IMessageBox(ABC):
    @abstractmethod
    def show(self, text: str, caption: str = "",
             button: MessageBoxButton = MessageBoxButton.OK,
             icon: MessageBoxImage = MessageBoxImage.NONE) -> MessageBoxResult:
        """Present `text` to the user and return the button they chose."""
        pass


class SignalMessageBox(IMessageBox):
    """
    Non-blocking message box that publishes SystemMessages on `on_message`.

    Nobody can click a button on a broadcast, so every call answers
    MessageBoxResult.OK.

    Example:
        box = SignalMessageBox()
        box.on_message.connect(lambda msg: print(msg.caption, msg.body))
        box.show("Disk full", "Error", icon=MessageBoxImage.ERROR)
    """

    def __init__(self, builder: MessageBuilder = None, history_size: int = 100):
        self._builder = builder or MessageBuilder()
        self.on_message = Signal("MessageBox")
        # Most recent messages only
        self.history: deque = deque(maxlen=history_size)

    def show(self, text: str, caption: str = "",
             button: MessageBoxButton = MessageBoxButton.OK,
             icon: MessageBoxImage = MessageBoxImage.NONE) -> MessageBoxResult:
        message = self._build(text, caption, icon)
        self.history.append(message)
        logger.debug(f"MessageBox [{message.level.value}] {caption}: {text}")
        self.on_message.emit(message)
        return MessageBoxResult.OK

    def _build(self, text: str, caption: str, icon: MessageBoxImage) -> SystemMessage:
        if icon == MessageBoxImage.ERROR:
            return self._builder.error(caption, text)
        if icon == MessageBoxImage.WARNING:
            return self._builder.warning(caption, text)
        if icon == MessageBoxImage.QUESTION:
            return self._builder.question(caption, text)
        return self._builder.info(caption, text)
