"""
Standard IErrorHandler implementations.

- MessageBoxErrorHandler: log + show a message box. Used by applications.
- UnitTestErrorHandler: log + raise CommandError. Used by automated tests so
  that a routed failure cannot go unnoticed.
"""
from loguru import logger

from .base import IErrorHandler, describe_failure
from .exceptions import CommandError
from .message_box import IMessageBox, MessageBoxButton, MessageBoxImage


class MessageBoxErrorHandler(IErrorHandler):
    """
    Logs the failure and tells the user about it. Never raises.

    Args:
        message_box: Presentation layer used to surface the message
        caption: Title shown on the message box
    """

    def __init__(self, message_box: IMessageBox, caption: str = "Error"):
        self._message_box = message_box
        self._caption = caption

    def handle_error(self, operation: str, error: BaseException) -> None:
        message = describe_failure(operation, error)
        logger.opt(exception=error).error(message)
        try:
            self._message_box.show(message, self._caption,
                                   MessageBoxButton.OK, MessageBoxImage.ERROR)
        except Exception as e:
            logger.error(f"Failed to show error message for '{operation}': {e}")


class UnitTestErrorHandler(IErrorHandler):
    """Logs the failure and re-raises it as CommandError."""

    def handle_error(self, operation: str, error: BaseException) -> None:
        logger.error(describe_failure(operation, error))
        raise CommandError(operation, error) from error
