"""
Error Handling - Routing of command failures.

Provides:
- IErrorHandler: Interface commands report failures to
- MessageBoxErrorHandler: Presentation variant (log + message box)
- UnitTestErrorHandler: Verification variant (log + raise CommandError)
- IMessageBox / SignalMessageBox: Presentation layer
"""
from .base import IErrorHandler, describe_failure
from .exceptions import CommandError
from .handlers import MessageBoxErrorHandler, UnitTestErrorHandler
from .message_box import (
    IMessageBox,
    SignalMessageBox,
    MessageBoxResult,
    MessageBoxButton,
    MessageBoxImage,
)

__all__ = [
    "IErrorHandler",
    "describe_failure",
    "CommandError",
    "MessageBoxErrorHandler",
    "UnitTestErrorHandler",
    "IMessageBox",
    "SignalMessageBox",
    "MessageBoxResult",
    "MessageBoxButton",
    "MessageBoxImage",
]
