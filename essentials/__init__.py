"""
Essentials - Commands for view-models.

Commands wrap a unit of work with an availability predicate, a single-flight
busy gate and centralized error routing.
"""

from essentials.core.commands import (
    ICommand,
    IAsyncCommand,
    CommandResult,
    DelegateCommand,
    AsyncCommand,
)
from essentials.core.errors import (
    IErrorHandler,
    CommandError,
    MessageBoxErrorHandler,
    UnitTestErrorHandler,
    IMessageBox,
    SignalMessageBox,
    MessageBoxResult,
    MessageBoxButton,
    MessageBoxImage,
)
from essentials.core.events import Signal
from essentials.core.config import ConfigManager, AppConfig
from essentials.core.logging import setup_logging
from essentials.core.excepthook import install_exception_hooks, uninstall_exception_hooks

__version__ = "1.0.0"

__all__ = [
    # Commands
    "ICommand",
    "IAsyncCommand",
    "CommandResult",
    "DelegateCommand",
    "AsyncCommand",
    # Errors
    "IErrorHandler",
    "CommandError",
    "MessageBoxErrorHandler",
    "UnitTestErrorHandler",
    "IMessageBox",
    "SignalMessageBox",
    "MessageBoxResult",
    "MessageBoxButton",
    "MessageBoxImage",
    # Infrastructure
    "Signal",
    "ConfigManager",
    "AppConfig",
    "setup_logging",
    "install_exception_hooks",
    "uninstall_exception_hooks",
]
