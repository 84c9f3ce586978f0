"""
Command System.

Provides Command pattern infrastructure for view-models:
- ICommand / IAsyncCommand: Interfaces views bind to
- CommandResult: Explicit outcome of an invocation
- DelegateCommand: Synchronous command
- AsyncCommand: Awaitable command with single-flight busy gate
"""
from .base import ICommand, IAsyncCommand, CommandBase
from .result import CommandResult
from .delegate_command import DelegateCommand
from .async_command import AsyncCommand

__all__ = [
    # Base interfaces
    "ICommand",
    "IAsyncCommand",
    "CommandBase",
    "CommandResult",
    # Implementations
    "DelegateCommand",
    "AsyncCommand",
]
