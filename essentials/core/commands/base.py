"""
Command Pattern - Base Interfaces.

Provides:
- ICommand: Invocable action with availability and change notification
- IAsyncCommand: ICommand whose completion can be awaited
- CommandBase: Shared busy gate, predicate and failure routing
"""
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from loguru import logger

from ..errors.base import IErrorHandler
from ..events import Signal
from .result import CommandResult

Predicate = Callable[[Any], bool]


class ICommand(ABC):
    """
    An action a view can trigger.

    `can_execute_changed` is emitted with the command as its only argument
    whenever availability may have changed.
    """
    can_execute_changed: Signal

    @abstractmethod
    def can_execute(self, parameter: Any = None) -> bool:
        """Whether the command may be invoked right now."""
        pass

    @abstractmethod
    def execute(self, parameter: Any = None) -> Any:
        """Invoke the command."""
        pass


class IAsyncCommand(ICommand):
    @abstractmethod
    def execute_async(self, parameter: Any = None):
        """Invoke the command and return an awaitable completion handle."""
        pass


class CommandBase(ICommand, ABC):
    """
    Busy gate, predicate and error routing shared by DelegateCommand and
    AsyncCommand.

    Only the caller that flips `executing` from False to True may run the
    work; everyone else is rejected. The flip is guarded by a lock so this
    also holds when several threads invoke the same command.
    """

    def __init__(self, operation: str, error_handler: IErrorHandler,
                 can_execute: Optional[Predicate] = None):
        """
        Initialize the command.

        Args:
            operation: Human-readable name used in error messages ("checkout")
            error_handler: Receives (operation, error) for every failure
            can_execute: Side-effect free predicate over the parameter;
                None means always available
        """
        self._operation = operation
        self._error_handler = error_handler
        self._can_execute = can_execute
        self._executing = False
        self._lock = threading.Lock()
        self.can_execute_changed = Signal(f"CanExecuteChanged[{operation}]")

    @property
    def operation(self) -> str:
        return self._operation

    @property
    def executing(self) -> bool:
        return self._executing

    def can_execute(self, parameter: Any = None) -> bool:
        if self._executing:
            return False
        return self._can_execute is None or bool(self._can_execute(parameter))

    def raise_can_execute_changed(self) -> None:
        """
        Tell observers to re-query `can_execute`.

        Call this when something the predicate looks at has changed.
        """
        self.can_execute_changed.emit(self)

    def _try_begin(self) -> bool:
        with self._lock:
            if self._executing:
                return False
            self._executing = True
        self.raise_can_execute_changed()
        return True

    def _finish(self) -> None:
        with self._lock:
            changed = self._executing
            self._executing = False
        if changed:
            self.raise_can_execute_changed()

    def _reject(self) -> CommandResult:
        logger.debug(f"Command '{self._operation}' is already executing; invocation ignored")
        return CommandResult.rejected()

    def _route(self, result: CommandResult) -> None:
        """Hand a failed result to the error handler."""
        if result.failed:
            logger.debug(f"Command '{self._operation}' failed: {result.error!r}")
            self._error_handler.handle_error(self._operation, result.error)
