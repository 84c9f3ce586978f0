import inspect
from typing import Any, Callable, Optional

from ..errors.base import IErrorHandler
from .base import CommandBase, Predicate
from .result import CommandResult


class DelegateCommand(CommandBase):
    """
    Synchronous command: the work has finished when `execute` returns.

    Failures are routed to the error handler before `execute` returns and
    `executing` is always reset, even when the handler itself raises.

    Example:
        save = DelegateCommand("save the document", handler,
                               lambda _: document.save(),
                               can_execute=lambda _: document.dirty)
        if save.can_execute():
            save.execute()
    """

    def __init__(self, operation: str, error_handler: IErrorHandler,
                 execute: Callable[[Any], Any],
                 can_execute: Optional[Predicate] = None):
        super().__init__(operation, error_handler, can_execute)
        self._execute = execute

    def execute(self, parameter: Any = None) -> CommandResult:
        if not self._try_begin():
            return self._reject()
        try:
            try:
                outcome = self._execute(parameter)
                if inspect.isawaitable(outcome):
                    if inspect.iscoroutine(outcome):
                        outcome.close()
                    raise TypeError(
                        f"Command '{self.operation}' returned an awaitable; use AsyncCommand for async work"
                    )
            except Exception as e:
                result = CommandResult.failure(e)
            else:
                result = CommandResult.from_return(outcome)
            self._route(result)
            return result
        finally:
            self._finish()
