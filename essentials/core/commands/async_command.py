"""
Async Command - Awaitable command with a single-flight busy gate.

The busy flag is raised synchronously inside `execute_async`, before the
work is scheduled, so two overlapping calls can never both start the work.
"""
import asyncio
import functools
import inspect
from types import SimpleNamespace
from typing import Any, Callable, Optional, Set

from loguru import logger

from ..errors.base import IErrorHandler
from .base import CommandBase, IAsyncCommand, Predicate
from .result import CommandResult


class AsyncCommand(CommandBase, IAsyncCommand):
    """
    Command whose work runs as an asyncio task.

    `execute` may return a coroutine (or any awaitable) or a plain value.

    Example:
        checkout = AsyncCommand("checkout", handler, checkout_cart,
                                can_execute=lambda _: bool(cart))
        result = await checkout.execute_async()
    """

    def __init__(self, operation: str, error_handler: IErrorHandler,
                 execute: Callable[[Any], Any],
                 can_execute: Optional[Predicate] = None):
        super().__init__(operation, error_handler, can_execute)
        self._execute = execute
        # Strong references to fire-and-forget tasks until they finish
        self._background: Set[asyncio.Future] = set()

    def execute_async(self, parameter: Any = None) -> "asyncio.Future[CommandResult]":
        """
        Start the command and return its completion handle.

        Must be called from a running event loop. When the command is already
        executing the returned future is already resolved to
        `CommandResult.rejected()`.

        Raises:
            RuntimeError: If no event loop is running
        """
        loop = asyncio.get_running_loop()
        if not self._try_begin():
            rejected = loop.create_future()
            rejected.set_result(self._reject())
            return rejected
        try:
            run = SimpleNamespace(started=False)
            task = loop.create_task(self._run(parameter, run))
        except BaseException:
            self._finish()
            raise
        task.add_done_callback(functools.partial(self._release_if_unstarted, run))
        return task

    def execute(self, parameter: Any = None) -> None:
        """
        Fire-and-forget entry point for UI triggers.

        Do not use this when you need to know the work has finished; await
        `execute_async` instead.
        """
        handle = self.execute_async(parameter)
        self._background.add(handle)
        handle.add_done_callback(self._on_background_done)

    async def _run(self, parameter: Any, run: SimpleNamespace) -> CommandResult:
        run.started = True
        try:
            result = await self._perform(parameter)
            self._route(result)
            return result
        finally:
            self._finish()

    async def _perform(self, parameter: Any) -> CommandResult:
        try:
            outcome = self._execute(parameter)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except Exception as e:
            return CommandResult.failure(e)
        return CommandResult.from_return(outcome)

    def _release_if_unstarted(self, run: SimpleNamespace, task: asyncio.Task) -> None:
        # Cancelled before its first step: the finally in _run never ran
        if task.cancelled() and not run.started:
            self._finish()

    def _on_background_done(self, handle: asyncio.Future) -> None:
        self._background.discard(handle)
        if handle.cancelled():
            return
        error = handle.exception()
        if error is not None:
            logger.opt(exception=error).error(
                f"Unobserved error in command '{self.operation}': {error}"
            )
