"""
Last-resort logging for exceptions nothing else caught.

This is a safety net, not a recovery path: after logging, the interpreter
behaves as it normally would for an uncaught exception (the thread dies, or
the process exits).
"""
import asyncio
import sys
import threading
from typing import Optional

from loguru import logger

_previous_excepthook = None
_previous_threading_hook = None


def _log_unhandled(exc_type, exc_value, exc_tb, where: str = "") -> None:
    message = "Unhandled exception" + (f" in {where}" if where else "")
    logger.opt(exception=(exc_type, exc_value, exc_tb)).critical(message)


def _sys_hook(exc_type, exc_value, exc_tb):
    if issubclass(exc_type, KeyboardInterrupt):
        _previous_excepthook(exc_type, exc_value, exc_tb)
        return
    _log_unhandled(exc_type, exc_value, exc_tb)


def _thread_hook(args: threading.ExceptHookArgs):
    if args.exc_type is SystemExit:
        return
    name = args.thread.name if args.thread is not None else "unknown thread"
    _log_unhandled(args.exc_type, args.exc_value, args.exc_traceback, where=f"thread '{name}'")


def _loop_hook(loop: asyncio.AbstractEventLoop, context: dict):
    error = context.get("exception")
    message = context.get("message", "Unhandled exception in event loop")
    if error is None:
        logger.error(message)
        return
    logger.opt(exception=error).critical(f"Unhandled exception in event loop: {message}")


def install_exception_hooks(loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
    """
    Route uncaught exceptions from the main thread, worker threads and
    (when given) an event loop to the logger. Safe to call more than once.
    """
    global _previous_excepthook, _previous_threading_hook
    if _previous_excepthook is None:
        _previous_excepthook = sys.excepthook
        _previous_threading_hook = threading.excepthook
        sys.excepthook = _sys_hook
        threading.excepthook = _thread_hook
        logger.debug("Unhandled exception hooks installed")
    if loop is not None:
        loop.set_exception_handler(_loop_hook)


def uninstall_exception_hooks() -> None:
    """Restore the hooks that were active before install_exception_hooks()."""
    global _previous_excepthook, _previous_threading_hook
    if _previous_excepthook is None:
        return
    sys.excepthook = _previous_excepthook
    threading.excepthook = _previous_threading_hook
    _previous_excepthook = None
    _previous_threading_hook = None
