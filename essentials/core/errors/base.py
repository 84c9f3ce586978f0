"""
Error Handler - Base Interface.

Commands never decide how a failure is surfaced; they hand the failure to an
IErrorHandler together with the operation name ("checkout", "save file", ...)
and carry on.
"""
from abc import ABC, abstractmethod


def describe_failure(operation: str, error: BaseException) -> str:
    """Human-readable message shared by all handlers."""
    return f"Could not {operation} because {error}"


class IErrorHandler(ABC):
    """
    Decides how a failed command is reported.

    Example:
        class PrintErrorHandler(IErrorHandler):
            def handle_error(self, operation, error):
                print(describe_failure(operation, error))
    """
    @abstractmethod
    def handle_error(self, operation: str, error: BaseException) -> None:
        """Report a failure raised while performing `operation`."""
        pass
