from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of one command invocation.

    A unit of work may return a CommandResult itself to report a failure
    without raising; any other return value is wrapped with `success()`.

    Attributes:
        ok: True when the work ran and succeeded
        value: Value returned by the work (success only)
        error: Captured failure (failure only)
        skipped: True when the invocation was rejected because the command
            was already executing; nothing ran
    """
    ok: bool
    value: Any = None
    error: Optional[BaseException] = None
    skipped: bool = False

    @classmethod
    def success(cls, value: Any = None) -> "CommandResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "CommandResult":
        if error is None:
            raise ValueError("A failed CommandResult needs an error")
        return cls(ok=False, error=error)

    @classmethod
    def rejected(cls) -> "CommandResult":
        return cls(ok=False, skipped=True)

    @classmethod
    def from_return(cls, outcome: Any) -> "CommandResult":
        """Normalize whatever the unit of work returned."""
        if isinstance(outcome, CommandResult):
            return outcome
        return cls.success(outcome)

    @property
    def failed(self) -> bool:
        return self.error is not None
