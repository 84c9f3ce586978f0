from loguru import logger
from typing import Callable, List


class Signal:
    """
    Synchronous change notifier (equivalent to C#'s event / Qt's Signal).

    Subscribers are called in connection order, but callers must not rely
    on that order. A subscriber that raises is logged and skipped; the
    remaining subscribers still run.
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def connect(self, callback: Callable) -> Callable:
        """Connect a callback. Connecting the same callback twice has no effect."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)
        return callback

    def disconnect(self, callback: Callable) -> None:
        """Disconnect a callback. Unknown callbacks are ignored."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, *args, **kwargs) -> None:
        """Broadcast arguments to all subscribers synchronously."""
        # Snapshot so subscribers may disconnect themselves while being notified
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' error in subscriber '{sub}': {e}")
