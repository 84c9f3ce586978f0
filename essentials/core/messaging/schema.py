from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional
from datetime import datetime


class MsgLevel(str, Enum):
    INFO = "INFO"
    QUESTION = "QUESTION"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class SystemMessage:
    """A user-facing notice handed to whatever presentation layer is listening."""
    level: MsgLevel
    caption: str
    body: str                     # Human-readable text
    payload: Optional[Any] = None  # Extra data (dict, exception)
    timestamp: float = field(default_factory=lambda: datetime.now().timestamp())
