from .schema import SystemMessage, MsgLevel
from .builder import MessageBuilder

__all__ = ["SystemMessage", "MsgLevel", "MessageBuilder"]
