from typing import Any, Optional
from .schema import SystemMessage, MsgLevel


class MessageBuilder:
    def info(self, caption: str, body: str, data: Any = None) -> SystemMessage:
        return SystemMessage(MsgLevel.INFO, caption, body, payload=data)

    def question(self, caption: str, body: str) -> SystemMessage:
        return SystemMessage(MsgLevel.QUESTION, caption, body)

    def warning(self, caption: str, body: str) -> SystemMessage:
        return SystemMessage(MsgLevel.WARNING, caption, body)

    def error(self, caption: str, body: str, exc: Optional[BaseException] = None) -> SystemMessage:
        return SystemMessage(MsgLevel.ERROR, caption, body, payload={"exception": exc})
