"""Chat transcript schemas."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Role(str, Enum):
    USER = "user"
    BOT = "bot"


class ChatMessage(BaseModel):
    """A single message in the widget transcript."""

    role: Role
    text: str
    timestamp: str

    @classmethod
    def now(cls, role: Role, text: str, at: Optional[datetime] = None) -> "ChatMessage":
        """Build a message stamped with a display time like ``10:42:07 AM``."""
        stamp = (at or datetime.now()).strftime("%I:%M:%S %p").lstrip("0")
        return cls(role=role, text=text, timestamp=stamp)
