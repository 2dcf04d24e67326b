"""Per-session state passed into every handler call."""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from trinexa.schemas.booking_schema import BookingRecord
from trinexa.schemas.conversation_schema import ChatMessage


@dataclass
class DialogueState:
    """Progress through the demo booking form."""
    is_active: bool = False
    step_index: int = 0
    answers: dict[str, str] = field(default_factory=dict)

    def reset(self) -> None:
        self.is_active = False
        self.step_index = 0
        self.answers = {}


@dataclass
class StepEntry:
    """Recorded history entry for a dialogue transition."""
    state: str
    entered_at: datetime
    event: str


@dataclass
class SessionState:
    """
    Everything one chat visitor owns.

    Replaces widget-level globals: the booking dialogue, the remembered
    display name, and the transcript all hang off this object, so separate
    visitors never share state.
    """
    session_id: str = "default"
    dialogue: DialogueState = field(default_factory=DialogueState)
    display_name: Optional[str] = None
    messages: list[ChatMessage] = field(default_factory=list)
    awaiting_feedback: bool = False
    trace: list[StepEntry] = field(default_factory=list)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False, compare=False)
    # Insert still running after a timed-out submit, with the record it carries.
    pending_booking: Optional[tuple[BookingRecord, "asyncio.Future[dict[str, Any]]"]] = field(
        default=None, repr=False, compare=False
    )
