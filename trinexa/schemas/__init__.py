from trinexa.schemas.booking_schema import AvailabilitySlot, BookingRecord
from trinexa.schemas.conversation_schema import ChatMessage, Role
from trinexa.schemas.session_schema import DialogueState, SessionState, StepEntry

__all__ = [
    "AvailabilitySlot",
    "BookingRecord",
    "ChatMessage",
    "Role",
    "DialogueState",
    "SessionState",
    "StepEntry",
]
