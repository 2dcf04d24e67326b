"""
Website chat agent: routes each visitor message to the booking dialogue or
the FAQ classifier and keeps the transcript in sync.

Messages for one session are processed strictly one at a time; the booking
store call is the only await point. An insert that outlives its timeout
stays parked on the session and is awaited by the next submit, so at most
one booking is ever in flight per session.
"""

import logging
from typing import Optional

from trinexa.config import settings
from trinexa.conversation.classifier import ResponseClassifier
from trinexa.conversation.dialogue import BOOKING_SUCCESS, DialogueStepper, state_name
from trinexa.logging_context import set_session_id
from trinexa.prompts import responses
from trinexa.schemas.conversation_schema import ChatMessage, Role
from trinexa.schemas.session_schema import SessionState
from trinexa.tools.booking import BookingPersister, BookingStore
from trinexa.tools.transcript import TranscriptStore
from trinexa.utils import contains_any

logger = logging.getLogger(__name__)


class ChatAgent:
    """Stateless dispatcher; all per-visitor data lives on SessionState."""

    def __init__(
        self,
        booking_store: BookingStore,
        transcript_store: TranscriptStore,
        classifier: Optional[ResponseClassifier] = None,
        persister: Optional[BookingPersister] = None,
    ) -> None:
        self.transcripts = transcript_store
        self.classifier = classifier or ResponseClassifier()
        self.stepper = DialogueStepper(persister or BookingPersister(booking_store))
        self.triggers = settings.booking.triggers
        self.cancel_commands = settings.booking.cancel_commands

    # ------------------------------------------------------------------ #
    # Session lifecycle
    # ------------------------------------------------------------------ #

    def start_session(self, session_id: str = "default") -> SessionState:
        """Create a session seeded with the stored transcript."""
        set_session_id(session_id)
        session = SessionState(session_id=session_id)
        session.messages = self.transcripts.load()
        logger.info("Session started with %d stored messages", len(session.messages))
        return session

    # ------------------------------------------------------------------ #
    # Message handling
    # ------------------------------------------------------------------ #

    async def handle_message(self, session: SessionState, text: str) -> str:
        """Process one visitor message to completion and return the reply."""
        text = text.strip()
        if not text:
            return ""

        async with session.lock:
            set_session_id(session.session_id)
            self._append(session, Role.USER, text)
            trace_len = len(session.trace)
            reply = await self._dispatch(session, text)
            self._append(session, Role.BOT, reply)
            if self._just_booked(session, trace_len):
                self._append(session, Role.BOT, responses.FEEDBACK_PROMPT)
            logger.debug("State after message: %s", state_name(session))
            return reply

    async def cancel(self, session: SessionState) -> str:
        """Cancel button: abandon any booking in progress."""
        async with session.lock:
            reply = self.stepper.cancel(session)
            self._append(session, Role.BOT, reply)
            return reply

    async def submit_feedback(self, session: SessionState, feedback: str) -> str:
        """Record post-booking feedback and thank the visitor."""
        async with session.lock:
            logger.info("Visitor feedback: %s", feedback.strip() or "<empty>")
            session.awaiting_feedback = False
            self._append(session, Role.BOT, responses.FEEDBACK_THANKS)
            return responses.FEEDBACK_THANKS

    def is_cancel_command(self, text: str) -> bool:
        return text.strip().lower() in self.cancel_commands

    def is_booking_trigger(self, text: str) -> bool:
        return contains_any(text, self.triggers)

    async def _dispatch(self, session: SessionState, text: str) -> str:
        if len(text) > settings.booking.max_input_length:
            return responses.INPUT_TOO_LONG
        try:
            if self.is_cancel_command(text):
                return self.stepper.cancel(session)
            if session.dialogue.is_active:
                return await self.stepper.step(session, text)
            if self.is_booking_trigger(text):
                return self.stepper.start(session)
            return self.classifier.respond(session, text)
        except Exception:
            logger.exception("Unhandled error while processing message")
            return responses.UNEXPECTED_ERROR

    def _just_booked(self, session: SessionState, trace_len: int) -> bool:
        new_events = [entry.event for entry in session.trace[trace_len:]]
        return BOOKING_SUCCESS in new_events

    def _append(self, session: SessionState, role: Role, text: str) -> None:
        session.messages.append(ChatMessage.now(role, text))
        self.transcripts.save(session.messages)
