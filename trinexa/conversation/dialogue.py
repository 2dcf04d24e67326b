"""
Step-based demo booking dialogue.

States are ``inactive`` and ``awaiting:<field>`` for each FieldSpec in order.
Every visitor message while active is validated against the current field;
errors keep the dialogue where it is, valid answers move it forward, and the
last answer finalizes the booking through the persister.

Usage:
    stepper = DialogueStepper(BookingPersister(InMemoryBookingStore()))
    reply = stepper.start(session)             # first prompt
    reply = await stepper.step(session, "Jane Doe")
"""

import logging
from datetime import datetime, timezone

from trinexa.conversation.fields import FIELD_SPECS, FieldKind, FieldSpec, normalize, validate
from trinexa.conversation.slot_matcher import format_day_times
from trinexa.prompts.responses import CANCELLED, PERSIST_FAILED, build_confirmation
from trinexa.schemas.session_schema import SessionState, StepEntry
from trinexa.tools.booking import BookingPersister

logger = logging.getLogger(__name__)

INACTIVE = "inactive"
BOOKING_SUCCESS = "booking_success"


def state_name(session: SessionState) -> str:
    """Readable name of the current dialogue state."""
    dialogue = session.dialogue
    if not dialogue.is_active:
        return INACTIVE
    return f"awaiting:{FIELD_SPECS[dialogue.step_index].name}"


class DialogueStepper:
    """Drives one session's booking form from the first prompt to a stored record."""

    def __init__(self, persister: BookingPersister) -> None:
        self.persister = persister

    def current_field(self, session: SessionState) -> FieldSpec:
        return FIELD_SPECS[session.dialogue.step_index]

    def start(self, session: SessionState) -> str:
        """Enter the dialogue at the first field with no answers."""
        session.dialogue.reset()
        session.dialogue.is_active = True
        self._record(session, "booking_intent")
        return FIELD_SPECS[0].prompt

    def cancel(self, session: SessionState) -> str:
        """Abandon the booking from any state, discarding every answer."""
        was_active = session.dialogue.is_active
        session.dialogue.reset()
        if was_active:
            self._record(session, "cancelled")
        return CANCELLED

    async def step(self, session: SessionState, text: str) -> str:
        """
        Apply one visitor answer to the current field.

        Returns the reply to show: a validation error, the next prompt, the
        day's time list, the booking confirmation, or the persistence apology.
        """
        dialogue = session.dialogue
        if not dialogue.is_active:
            raise RuntimeError("Booking dialogue is not active")

        spec = self.current_field(session)
        error = validate(spec, text, dialogue.answers)
        if error:
            return error

        value = normalize(spec, text, dialogue.answers)

        if spec.kind == FieldKind.DAY:
            dialogue.answers[spec.name] = value
            self._advance(session, "day_selected")
            return format_day_times(value)

        if spec.name == "name":
            session.display_name = value

        if dialogue.step_index + 1 < len(FIELD_SPECS):
            dialogue.answers[spec.name] = value
            self._advance(session, f"{spec.name}_answered")
            return self.current_field(session).prompt

        return await self._finalize(session, {**dialogue.answers, spec.name: value})

    async def _finalize(self, session: SessionState, answers: dict[str, str]) -> str:
        result = await self.persister.submit(answers, session)
        if not result["success"]:
            # Stays on the last field; answering it again retries the submit.
            self._record(session, "booking_failed")
            return PERSIST_FAILED

        session.dialogue.reset()
        session.awaiting_feedback = True
        self._record(session, BOOKING_SUCCESS)
        return build_confirmation(
            day=answers["selectedDay"],
            time=answers["selectedTime"],
            product=answers["productInterest"],
            attendees=answers["attendees"],
        )

    def _advance(self, session: SessionState, event: str) -> None:
        session.dialogue.step_index += 1
        self._record(session, event)

    def _record(self, session: SessionState, event: str) -> None:
        state = state_name(session)
        session.trace.append(StepEntry(
            state=state,
            entered_at=datetime.now(timezone.utc),
            event=event,
        ))
        logger.debug("Dialogue transition: %s (event: %s)", state, event)
