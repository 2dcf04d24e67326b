"""Shared test fixtures and helpers."""

import asyncio
import threading
from datetime import datetime, timezone
from typing import Any

import pytest

from trinexa.agents.chat_agent import ChatAgent
from trinexa.conversation.classifier import ResponseClassifier
from trinexa.conversation.dialogue import DialogueStepper
from trinexa.schemas.booking_schema import BookingRecord
from trinexa.schemas.session_schema import SessionState
from trinexa.tools.booking import BookingPersister, BookingStoreError, InMemoryBookingStore
from trinexa.tools.transcript import InMemoryTranscriptStore

# A Monday morning.
FIXED_NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)

HAPPY_PATH = [
    "demo",
    "Jane Doe",
    "jane@x.com",
    "Acme",
    "+1 555 1234567",
    "Ayura",
    "3",
    "Monday",
    "10",
    "none",
]


def fixed_clock() -> datetime:
    return FIXED_NOW


class FailingBookingStore:
    """Store that rejects every insert, counting the attempts."""

    def __init__(self) -> None:
        self.calls = 0

    async def create_booking(self, record: BookingRecord) -> dict[str, Any]:
        self.calls += 1
        raise BookingStoreError("insert rejected")


class ThreadedSlowBookingStore:
    """Store whose insert blocks a worker thread until released, like a slow hosted call."""

    def __init__(self) -> None:
        self.release = threading.Event()
        self.rows: list[dict[str, Any]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    def _insert(self, row: dict[str, Any]) -> dict[str, Any]:
        self.release.wait(timeout=5)
        self.rows.append(row)
        return {"id": f"SLOW-{len(self.rows)}", **row}

    async def create_booking(self, record: BookingRecord) -> dict[str, Any]:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            return await asyncio.to_thread(self._insert, record.to_row())
        finally:
            self.in_flight -= 1


@pytest.fixture
def session():
    return SessionState(session_id="test-session")


@pytest.fixture
def booking_store():
    store = InMemoryBookingStore()
    yield store
    store.reset()


@pytest.fixture
def transcript_store():
    return InMemoryTranscriptStore()


@pytest.fixture
def persister(booking_store):
    return BookingPersister(booking_store, clock=fixed_clock)


@pytest.fixture
def stepper(persister):
    return DialogueStepper(persister)


@pytest.fixture
def classifier():
    return ResponseClassifier(clock=fixed_clock)


@pytest.fixture
def agent(booking_store, transcript_store, classifier, persister):
    return ChatAgent(
        booking_store=booking_store,
        transcript_store=transcript_store,
        classifier=classifier,
        persister=persister,
    )


def complete_answers(**overrides: str) -> dict[str, str]:
    """Answers for every field, as stored by the dialogue."""
    answers = {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "company": "Acme",
        "phone": "+1 555 1234567",
        "productInterest": "Ayura",
        "attendees": "3",
        "selectedDay": "Monday",
        "selectedTime": "10:00 AM",
        "notes": "none",
    }
    answers.update(overrides)
    return answers
