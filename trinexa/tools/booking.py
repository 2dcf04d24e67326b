"""
Demo booking persistence.

Turns a completed set of dialogue answers into a BookingRecord, works out
the concrete demo date, and hands the record to a storage collaborator.
The in-memory store below is the default for tests and the console demo;
production wires in the hosted table (see ``supabase_store``).
"""

import asyncio
import logging
import uuid
from datetime import date, datetime, time, timedelta
from typing import Any, Callable, Mapping, Optional, Protocol, TypedDict

from trinexa.config import settings
from trinexa.schemas.booking_schema import BookingRecord
from trinexa.schemas.session_schema import SessionState

logger = logging.getLogger(__name__)

WEEKDAYS: dict[str, int] = {
    "Monday": 0,
    "Tuesday": 1,
    "Wednesday": 2,
    "Thursday": 3,
    "Friday": 4,
}

DAYS_PER_WEEK = 7


class BookingStoreError(Exception):
    """Raised by a store when the booking could not be saved."""


class BookingStore(Protocol):
    """Storage collaborator: one insert per completed booking."""

    async def create_booking(self, record: BookingRecord) -> dict[str, Any]:
        ...


class PersistResult(TypedDict, total=False):
    """Outcome of BookingPersister.submit."""

    success: bool
    message: str
    booking_ref: str
    record: BookingRecord


def next_weekday_date(day: str, today: date) -> date:
    """
    Next calendar date falling on ``day``.

    A day matching today rolls to the following week, so bookings always
    have at least a full week of lead time on same-weekday requests.
    """
    if day not in WEEKDAYS:
        raise ValueError(f"Unknown day: {day}")
    days_ahead = (WEEKDAYS[day] - today.weekday()) % DAYS_PER_WEEK
    if days_ahead == 0:
        days_ahead = DAYS_PER_WEEK
    return today + timedelta(days=days_ahead)


def parse_slot_time(slot: str) -> time:
    """Parse a 12-hour slot string such as ``"2:00 PM"``."""
    try:
        return datetime.strptime(slot.strip().upper(), "%I:%M %p").time()
    except ValueError:
        raise ValueError(f"Invalid slot time: {slot!r}") from None


def _local_now() -> datetime:
    return datetime.now().astimezone()


def build_record(answers: Mapping[str, str], now: datetime) -> BookingRecord:
    """Map completed dialogue answers onto a BookingRecord."""
    preferred_date: Optional[str] = None
    day = answers.get("selectedDay")
    slot = answers.get("selectedTime")
    if day and slot:
        demo_day = next_weekday_date(day, now.date())
        start = datetime.combine(demo_day, parse_slot_time(slot), tzinfo=now.tzinfo)
        preferred_date = start.isoformat(timespec="seconds")

    return BookingRecord(
        name=answers["name"],
        email=answers["email"],
        company=answers["company"],
        phone=answers["phone"],
        product_interest=answers["productInterest"],
        attendee_count=int(answers["attendees"]),
        preferred_date=preferred_date,
        notes=answers.get("notes", ""),
    )


def _same_booking(a: BookingRecord, b: BookingRecord) -> bool:
    """Notes may be retyped on a retry; every other column must match."""
    return a.model_dump(exclude={"notes"}) == b.model_dump(exclude={"notes"})


class BookingPersister:
    """
    Builds the record and awaits the store, with a timeout around the call.

    A timeout only stops waiting: the insert itself keeps running and is
    parked on the session. The next submit for that session waits on the
    parked insert instead of starting another one, so a session never has
    two inserts in flight.
    """

    def __init__(
        self,
        store: BookingStore,
        timeout_sec: float = settings.booking.persist_timeout_sec,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        self.store = store
        self.timeout_sec = timeout_sec
        self.clock = clock

    async def submit(
        self, answers: Mapping[str, str], session: Optional[SessionState] = None
    ) -> PersistResult:
        record = build_record(answers, self.clock())

        if session is not None and session.pending_booking is not None:
            earlier, pending = session.pending_booking
            try:
                row = await asyncio.wait_for(asyncio.shield(pending), timeout=self.timeout_sec)
            except asyncio.TimeoutError as exc:
                logger.warning("Earlier insert for %s still running", earlier.email)
                return self._failed(earlier, exc)
            except BookingStoreError as exc:
                session.pending_booking = None
                logger.warning("Earlier insert for %s failed late: %s", earlier.email, exc)
            else:
                session.pending_booking = None
                if _same_booking(earlier, record):
                    return self._stored(earlier, row)
                logger.info("Earlier booking for %s landed after its timeout", earlier.email)

        insert = asyncio.ensure_future(self.store.create_booking(record))
        try:
            row = await asyncio.wait_for(asyncio.shield(insert), timeout=self.timeout_sec)
        except asyncio.TimeoutError as exc:
            if session is not None:
                session.pending_booking = (record, insert)
            return self._failed(record, exc)
        except BookingStoreError as exc:
            return self._failed(record, exc)
        return self._stored(record, row)

    def _failed(self, record: BookingRecord, exc: Exception) -> PersistResult:
        logger.error(
            "Booking persistence failed for %s: %s",
            record.email, str(exc) or type(exc).__name__, exc_info=exc,
        )
        return {"success": False, "message": str(exc) or type(exc).__name__}

    def _stored(self, record: BookingRecord, row: Mapping[str, Any]) -> PersistResult:
        ref = str(row.get("id", ""))
        logger.info(
            "Booking stored: %s for %s (%s) on %s",
            ref or "<no id>", record.name, record.product_interest, record.preferred_date,
        )
        return {
            "success": True,
            "message": "Booking stored.",
            "booking_ref": ref,
            "record": record,
        }


class InMemoryBookingStore:
    """Mock store keeping rows in a dict, keyed by reference number."""

    def __init__(self) -> None:
        self._rows: dict[str, dict[str, Any]] = {}
        self.calls = 0

    async def create_booking(self, record: BookingRecord) -> dict[str, Any]:
        self.calls += 1
        ref = f"DEMO-{uuid.uuid4().hex[:6].upper()}"
        row = {
            "id": ref,
            **record.to_row(),
            "status": "pending",
            "created_at": datetime.now().astimezone().isoformat(),
        }
        self._rows[ref] = row
        logger.debug("Stored booking row %s", ref)
        return row

    def get_booking(self, ref: str) -> Optional[dict[str, Any]]:
        """Retrieve a stored row by reference number."""
        return self._rows.get(ref)

    def all_bookings(self) -> list[dict[str, Any]]:
        return list(self._rows.values())

    def reset(self) -> None:
        """Clear all bookings. Used by test fixtures for isolation."""
        self._rows.clear()
        self.calls = 0
