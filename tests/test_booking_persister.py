"""Tests for booking record construction and persistence."""

import asyncio
from datetime import date, datetime, time

import pytest

from trinexa.schemas.booking_schema import BookingRecord
from trinexa.tools.booking import (
    BookingPersister,
    InMemoryBookingStore,
    build_record,
    next_weekday_date,
    parse_slot_time,
)

from conftest import (
    FIXED_NOW,
    FailingBookingStore,
    ThreadedSlowBookingStore,
    complete_answers,
    fixed_clock,
)

MONDAY = date(2026, 10, 19)


class SlowBookingStore:
    async def create_booking(self, record):
        await asyncio.sleep(1)
        return {"id": "late"}


class TestNextWeekdayDate:
    def test_later_this_week(self):
        assert next_weekday_date("Wednesday", MONDAY) == date(2026, 10, 21)

    def test_same_weekday_rolls_a_full_week(self):
        assert next_weekday_date("Monday", MONDAY) == date(2026, 10, 26)

    def test_wraps_past_weekend(self):
        friday = date(2026, 10, 23)
        assert next_weekday_date("Tuesday", friday) == date(2026, 10, 27)

    def test_from_sunday(self):
        sunday = date(2026, 10, 25)
        assert next_weekday_date("Monday", sunday) == date(2026, 10, 26)

    def test_unknown_day(self):
        with pytest.raises(ValueError, match="Unknown day"):
            next_weekday_date("Saturday", MONDAY)


class TestParseSlotTime:
    @pytest.mark.parametrize(
        "slot, expected",
        [
            ("10:00 AM", time(10, 0)),
            ("2:00 PM", time(14, 0)),
            ("12:00 PM", time(12, 0)),
            ("12:00 AM", time(0, 0)),
        ],
    )
    def test_twelve_hour_clock(self, slot, expected):
        assert parse_slot_time(slot) == expected

    def test_garbage(self):
        with pytest.raises(ValueError, match="Invalid slot time"):
            parse_slot_time("teatime")


class TestBuildRecord:
    def test_maps_answers(self):
        record = build_record(complete_answers(), FIXED_NOW)
        assert record.name == "Jane Doe"
        assert record.product_interest == "Ayura"
        assert record.attendee_count == 3
        assert record.notes == "none"
        assert record.preferred_date == "2026-10-26T10:00:00+00:00"

    def test_afternoon_slot(self):
        answers = complete_answers(selectedDay="Thursday", selectedTime="4:00 PM")
        record = build_record(answers, FIXED_NOW)
        assert record.preferred_date == "2026-10-22T16:00:00+00:00"

    def test_row_uses_table_columns(self):
        row = build_record(complete_answers(), FIXED_NOW).to_row()
        assert set(row) == {
            "name", "email", "company", "phone",
            "product_interest", "preferred_date", "message",
        }
        assert row["message"] == "none"

    def test_missing_day_leaves_date_empty(self):
        answers = complete_answers()
        del answers["selectedDay"]
        assert build_record(answers, FIXED_NOW).preferred_date is None


class TestBookingPersister:
    @pytest.mark.asyncio
    async def test_success(self, booking_store):
        persister = BookingPersister(booking_store, clock=fixed_clock)
        result = await persister.submit(complete_answers())
        assert result["success"] is True
        assert result["booking_ref"].startswith("DEMO-")
        assert isinstance(result["record"], BookingRecord)
        assert booking_store.get_booking(result["booking_ref"])["email"] == "jane@x.com"

    @pytest.mark.asyncio
    async def test_store_error_is_reported_not_raised(self):
        store = FailingBookingStore()
        persister = BookingPersister(store, clock=fixed_clock)
        result = await persister.submit(complete_answers())
        assert result["success"] is False
        assert "insert rejected" in result["message"]
        assert store.calls == 1

    @pytest.mark.asyncio
    async def test_timeout_is_reported_not_raised(self):
        persister = BookingPersister(SlowBookingStore(), timeout_sec=0.01, clock=fixed_clock)
        result = await persister.submit(complete_answers())
        assert result["success"] is False


class TestInMemoryBookingStore:
    @pytest.mark.asyncio
    async def test_reset_clears_rows(self):
        store = InMemoryBookingStore()
        await store.create_booking(build_record(complete_answers(), FIXED_NOW))
        assert store.calls == 1
        store.reset()
        assert store.all_bookings() == []
        assert store.calls == 0

    @pytest.mark.asyncio
    async def test_unknown_ref(self):
        assert InMemoryBookingStore().get_booking("DEMO-XXXXXX") is None


class TestLocalClock:
    def test_default_clock_is_timezone_aware(self, booking_store):
        persister = BookingPersister(booking_store)
        assert persister.clock().tzinfo is not None

    def test_naive_clock_gives_naive_iso(self):
        naive = datetime(2026, 10, 19, 9, 0)
        record = build_record(complete_answers(), naive)
        assert record.preferred_date == "2026-10-26T10:00:00"


class TestTimedOutInsert:
    @pytest.fixture
    def slow_store(self):
        store = ThreadedSlowBookingStore()
        yield store
        store.release.set()

    @pytest.fixture
    def slow_persister(self, slow_store):
        return BookingPersister(slow_store, timeout_sec=0.05, clock=fixed_clock)

    @pytest.mark.asyncio
    async def test_timeout_parks_insert_on_session(self, slow_store, slow_persister, session):
        result = await slow_persister.submit(complete_answers(), session)
        assert result["success"] is False
        record, pending = session.pending_booking
        assert record.email == "jane@x.com"
        assert not pending.done()
        slow_store.release.set()
        await pending

    @pytest.mark.asyncio
    async def test_retry_while_running_starts_no_second_insert(
        self, slow_store, slow_persister, session
    ):
        await slow_persister.submit(complete_answers(), session)
        retry = await slow_persister.submit(complete_answers(), session)
        assert retry["success"] is False
        assert slow_store.max_in_flight == 1
        assert session.pending_booking is not None
        slow_store.release.set()
        await session.pending_booking[1]

    @pytest.mark.asyncio
    async def test_retry_after_landing_reports_the_original(
        self, slow_store, slow_persister, session
    ):
        await slow_persister.submit(complete_answers(), session)
        slow_store.release.set()
        await session.pending_booking[1]

        retry = await slow_persister.submit(complete_answers(notes="retyped"), session)
        assert retry["success"] is True
        assert retry["booking_ref"] == "SLOW-1"
        assert retry["record"].notes == "none"
        assert len(slow_store.rows) == 1
        assert session.pending_booking is None

    @pytest.mark.asyncio
    async def test_different_booking_waits_for_earlier_insert(
        self, slow_store, slow_persister, session
    ):
        await slow_persister.submit(complete_answers(), session)
        slow_store.release.set()

        result = await slow_persister.submit(
            complete_answers(name="John Roe", email="john@y.org"), session
        )
        assert result["success"] is True
        assert result["record"].name == "John Roe"
        assert [row["name"] for row in slow_store.rows] == ["Jane Doe", "John Roe"]
        assert slow_store.max_in_flight == 1
