"""
Fuzzy day and time matching against the fixed weekly demo availability.

Visitors type things like "i'd like MONDAY please" or "11am"; these helpers
resolve free text to the canonical weekday name and slot string.

Usage:
    day = match_day("monday works")          # "Monday"
    slot = match_time(day, "10")             # "10:00 AM"
"""

import logging
import re
from typing import Callable, Optional

from trinexa.schemas.booking_schema import AvailabilitySlot
from trinexa.utils import squash

logger = logging.getLogger(__name__)

AVAILABILITY: list[AvailabilitySlot] = [
    AvailabilitySlot(day="Monday", times=["10:00 AM", "2:00 PM", "4:00 PM"]),
    AvailabilitySlot(day="Tuesday", times=["11:00 AM", "3:00 PM", "5:00 PM"]),
    AvailabilitySlot(day="Wednesday", times=["9:00 AM", "1:00 PM", "3:00 PM"]),
    AvailabilitySlot(day="Thursday", times=["10:00 AM", "2:00 PM", "4:00 PM"]),
    AvailabilitySlot(day="Friday", times=["11:00 AM", "2:00 PM", "4:00 PM"]),
]

INVALID_DAY = "Please select a valid day from the available options."
INVALID_TIME = "Please select a valid time from the available slots."

_MERIDIEM = re.compile(r":|am|pm")


def get_times(day: str) -> list[str]:
    """Return the slot list for a weekday, in table order."""
    for slot in AVAILABILITY:
        if slot.day == day:
            return list(slot.times)
    raise ValueError(f"Unknown day: {day}")


def match_day(text: str) -> Optional[str]:
    """Return the first weekday whose name appears anywhere in the text."""
    lower = text.lower()
    for slot in AVAILABILITY:
        if slot.day.lower() in lower:
            return slot.day
    return None


def _digits(value: str) -> str:
    return _MERIDIEM.sub("", value)


def _hour_matches(slot: str, candidate: str) -> bool:
    wanted = _digits(candidate)
    return _digits(slot) == wanted or slot.split(":", 1)[0] == wanted


# Ordered from strictest to loosest; the first rule with any hit decides.
_TIME_RULES: list[tuple[str, Callable[[str, str], bool]]] = [
    ("exact", lambda slot, cand: slot == cand),
    ("no_colon", lambda slot, cand: slot.replace(":", "") == cand),
    ("prefix", lambda slot, cand: slot.startswith(cand)),
    ("hour", _hour_matches),
    ("substring", lambda slot, cand: cand in slot),
    ("short_prefix", lambda slot, cand: len(cand) <= 2 and slot.startswith(cand)),
]


def match_time(day: str, text: str) -> Optional[str]:
    """
    Resolve free-text time input to one of the day's slots.

    Both sides are lowercased with whitespace removed before comparison.
    Rules are tried in order across the whole slot list, so a strict match
    on a later slot beats a loose match on an earlier one.
    """
    candidate = squash(text)
    if not candidate:
        return None
    slots = get_times(day)
    for rule_name, rule in _TIME_RULES:
        for slot in slots:
            if rule(squash(slot), candidate):
                logger.debug("Time '%s' matched %s via %s rule", text, slot, rule_name)
                return slot
    return None


def format_day_times(day: str) -> str:
    """Reply sent once a day is chosen, listing that day's times."""
    times = ", ".join(get_times(day))
    return (
        f"Great! Here are the available times for {day}: {times}. "
        "Please select your preferred time."
    )


def format_availability() -> str:
    """Full weekly overview used as the day-selection prompt."""
    lines = [f"{slot.day}: {', '.join(slot.times)}" for slot in AVAILABILITY]
    return (
        "I'd be happy to help you schedule a demo session! "
        "Here are our available time slots:\n\n"
        + "\n".join(lines)
        + "\n\nPlease let me know which day and time works best for you, "
        "and I'll help you book the session."
    )
