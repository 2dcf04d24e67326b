"""
Booking form fields: one validator per field kind, driven by a static table.

Each validator receives the stripped answer and the answers collected so
far, and returns None when the answer is acceptable or an error string that
is shown to the visitor verbatim.

Usage:
    spec = get_field("email")
    error = validate(spec, "a@b.co", {})   # None
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Optional

from trinexa.conversation.slot_matcher import (
    INVALID_DAY,
    INVALID_TIME,
    format_availability,
    match_day,
    match_time,
)

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 2
MIN_COMPANY_LENGTH = 2

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[\d\s-]{8,}$")
ATTENDEES_PATTERN = re.compile(r"^[1-9]\d*$")

# Lowercase match key -> catalog spelling
PRODUCTS: dict[str, str] = {"ayura": "Ayura", "nexakyc": "NexaKYC"}

EMPTY_ERROR = "This field cannot be empty."
SELECT_DAY_FIRST = "Please select a day first."


class FieldKind(str, Enum):
    """Validation variant for a booking question."""

    NAME = "name"
    EMAIL = "email"
    COMPANY = "company"
    PHONE = "phone"
    PRODUCT = "product"
    ATTENDEES = "attendees"
    DAY = "day"
    TIME = "time"
    NOTES = "notes"


Validator = Callable[[str, Mapping[str, str]], Optional[str]]


def _validate_name(value: str, answers: Mapping[str, str]) -> Optional[str]:
    if len(value) >= MIN_NAME_LENGTH:
        return None
    return "Please provide your full name (at least 2 characters)."


def _validate_email(value: str, answers: Mapping[str, str]) -> Optional[str]:
    return None if EMAIL_PATTERN.match(value) else "Please provide a valid email address."


def _validate_company(value: str, answers: Mapping[str, str]) -> Optional[str]:
    if len(value) >= MIN_COMPANY_LENGTH:
        return None
    return "Please provide a valid company name."


def _validate_phone(value: str, answers: Mapping[str, str]) -> Optional[str]:
    return None if PHONE_PATTERN.match(value) else "Please provide a valid phone number."


def _validate_product(value: str, answers: Mapping[str, str]) -> Optional[str]:
    return None if match_product(value) else "Please select either Ayura or NexaKYC."


def _validate_attendees(value: str, answers: Mapping[str, str]) -> Optional[str]:
    if ATTENDEES_PATTERN.match(value):
        return None
    return "Please provide a valid number of attendees."


def _validate_day(value: str, answers: Mapping[str, str]) -> Optional[str]:
    return None if match_day(value) else INVALID_DAY


def _validate_time(value: str, answers: Mapping[str, str]) -> Optional[str]:
    day = answers.get("selectedDay")
    if not day:
        return SELECT_DAY_FIRST
    return None if match_time(day, value) else INVALID_TIME


def _validate_notes(value: str, answers: Mapping[str, str]) -> Optional[str]:
    return None


VALIDATORS: dict[FieldKind, Validator] = {
    FieldKind.NAME: _validate_name,
    FieldKind.EMAIL: _validate_email,
    FieldKind.COMPANY: _validate_company,
    FieldKind.PHONE: _validate_phone,
    FieldKind.PRODUCT: _validate_product,
    FieldKind.ATTENDEES: _validate_attendees,
    FieldKind.DAY: _validate_day,
    FieldKind.TIME: _validate_time,
    FieldKind.NOTES: _validate_notes,
}


def match_product(value: str) -> Optional[str]:
    """Return the catalog spelling of the first product named in the text."""
    lower = value.lower()
    for key, canonical in PRODUCTS.items():
        if key in lower:
            return canonical
    return None


@dataclass(frozen=True)
class FieldSpec:
    """One question in the booking form."""

    name: str
    kind: FieldKind
    prompt: str

    def validate(self, raw_value: str, answers: Mapping[str, str]) -> Optional[str]:
        """Error shown to the visitor, or None; empty input fails for every kind."""
        value = raw_value.strip()
        if not value:
            return EMPTY_ERROR
        error = VALIDATORS[self.kind](value, answers)
        if error:
            logger.debug("Field '%s' rejected '%s': %s", self.name, raw_value, error)
        return error


FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec(
        name="name",
        kind=FieldKind.NAME,
        prompt="To get started with booking a demo, could you please provide your full name?",
    ),
    FieldSpec(
        name="email",
        kind=FieldKind.EMAIL,
        prompt=(
            "Great! Now, please share your email address where we can "
            "send the demo confirmation."
        ),
    ),
    FieldSpec(
        name="company",
        kind=FieldKind.COMPANY,
        prompt="Which company are you representing?",
    ),
    FieldSpec(
        name="phone",
        kind=FieldKind.PHONE,
        prompt="Please provide your contact number.",
    ),
    FieldSpec(
        name="productInterest",
        kind=FieldKind.PRODUCT,
        prompt="Which of our products are you interested in? (Ayura or NexaKYC)",
    ),
    FieldSpec(
        name="attendees",
        kind=FieldKind.ATTENDEES,
        prompt="How many people will be attending the demo?",
    ),
    FieldSpec(
        name="selectedDay",
        kind=FieldKind.DAY,
        prompt=format_availability(),
    ),
    FieldSpec(
        name="selectedTime",
        kind=FieldKind.TIME,
        prompt="Please select your preferred time from the available slots.",
    ),
    FieldSpec(
        name="notes",
        kind=FieldKind.NOTES,
        prompt="Any specific topics or questions you would like us to cover in the demo?",
    ),
)


def get_field(name: str) -> FieldSpec:
    for spec in FIELD_SPECS:
        if spec.name == name:
            return spec
    raise ValueError(f"Unknown field: {name}")


def validate(spec: FieldSpec, raw_value: str, answers: Mapping[str, str]) -> Optional[str]:
    return spec.validate(raw_value, answers)


def normalize(spec: FieldSpec, raw_value: str, answers: Mapping[str, str]) -> str:
    """Canonical stored form of an already-validated answer."""
    value = raw_value.strip()
    if spec.kind == FieldKind.PRODUCT:
        return match_product(value) or value
    if spec.kind == FieldKind.DAY:
        return match_day(value) or value
    if spec.kind == FieldKind.TIME:
        return match_time(answers["selectedDay"], value) or value
    return value
