"""Tests for booking field validation."""

import pytest

from trinexa.conversation.fields import (
    EMPTY_ERROR,
    FIELD_SPECS,
    SELECT_DAY_FIRST,
    FieldKind,
    get_field,
    match_product,
    normalize,
    validate,
)
from trinexa.conversation.slot_matcher import INVALID_DAY, INVALID_TIME


class TestFieldTable:
    def test_field_order(self):
        assert [f.name for f in FIELD_SPECS] == [
            "name", "email", "company", "phone", "productInterest",
            "attendees", "selectedDay", "selectedTime", "notes",
        ]

    def test_every_kind_used_once(self):
        assert {f.kind for f in FIELD_SPECS} == set(FieldKind)

    def test_unknown_field_raises(self):
        with pytest.raises(ValueError, match="Unknown field"):
            get_field("favourite_colour")

    def test_day_prompt_lists_every_day(self):
        prompt = get_field("selectedDay").prompt
        for day in ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday"):
            assert day in prompt


class TestEmptyInput:
    @pytest.mark.parametrize("spec", FIELD_SPECS, ids=lambda s: s.name)
    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_empty_rejected_for_every_field(self, spec, raw):
        assert validate(spec, raw, {"selectedDay": "Monday"}) == EMPTY_ERROR


class TestFieldSpecValidate:
    def test_method_accepts_good_answer(self):
        assert get_field("email").validate(" a@b.co ", {}) is None

    def test_method_matches_module_function(self):
        spec = get_field("email")
        error = spec.validate("jane@example", {})
        assert error is not None
        assert error == validate(spec, "jane@example", {})

    def test_method_sees_earlier_answers(self):
        spec = get_field("selectedTime")
        assert spec.validate("10", {}) == SELECT_DAY_FIRST
        assert spec.validate("10", {"selectedDay": "Monday"}) is None

    def test_method_rejects_empty(self):
        assert get_field("notes").validate("  ", {}) == EMPTY_ERROR


class TestNameAndCompany:
    def test_valid_name(self):
        assert validate(get_field("name"), "Jane Doe", {}) is None

    def test_name_too_short(self):
        assert "at least 2 characters" in validate(get_field("name"), "J", {})

    def test_name_length_ignores_padding(self):
        assert validate(get_field("name"), "  J  ", {}) is not None

    def test_valid_company(self):
        assert validate(get_field("company"), "Acme", {}) is None

    def test_company_too_short(self):
        assert validate(get_field("company"), "A", {}) == "Please provide a valid company name."


class TestEmail:
    def test_valid_email(self):
        assert validate(get_field("email"), "a@b.co", {}) is None

    @pytest.mark.parametrize("raw", ["not-an-email", "a@b", "a b@c.com", "@b.co"])
    def test_invalid_email(self, raw):
        assert validate(get_field("email"), raw, {}) == "Please provide a valid email address."


class TestPhone:
    @pytest.mark.parametrize("raw", ["+1 555 1234567", "0412-345-678", "12345678"])
    def test_valid_phone(self, raw):
        assert validate(get_field("phone"), raw, {}) is None

    @pytest.mark.parametrize("raw", ["1234567", "555-CALL-NOW", "+(61) 412 345 678"])
    def test_invalid_phone(self, raw):
        assert validate(get_field("phone"), raw, {}) == "Please provide a valid phone number."


class TestProductInterest:
    def test_substring_match_is_case_insensitive(self):
        assert validate(get_field("productInterest"), "I want NEXAKYC please", {}) is None

    def test_unknown_product(self):
        error = validate(get_field("productInterest"), "ChatGPT", {})
        assert error == "Please select either Ayura or NexaKYC."

    def test_match_product_returns_catalog_spelling(self):
        assert match_product("ayura") == "Ayura"
        assert match_product("nexakyc pls") == "NexaKYC"

    def test_normalize_stores_catalog_spelling(self):
        assert normalize(get_field("productInterest"), " ayura ", {}) == "Ayura"


class TestAttendees:
    @pytest.mark.parametrize("raw", ["1", "3", "12"])
    def test_positive_integers(self, raw):
        assert validate(get_field("attendees"), raw, {}) is None

    @pytest.mark.parametrize("raw", ["0", "03", "-2", "two", "1.5"])
    def test_rejects_zero_leading_zero_and_words(self, raw):
        error = validate(get_field("attendees"), raw, {})
        assert error == "Please provide a valid number of attendees."


class TestDayAndTime:
    def test_day_substring(self):
        assert validate(get_field("selectedDay"), "i'd like MONDAY please", {}) is None

    def test_weekend_rejected(self):
        assert validate(get_field("selectedDay"), "Saturday", {}) == INVALID_DAY

    def test_time_requires_day(self):
        assert validate(get_field("selectedTime"), "10", {}) == SELECT_DAY_FIRST

    def test_time_valid_for_day(self):
        assert validate(get_field("selectedTime"), "2pm", {"selectedDay": "Monday"}) is None

    def test_time_invalid_for_day(self):
        error = validate(get_field("selectedTime"), "noon", {"selectedDay": "Monday"})
        assert error == INVALID_TIME

    def test_normalize_time_to_slot(self):
        spec = get_field("selectedTime")
        assert normalize(spec, "11am", {"selectedDay": "Tuesday"}) == "11:00 AM"


class TestNotes:
    def test_any_text_accepted(self):
        assert validate(get_field("notes"), "none", {}) is None
