"""
Keyword/regex reply classifier for visitors who are not mid-booking.

Categories are checked in a fixed order and the first hit wins. The only
state it touches is the session's remembered display name.
"""

import logging
import random
import re
from datetime import datetime
from typing import Callable, Optional

from trinexa.prompts import responses
from trinexa.schemas.session_schema import SessionState
from trinexa.utils import contains_any, contains_word

logger = logging.getLogger(__name__)

NAME_PATTERNS = [
    re.compile(r"(?:^|\s)i am ([a-zA-Z][a-zA-Z\s\-']{1,30})", re.IGNORECASE),
    re.compile(r"(?:^|\s)i'm ([a-zA-Z][a-zA-Z\s\-']{1,30})", re.IGNORECASE),
    re.compile(r"my name is ([a-zA-Z][a-zA-Z\s\-']{1,30})", re.IGNORECASE),
]

IDENTITY_PHRASES = ["what is your name", "who are you", "your name", "introduce yourself"]
THANKS_PHRASES = ["thank you", "thanks"]

# (keywords, reply) pairs checked after greetings, in order.
TOPICS: list[tuple[list[str], str]] = [
    (["product"], responses.PRODUCTS),
    (["about"], responses.ABOUT),
    (["mission"], responses.MISSION),
    (["vision"], responses.VISION),
    (["value"], responses.VALUES),
    (["ceo", "founder"], responses.FOUNDER),
    (["contact", "reach", "phone"], responses.CONTACT),
    (["purpose"], responses.PURPOSE),
    (["company"], responses.INTRODUCTION),
]


def extract_name(text: str) -> Optional[str]:
    """First word of a self-introduction such as "my name is Jane Doe"."""
    for pattern in NAME_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip().split()[0]
    return None


def _asks_datetime(lower: str) -> bool:
    return (
        "date and time" in lower
        or ("time" in lower and "now" in lower)
        or ("what" in lower and "time" in lower)
        or ("what" in lower and "date" in lower)
    )


class ResponseClassifier:
    """Maps free text to a canned reply."""

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.clock = clock
        self.rng = rng or random.Random()

    def respond(self, session: SessionState, text: str) -> str:
        lower = text.lower()
        name = session.display_name

        introduced = extract_name(text)
        if introduced:
            session.display_name = introduced
            logger.debug("Visitor introduced themselves as %s", introduced)
            return responses.build_nice_to_meet(introduced)

        for trigger in responses.TIME_OF_DAY:
            if trigger in lower:
                return responses.build_time_of_day(trigger, name)

        if _asks_datetime(lower):
            now = self.clock()
            return responses.DATETIME_PREFIX + now.strftime("%m/%d/%Y, %I:%M:%S %p")

        if contains_any(lower, THANKS_PHRASES):
            if name:
                return f"You're welcome, {name}! If you have any more questions, just let me know!"
            return self.rng.choice(responses.THANKS)

        if contains_any(lower, IDENTITY_PHRASES):
            if name:
                return f"Hi {name}, {responses.INTRODUCTION}"
            return responses.INTRODUCTION

        if contains_word(lower, "hello") or contains_word(lower, "hi"):
            if name:
                return f"Hello, {name}! How can I help you today?"
            return self.rng.choice(responses.GREETINGS)

        for keywords, reply in TOPICS:
            if contains_any(lower, keywords):
                return reply

        return responses.DEFAULT
