"""Shared utilities used across the Trinexa assistant."""

import re

_WHITESPACE = re.compile(r"\s+")


def squash(value: str) -> str:
    """Lowercase a string and remove every whitespace character.

    Examples:
        >>> squash(" 11:00 AM ")
        '11:00am'
        >>> squash("Two  PM")
        'twopm'
    """
    return _WHITESPACE.sub("", value.lower())


def contains_any(text: str, keywords: tuple[str, ...] | list[str]) -> bool:
    """Case-insensitive substring check against a keyword list."""
    lower = text.lower()
    return any(keyword in lower for keyword in keywords)


def contains_word(text: str, word: str) -> bool:
    """Case-insensitive whole-word check.

    Examples:
        >>> contains_word("Hi there", "hi")
        True
        >>> contains_word("this", "hi")
        False
    """
    return re.search(rf"\b{re.escape(word)}\b", text, re.IGNORECASE) is not None
