"""Trinexa website assistant: FAQ replies and demo booking dialogue."""

__version__ = "0.1.0"
