"""
Centralized configuration with environment variable overrides.

Company facts, booking dialogue knobs, and storage settings are all
configurable here. Nothing is hardcoded in the dialogue or store logic.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from trinexa.logging_context import session_handler

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


def _csv_tuple(env_var: str, default: str) -> tuple[str, ...]:
    """Parse a comma-separated env var into a lowercase tuple."""
    raw = os.getenv(env_var, default)
    return tuple(part.strip().lower() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class CompanyConfig:
    """Company facts quoted by the canned responses."""

    name: str = os.getenv("COMPANY_NAME", "Trinexa")
    contact_phone: str = os.getenv("CONTACT_PHONE", "+94 779 305 395")
    location: str = os.getenv("COMPANY_LOCATION", "Colombo, Sri Lanka")
    founder: str = os.getenv("FOUNDER_NAME", "Thenuka Wijewardena")
    founded_year: int = _safe_int("FOUNDED_YEAR", "2025")


@dataclass(frozen=True)
class BookingConfig:
    """Demo booking dialogue settings."""

    triggers: tuple[str, ...] = _csv_tuple("BOOKING_TRIGGERS", "demo,book,schedule")
    cancel_commands: tuple[str, ...] = _csv_tuple(
        "CANCEL_COMMANDS", "cancel,/cancel,cancel booking,stop booking"
    )
    persist_timeout_sec: float = _safe_float("PERSIST_TIMEOUT_SEC", "10.0")
    max_input_length: int = _safe_int("MAX_INPUT_LENGTH", "500")


@dataclass(frozen=True)
class StorageConfig:
    """Hosted database and transcript storage settings."""

    supabase_url: str = os.getenv("SUPABASE_URL", "")
    supabase_key: str = os.getenv("SUPABASE_KEY", "")
    bookings_table: str = os.getenv("BOOKINGS_TABLE", "demo_bookings")
    transcript_dir: str = os.getenv("TRANSCRIPT_DIR", ".chat_history")
    transcript_key: str = os.getenv("TRANSCRIPT_KEY", "trinexa_chat_history")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    company: CompanyConfig = field(default_factory=CompanyConfig)
    booking: BookingConfig = field(default_factory=BookingConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not config.booking.triggers:
        raise ValueError("BOOKING_TRIGGERS must name at least one keyword")
    if not config.booking.cancel_commands:
        raise ValueError("CANCEL_COMMANDS must name at least one command")
    if config.booking.persist_timeout_sec <= 0:
        raise ValueError(
            f"PERSIST_TIMEOUT_SEC must be > 0, got {config.booking.persist_timeout_sec}"
        )
    if config.booking.max_input_length < 1:
        raise ValueError(
            f"MAX_INPUT_LENGTH must be >= 1, got {config.booking.max_input_length}"
        )
    if not config.storage.bookings_table:
        raise ValueError("BOOKINGS_TABLE must not be empty")
    if not config.storage.transcript_key:
        raise ValueError("TRANSCRIPT_KEY must not be empty")
    if config.company.founded_year < 1900:
        raise ValueError(
            f"FOUNDED_YEAR must be >= 1900, got {config.company.founded_year}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        handlers=[session_handler()],
    )
    logger.info("Configuration loaded for '%s'", config.company.name)
    return config


# Singleton instance
settings = load_config()
