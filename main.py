"""
Trinexa assistant entry point.

Runs the chat assistant in the terminal, either against the in-memory
booking store (console) or against the hosted Supabase table (hosted).

Usage:
    Console mode:  python main.py console
    Hosted store:  python main.py hosted
    Scenario:      python main.py scenario booking
"""

import asyncio
import logging
import sys

from trinexa.config import settings

logger = logging.getLogger(__name__)


def _run_console_mode() -> None:
    """Start the offline console demo (no credentials required)."""
    from console_demo import ConsoleSession

    asyncio.run(ConsoleSession().run())


def _run_hosted_mode() -> None:
    """Console chat that writes bookings to the hosted table."""
    from console_demo import ConsoleSession
    from trinexa.tools.supabase_store import SupabaseBookingStore

    console = ConsoleSession(booking_store=SupabaseBookingStore())
    logger.info("Writing bookings to table '%s'", settings.storage.bookings_table)
    asyncio.run(console.run())


def _run_scenario(name: str) -> None:
    from console_demo import ConsoleSession

    asyncio.run(ConsoleSession(persist_transcript=False).run_scenario(name))


if __name__ == "__main__":
    mode = sys.argv[1] if len(sys.argv) > 1 else "console"
    if mode == "hosted":
        _run_hosted_mode()
    elif mode == "scenario":
        _run_scenario(sys.argv[2] if len(sys.argv) > 2 else "booking")
    else:
        _run_console_mode()
