"""
Offline console demo: chat with the website assistant in a terminal.

Uses the real dialogue, classifier, and persister with the in-memory
booking store, so no hosted database is needed. The transcript is written
to the configured transcript directory just like the widget's history.

Usage:
    python console_demo.py
    python console_demo.py --scenario booking
    python console_demo.py --scenario faq
"""

import argparse
import asyncio
from typing import Optional

from trinexa.agents.chat_agent import ChatAgent
from trinexa.config import settings
from trinexa.conversation.dialogue import state_name
from trinexa.prompts import responses
from trinexa.schemas.session_schema import SessionState
from trinexa.tools.booking import BookingStore, InMemoryBookingStore
from trinexa.tools.transcript import InMemoryTranscriptStore, JsonFileTranscriptStore

BLUE = "\033[94m"
GREEN = "\033[92m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"


class ConsoleSession:
    """Runs one chat session against the assistant in the terminal."""

    # Pre-scripted scenarios for --scenario flag
    SCENARIOS: dict[str, list[str]] = {
        "booking": [
            "Hi, my name is Jane",
            "I'd like to book a demo",
            "Jane Doe",
            "jane@example",
            "jane@example.com",
            "Acme Health",
            "+1 555 1234567",
            "Ayura",
            "3",
            "monday please",
            "10",
            "Scheduling and session analytics",
            "thanks!",
        ],
        "faq": [
            "hello",
            "what products do you have?",
            "who is the founder?",
            "how can I contact you?",
            "thank you",
        ],
        "cancel": [
            "schedule a demo",
            "John Smith",
            "cancel",
            "what is your mission?",
        ],
    }

    def __init__(
        self,
        persist_transcript: bool = True,
        booking_store: Optional[BookingStore] = None,
    ) -> None:
        self.bookings = booking_store or InMemoryBookingStore()
        transcripts = JsonFileTranscriptStore() if persist_transcript else InMemoryTranscriptStore()
        self.agent = ChatAgent(booking_store=self.bookings, transcript_store=transcripts)
        self.session: SessionState = self.agent.start_session("console")

    def bot_say(self, text: str) -> None:
        print(f"{GREEN}{BOLD}[{settings.company.name}]{RESET} {GREEN}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def _banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.company.name.upper()} ASSISTANT - {title}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

    def _summary(self) -> None:
        print(f"\n{BOLD}{'=' * 60}{RESET}")
        trace = " -> ".join(entry.state for entry in self.session.trace) or "inactive"
        print(f"{DIM}  Dialogue trace: {trace}{RESET}")
        if isinstance(self.bookings, InMemoryBookingStore):
            print(f"{DIM}  Bookings stored: {len(self.bookings.all_bookings())}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    async def _process(self, text: str) -> None:
        reply = await self.agent.handle_message(self.session, text)
        if reply:
            self.bot_say(reply)
        self.system_log(f"State: {state_name(self.session)}")
        if self.session.messages and self.session.messages[-1].text == responses.FEEDBACK_PROMPT:
            self.bot_say(responses.FEEDBACK_PROMPT)
            self.system_log("Type 'feedback <text>' to answer")

    async def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        self._banner(f"Scenario: {scenario}")
        for step in steps:
            print(f"\n{BLUE}[Visitor] {RESET}{step}")
            await self._process(step)
        self._summary()

    async def run(self) -> None:
        self._banner("Console Demo (type 'quit' to exit)")
        self.system_log(f"Loaded {len(self.session.messages)} messages from history")

        while True:
            user_input = (await asyncio.to_thread(input, f"\n{BLUE}[Visitor] {RESET}")).strip()
            if not user_input:
                continue
            if user_input.lower() in ("quit", "exit", "q"):
                print(f"\n{DIM}Session ended.{RESET}")
                break
            if self.session.awaiting_feedback and user_input.lower().startswith("feedback "):
                self.bot_say(await self.agent.submit_feedback(self.session, user_input[9:]))
                continue
            await self._process(user_input)

        self._summary()


def main() -> None:
    parser = argparse.ArgumentParser(description="Offline console demo")
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleSession.SCENARIOS),
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    args = parser.parse_args()

    if args.scenario:
        session = ConsoleSession(persist_transcript=False)
        asyncio.run(session.run_scenario(args.scenario))
    else:
        asyncio.run(ConsoleSession().run())


if __name__ == "__main__":
    main()
