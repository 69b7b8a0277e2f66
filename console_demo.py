"""
Offline console channel: chat with the restaurant bot in the terminal.

Runs the real turn dispatcher, reservation dialog, and state store with
the offline keyword recognizer and FAQ knowledge base. No network calls.

Usage:
    python console_demo.py
    python console_demo.py --scenario reservation
    python console_demo.py --scenario faq
"""

import argparse
import asyncio
import uuid

from fridai.bot import build_dispatcher
from fridai.config import settings
from fridai.schemas.activity_schema import Activity, ActivityType, OutboundMessage

BLUE = "\033[94m"
GREEN = "\033[92m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

BOT_ID = "fridai-bot"
USER_ID = "console-user"


class ConsoleSession:
    """Delivers console input to the dispatcher as one conversation."""

    def __init__(self) -> None:
        self.dispatcher = build_dispatcher()
        self.conversation_id = f"console-{uuid.uuid4().hex[:8]}"
        self.show_markup = False

    # Pre-scripted scenarios for --scenario flag
    SCENARIOS: dict[str, list[str]] = {
        "reservation": [
            "I'd like to reserve a table",
            "tomorrow at 8pm",
            "a few of us",
            "4",
            "Jane Doe",
            "hmm",
            "yes",
        ],
        "prefilled": [
            "Can I book a table for 4 tomorrow at 7pm?",
            "John Smith",
            "no",
        ],
        "faq": [
            "What are your opening hours?",
            "Is there parking?",
            "Do you deliver to the moon?",
        ],
        "specials": [
            "What are today's specialties?",
            "Any discounts this week?",
        ],
    }

    MAX_INPUT_LENGTH = 500

    def bot_say(self, message: OutboundMessage) -> None:
        print(f"{GREEN}{BOLD}[{settings.bot_name}]{RESET} {GREEN}{message.text}{RESET}")
        for card in message.attachments:
            titles = ", ".join(b.title for b in card.buttons)
            print(f"{DIM}  [{message.attachment_layout.value} card] {titles}{RESET}")
        if self.show_markup and message.speak:
            print(f"{DIM}  >> {message.speak}{RESET}")

    def _send(self, activity: Activity) -> None:
        for message in asyncio.run(self.dispatcher.on_turn(activity)):
            self.bot_say(message)

    def _join(self) -> None:
        self._send(Activity(
            type=ActivityType.CONVERSATION_UPDATE,
            conversation_id=self.conversation_id,
            recipient_id=BOT_ID,
            members_added=[BOT_ID, USER_ID],
        ))

    def _say(self, text: str) -> None:
        self._send(Activity(
            type=ActivityType.MESSAGE,
            conversation_id=self.conversation_id,
            recipient_id=BOT_ID,
            text=text,
        ))

    def _banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {title}{RESET}")
        print(f"{BOLD}  Restaurant: {settings.restaurant.name}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        self._banner(f"RESTAURANT BOT - Scenario: {scenario}")
        self._join()
        for step in steps:
            print(f"\n{BLUE}[Guest] {RESET}{step}")
            self._say(step)

        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  Scenario '{scenario}' complete.{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def run(self) -> None:
        self._banner("RESTAURANT BOT - Console Demo  (type 'quit' to exit)")
        self._join()

        while True:
            user_input = input(f"\n{BLUE}[Guest] {RESET}").strip()
            if not user_input:
                continue
            if user_input.lower() in ("quit", "exit", "q"):
                print(f"\n{DIM}Session ended.{RESET}")
                return
            if len(user_input) > self.MAX_INPUT_LENGTH:
                print(f"{RED}Message too long ({len(user_input)} characters).{RESET}")
                continue
            self._say(user_input)


def main() -> None:
    parser = argparse.ArgumentParser(description="Offline console demo")
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleSession.SCENARIOS),
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    parser.add_argument(
        "--show-markup",
        action="store_true",
        help="Print the speech markup sent with each message",
    )
    args = parser.parse_args()

    session = ConsoleSession()
    session.show_markup = args.show_markup
    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
