"""
Restaurant bot entry point.

The bot core is channel-agnostic; this entry point hosts it on the
bundled console channel. Other channels wire ``fridai.bot.build_dispatcher``
into their own message loop.

Usage:
    Interactive:  python main.py
    Scripted:     python main.py --scenario reservation
"""

import logging

from fridai.config import settings

logger = logging.getLogger(__name__)


def _run_console_mode() -> None:
    """Start the offline console channel (no external services required)."""
    from console_demo import main as console_main

    logger.info("Starting %s on the console channel", settings.bot_name)
    console_main()


if __name__ == "__main__":
    _run_console_mode()
