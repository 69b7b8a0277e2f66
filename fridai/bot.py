"""
Bot wiring: builds a turn dispatcher from configuration.

Collaborators are passed in explicitly; the defaults are the offline
backends so the console channel runs without any external service.
"""

import logging
from typing import Optional

from fridai.config import settings
from fridai.conversation.dispatcher import TurnDispatcher
from fridai.services.knowledge import FaqKnowledgeBase, KnowledgeAnswerer
from fridai.services.recognizer import KeywordRecognizer, Recognizer
from fridai.services.speech import SsmlGenerator

logger = logging.getLogger(__name__)


def build_dispatcher(
    recognizer: Optional[Recognizer] = None,
    answerer: Optional[KnowledgeAnswerer] = None,
) -> TurnDispatcher:
    """Create a dispatcher with configured speech settings and thresholds."""
    dispatcher = TurnDispatcher(
        recognizer=recognizer or KeywordRecognizer(),
        answerer=answerer or FaqKnowledgeBase(),
        speech=SsmlGenerator(settings.speech.voice_font_name),
        intent_threshold=settings.dispatch.intent_threshold,
        language=settings.speech.voice_font_language,
    )
    logger.info("Dispatcher ready for '%s' (%s)", settings.bot_name, settings.restaurant.name)
    return dispatcher
