"""
Speech markup (SSML) generation for voice channels.

The markup wraps the plain text in a ``<speak>`` document addressed to the
configured voice font. Generation never fails: an invalid language tag
falls back to the plain text so delivery is never blocked.
"""

import logging
import re
from typing import Protocol
from xml.sax.saxutils import escape, quoteattr

from fridai.config import settings

logger = logging.getLogger(__name__)

ENGLISH_LANGUAGE = "en-US"

_LANGUAGE_TAG = re.compile(r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$")


class SpeechMarkupGenerator(Protocol):
    def to_markup(self, text: str, language: str) -> str: ...


class SsmlGenerator:
    """Renders plain text as SSML for a single voice font."""

    def __init__(self, voice_name: str = settings.speech.voice_font_name) -> None:
        self._voice_name = voice_name

    @property
    def voice_name(self) -> str:
        return self._voice_name

    def to_markup(self, text: str, language: str = ENGLISH_LANGUAGE) -> str:
        if not _LANGUAGE_TAG.match(language or ""):
            logger.warning("Invalid language tag %r; sending plain text", language)
            return text
        return (
            "<speak version='1.0' xmlns='http://www.w3.org/2001/10/synthesis' "
            f"xml:lang={quoteattr(language)}>"
            f"<voice name={quoteattr(self._voice_name)}>{escape(text)}</voice>"
            "</speak>"
        )
