"""
Centralized configuration with environment variable overrides.

Restaurant texts, speech voice settings, and dispatch thresholds are
configurable here. Nothing is hardcoded in dialog or dispatcher logic.
"""

import logging
import os
import re
from dataclasses import dataclass, field

from dotenv import load_dotenv

from fridai.logging_context import install_record_factory

load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] [%(conversation_id)s] %(levelname)s: %(message)s"

_LANGUAGE_TAG = re.compile(r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$")


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class RestaurantConfig:
    """Restaurant-specific texts loaded from environment or defaults."""

    name: str = os.getenv("RESTAURANT_NAME", "Contoso Trattoria")
    assistant_name: str = os.getenv("ASSISTANT_NAME", "Contoso Assistance")
    greeting: str = os.getenv(
        "GREETING_MESSAGE",
        "Hi! I'm a restaurant assistant bot. I can help you with your reservation.",
    )
    discounts_message: str = os.getenv(
        "DISCOUNTS_MESSAGE",
        "This week we have a 25% discount in all of our wine selection",
    )
    specialties_site: str = os.getenv("SPECIALTIES_SITE", "https://contoso-trattoria.example.com")


@dataclass(frozen=True)
class SpeechConfig:
    """Voice font used when rendering speech markup."""

    voice_font_name: str = os.getenv(
        "VOICE_FONT_NAME",
        "Microsoft Server Speech Text to Speech Voice (en-US, JessaRUS)",
    )
    voice_font_language: str = os.getenv("VOICE_FONT_LANGUAGE", "en-US")


@dataclass(frozen=True)
class DispatchConfig:
    """Thresholds used when routing a message that no dialog consumed."""

    intent_threshold: float = _safe_float("INTENT_THRESHOLD", "0.5")
    knowledge_min_score: float = _safe_float("KNOWLEDGE_MIN_SCORE", "0.3")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    restaurant: RestaurantConfig = field(default_factory=RestaurantConfig)
    speech: SpeechConfig = field(default_factory=SpeechConfig)
    dispatch: DispatchConfig = field(default_factory=DispatchConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    bot_name: str = os.getenv("BOT_NAME", "Fridai")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    for name, value in [
        ("INTENT_THRESHOLD", config.dispatch.intent_threshold),
        ("KNOWLEDGE_MIN_SCORE", config.dispatch.knowledge_min_score),
    ]:
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")

    if not _LANGUAGE_TAG.match(config.speech.voice_font_language):
        raise ValueError(
            "VOICE_FONT_LANGUAGE must be a language tag like 'en-US', "
            f"got {config.speech.voice_font_language!r}"
        )
    if not config.speech.voice_font_name.strip():
        raise ValueError("VOICE_FONT_NAME must not be empty")
    if not config.restaurant.specialties_site.startswith(("http://", "https://")):
        raise ValueError(
            f"SPECIALTIES_SITE must be an http(s) URL, got {config.restaurant.specialties_site!r}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    install_record_factory()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Configuration loaded for '%s'", config.restaurant.name)
    return config


# Singleton instance
settings = load_config()
