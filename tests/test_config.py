"""Tests for configuration loading and validation."""

import pytest

from fridai.config import AppConfig, _validate_config


def _config_with(**overrides):
    """Build an AppConfig bypassing the frozen dataclass to inject bad values."""
    from fridai.config import DispatchConfig, RestaurantConfig, SpeechConfig

    sections = {
        "restaurant": RestaurantConfig(),
        "speech": SpeechConfig(),
        "dispatch": DispatchConfig(),
        "log_level": "INFO",
        "bot_name": "test",
    }
    sections.update(overrides)
    config = AppConfig.__new__(AppConfig)
    for name, value in sections.items():
        object.__setattr__(config, name, value)
    return config


class TestConfigValidation:
    def test_default_config_passes_validation(self):
        config = AppConfig()
        _validate_config(config)  # should not raise

    def test_default_threshold_is_one_half(self):
        assert AppConfig().dispatch.intent_threshold == pytest.approx(0.5)

    def test_threshold_above_one(self):
        from fridai.config import DispatchConfig

        dispatch = DispatchConfig.__new__(DispatchConfig)
        object.__setattr__(dispatch, "intent_threshold", 1.5)
        object.__setattr__(dispatch, "knowledge_min_score", 0.3)

        with pytest.raises(ValueError, match="INTENT_THRESHOLD"):
            _validate_config(_config_with(dispatch=dispatch))

    def test_negative_knowledge_score(self):
        from fridai.config import DispatchConfig

        dispatch = DispatchConfig.__new__(DispatchConfig)
        object.__setattr__(dispatch, "intent_threshold", 0.5)
        object.__setattr__(dispatch, "knowledge_min_score", -0.1)

        with pytest.raises(ValueError, match="KNOWLEDGE_MIN_SCORE"):
            _validate_config(_config_with(dispatch=dispatch))

    def test_invalid_voice_language(self):
        from fridai.config import SpeechConfig

        speech = SpeechConfig.__new__(SpeechConfig)
        object.__setattr__(speech, "voice_font_name", "voice")
        object.__setattr__(speech, "voice_font_language", "english please")

        with pytest.raises(ValueError, match="VOICE_FONT_LANGUAGE"):
            _validate_config(_config_with(speech=speech))

    def test_invalid_specialties_site(self):
        from fridai.config import RestaurantConfig

        restaurant = RestaurantConfig.__new__(RestaurantConfig)
        for name in ("name", "assistant_name", "greeting", "discounts_message"):
            object.__setattr__(restaurant, name, "x")
        object.__setattr__(restaurant, "specialties_site", "ftp://example.com")

        with pytest.raises(ValueError, match="SPECIALTIES_SITE"):
            _validate_config(_config_with(restaurant=restaurant))

    def test_safe_float_parsing(self):
        from fridai.config import _safe_float

        assert _safe_float("NONEXISTENT_VAR_12345", "0.75") == pytest.approx(0.75)

    def test_safe_float_rejects_garbage(self, monkeypatch):
        from fridai.config import _safe_float

        monkeypatch.setenv("FRIDAI_TEST_FLOAT", "high")
        with pytest.raises(ValueError, match="FRIDAI_TEST_FLOAT"):
            _safe_float("FRIDAI_TEST_FLOAT", "0.5")
