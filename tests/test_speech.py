"""Tests for SSML speech markup generation."""

from fridai.services.speech import SsmlGenerator


class TestSsmlGenerator:
    def test_wraps_text_in_speak_and_voice(self):
        markup = SsmlGenerator("test-voice").to_markup("Hello there", "en-US")
        assert markup.startswith("<speak version='1.0'")
        assert 'xml:lang="en-US"' in markup
        assert '<voice name="test-voice">Hello there</voice>' in markup
        assert markup.endswith("</speak>")

    def test_escapes_xml_characters(self):
        markup = SsmlGenerator("v").to_markup("Fish & chips <today>", "en-GB")
        assert "Fish &amp; chips &lt;today&gt;" in markup

    def test_invalid_language_falls_back_to_plain_text(self):
        assert SsmlGenerator("v").to_markup("Hello", "not a tag!") == "Hello"

    def test_empty_language_falls_back_to_plain_text(self):
        assert SsmlGenerator("v").to_markup("Hello", "") == "Hello"

    def test_is_deterministic(self):
        gen = SsmlGenerator("v")
        assert gen.to_markup("Hi", "es-ES") == gen.to_markup("Hi", "es-ES")
