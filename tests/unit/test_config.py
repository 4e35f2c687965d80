"""
TEST DOC: Configuration

WHAT: Tests for settings loading
WHY: Expansion defaults and tracing are driven by settings
HOW: Load settings with and without environment overrides

CASES:
- Defaults
- Environment overrides for nested settings

EDGE CASES:
- Invalid macro names, literal styles and log levels are rejected
"""

import pytest
from pydantic import ValidationError

from word_numbers.config import ExpansionSettings, Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Defaults expand num! with suffixed literals and no tracing."""
        for name in (
            "WORD_NUMBERS_DEBUG",
            "WORD_NUMBERS_LOG_LEVEL",
            "WORD_NUMBERS_EXPANSION_MACRO_NAME",
            "WORD_NUMBERS_EXPANSION_LITERAL_STYLE",
            "WORD_NUMBERS_OTEL_ENABLED",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()
        assert settings.expansion.macro_name == "num"
        assert settings.expansion.literal_style == "suffixed"
        assert settings.otel.enabled is False
        assert settings.effective_log_level == "WARNING"

    def test_env_overrides(self, monkeypatch):
        """Nested settings read their own env prefixes."""
        monkeypatch.setenv("WORD_NUMBERS_EXPANSION_MACRO_NAME", "words")
        monkeypatch.setenv("WORD_NUMBERS_EXPANSION_LITERAL_STYLE", "plain")
        monkeypatch.setenv("WORD_NUMBERS_OTEL_SERVICE_NAME", "nums-test")

        settings = get_settings()
        assert settings.expansion.macro_name == "words"
        assert settings.expansion.literal_style == "plain"
        assert settings.otel.service_name == "nums-test"

    def test_debug_forces_debug_level(self):
        """Debug output lowers the log level to DEBUG."""
        assert Settings(debug=True, log_level="error").effective_log_level == "DEBUG"
        assert Settings(debug=False, log_level="error").effective_log_level == "ERROR"

    def test_invalid_macro_name(self):
        """Macro names must be identifiers."""
        with pytest.raises(ValidationError):
            ExpansionSettings(macro_name="not a name")

    def test_invalid_style(self):
        """Only suffixed and plain styles exist."""
        with pytest.raises(ValidationError):
            ExpansionSettings(literal_style="hex")

    def test_log_level_case_insensitive(self):
        """Level names are normalized to upper case."""
        assert Settings(log_level="info").log_level == "INFO"

    def test_invalid_log_level(self, monkeypatch):
        """Unknown level names are rejected when settings load."""
        monkeypatch.setenv("WORD_NUMBERS_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            get_settings()
