"""Unit tests for custom exceptions."""

from compendium_translator.core.exceptions import (
    CompendiumTranslationError,
    ConfigError,
    ProviderError,
    EmptySourceError,
    CollectionCreationError
)


class TestCompendiumTranslationError:
    """Test base exception class."""

    def test_message_and_str(self):
        error = CompendiumTranslationError("Test error")
        assert error.message == "Test error"
        assert str(error) == "CompendiumTranslationError: Test error"

    def test_context_in_str(self):
        error = ConfigError("Bad prompt", context={"occurrences": 2})
        assert error.context == {"occurrences": 2}
        assert str(error) == "ConfigError: Bad prompt (context: occurrences=2)"

    def test_hierarchy(self):
        for cls in (ConfigError, ProviderError, EmptySourceError, CollectionCreationError):
            assert issubclass(cls, CompendiumTranslationError)


class TestProviderError:
    """Test provider error attributes."""

    def test_attributes(self):
        error = ProviderError("gemini error: HTTP 403 Forbidden", provider="gemini", status_code=403)
        assert error.provider == "gemini"
        assert error.status_code == 403

    def test_defaults(self):
        error = ProviderError("network down")
        assert error.provider is None
        assert error.status_code is None
        assert error.context == {}
