"""
Google Gemini provider implementation.

This module provides the GeminiProvider class for interacting with
Google's Gemini generateContent API.
"""

from typing import Any, Dict

from compendium_translator.config import DEFAULT_GEMINI_MODEL, PROVIDER_GEMINI
from ..base import TranslationClient

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1/models"


class GeminiProvider(TranslationClient):
    """
    Provider for Google Gemini API.

    Configuration:
        api_key: Google AI API key, sent as the ``key`` query parameter
        model: Gemini model name (default: gemini-1.5-flash)

    Example:
        >>> provider = GeminiProvider(ProviderConfiguration(
        ...     provider="gemini", api_key="AI...", model="gemini-1.5-flash"))
        >>> translated = await provider.translate("Hello")
    """

    provider_name = PROVIDER_GEMINI
    default_model = DEFAULT_GEMINI_MODEL

    @property
    def api_endpoint(self) -> str:
        return f"{GEMINI_API_BASE}/{self.model}:generateContent"

    def build_request(self, prompt: str) -> Dict[str, Any]:
        return {
            "url": self.api_endpoint,
            "params": {"key": self.config.api_key},
            "headers": {"Content-Type": "application/json"},
            "json": {
                "contents": [{
                    "parts": [{
                        "text": prompt
                    }]
                }]
            }
        }

    def extract_content(self, response_json: Any) -> str:
        # candidates[0].content.parts[0].text
        try:
            response_text = response_json["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return ""
        return response_text if isinstance(response_text, str) else ""
