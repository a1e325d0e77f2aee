"""Translation client factory."""

from typing import Dict, List, Optional, Type
import httpx

from compendium_translator.config import ProviderConfiguration, PROVIDER_OPENAI, PROVIDER_GEMINI
from ..exceptions import ConfigError
from .base import TranslationClient
from .providers import OpenAIProvider, GeminiProvider

_providers: Dict[str, Type[TranslationClient]] = {
    PROVIDER_OPENAI: OpenAIProvider,
    PROVIDER_GEMINI: GeminiProvider,
}


def register_provider(name: str, provider_class: Type[TranslationClient]) -> None:
    """Register a new provider adapter."""
    _providers[name.lower()] = provider_class


def available_providers() -> List[str]:
    return list(_providers.keys())


def create_translation_client(
    config: ProviderConfiguration,
    client: Optional[httpx.AsyncClient] = None
) -> TranslationClient:
    """Create the translation client matching the configured provider."""
    provider = (config.provider or "").lower()
    if provider not in _providers:
        raise ConfigError(
            f"Unknown provider: {config.provider}. Available: {available_providers()}"
        )
    return _providers[provider](config, client=client)
