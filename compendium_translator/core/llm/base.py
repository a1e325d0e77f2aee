"""
Base class for translation clients.

A translation client turns one raw text into one translated string through an
external text-generation provider. Each provider adapter owns its request and
response schema; no retry and no caching happen at this level.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import httpx

from compendium_translator.config import ProviderConfiguration, PROMPT_PLACEHOLDER, count_placeholders
from ..exceptions import ConfigError, ProviderError

logger = logging.getLogger(__name__)


def render_prompt(template: str, text: str) -> str:
    """
    Substitute the text at the single placeholder of a prompt template.

    Raises:
        ConfigError: If the template does not contain exactly one placeholder
    """
    occurrences = count_placeholders(template)
    if occurrences != 1:
        raise ConfigError(
            f"Prompt template must contain the placeholder {PROMPT_PLACEHOLDER} exactly once",
            context={"occurrences": occurrences}
        )
    return template.replace(PROMPT_PLACEHOLDER, text, 1)


class TranslationClient(ABC):
    """Abstract base class for provider adapters"""

    provider_name = "unknown"
    default_model = ""

    def __init__(self, config: ProviderConfiguration, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the translation client.

        Args:
            config: Provider configuration of the run
            client: Optional HTTP client (a pooled client is created on first use otherwise)
        """
        self.config = config
        self.model = config.model or self.default_model
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create a persistent HTTP client with connection pooling"""
        if self._client is None:
            self._client = httpx.AsyncClient(
                limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
                timeout=httpx.Timeout(self.config.request_timeout)
            )
        return self._client

    async def close(self):
        """Close the HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    @abstractmethod
    def build_request(self, prompt: str) -> Dict[str, Any]:
        """
        Build the provider-specific request.

        Returns:
            Keyword arguments for httpx.AsyncClient.post (url, json, headers, params)
        """

    @abstractmethod
    def extract_content(self, response_json: Any) -> str:
        """Extract the generated text, or "" when the response carries none."""

    async def translate(self, raw_text: str) -> str:
        """
        Translate one text.

        Args:
            raw_text: Text to translate

        Returns:
            Translated text ("" if the provider answered without content)

        Raises:
            ConfigError: If the prompt template is malformed
            ProviderError: On transport failure, non-2xx status or unparseable body
        """
        if not raw_text:
            return ""

        prompt = render_prompt(self.config.prompt_template, raw_text)
        request = self.build_request(prompt)

        client = await self._get_client()
        try:
            response = await client.post(**request)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = e.response.text[:500] if e.response is not None else ""
            logger.warning("%s API HTTP error %s: %s", self.provider_name,
                           e.response.status_code, body[:200])
            raise ProviderError(
                f"{self.provider_name} error: HTTP {e.response.status_code} {e.response.reason_phrase}",
                provider=self.provider_name,
                status_code=e.response.status_code,
                context={"body": body[:200]} if body else None
            ) from e
        except httpx.HTTPError as e:
            logger.warning("%s API request failed: %s", self.provider_name, e)
            raise ProviderError(
                f"{self.provider_name} request failed: {e}",
                provider=self.provider_name
            ) from e

        try:
            response_json = response.json()
        except ValueError as e:
            raise ProviderError(
                f"{self.provider_name} returned an unparseable body",
                provider=self.provider_name,
                status_code=response.status_code
            ) from e

        content = self.extract_content(response_json)
        if not content:
            logger.debug("%s response carried no content", self.provider_name)
        return content
