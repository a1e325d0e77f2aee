"""
OpenAI provider implementation.

Sends the rendered prompt to the chat completion endpoint, with the
instruction part of the template repeated as a system message.
"""

from typing import Any, Dict

from compendium_translator.config import (
    DEFAULT_OPENAI_MODEL,
    PROMPT_PLACEHOLDER,
    PROMPT_TEXT_LINE,
    PROVIDER_OPENAI
)
from ..base import TranslationClient

OPENAI_CHAT_ENDPOINT = "https://api.openai.com/v1/chat/completions"


class OpenAIProvider(TranslationClient):
    """OpenAI chat completion provider"""

    provider_name = PROVIDER_OPENAI
    default_model = DEFAULT_OPENAI_MODEL
    temperature = 0.3

    def system_prompt(self) -> str:
        """Template without its trailing text line ("" for templates without that line)."""
        system_prompt = self.config.prompt_template.replace(PROMPT_TEXT_LINE, "").strip()
        if PROMPT_PLACEHOLDER in system_prompt:
            return ""
        return system_prompt

    def build_request(self, prompt: str) -> Dict[str, Any]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}"
        }

        messages = []
        system_prompt = self.system_prompt()
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        return {
            "url": OPENAI_CHAT_ENDPOINT,
            "headers": headers,
            "json": {
                "model": self.model,
                "messages": messages,
                "temperature": self.temperature
            }
        }

    def extract_content(self, response_json: Any) -> str:
        # choices[0].message.content
        try:
            content = response_json["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return ""
        return content if isinstance(content, str) else ""
