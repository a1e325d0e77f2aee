"""
Provider Implementations

Providers:
    - openai: OpenAI chat completions
    - gemini: Google Gemini API
"""
from .openai import OpenAIProvider
from .gemini import GeminiProvider

__all__ = ['OpenAIProvider', 'GeminiProvider']
