"""
Translation clients for external text-generation providers
"""
from .base import TranslationClient, render_prompt
from .factory import create_translation_client, register_provider, available_providers

__all__ = [
    'TranslationClient',
    'render_prompt',
    'create_translation_client',
    'register_provider',
    'available_providers',
]
