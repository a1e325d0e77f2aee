"""
Exception hierarchy for compendium translation.

Configuration errors abort a run before any batch starts, provider errors are
caught per document, and an empty source ends the run with a warning.
"""

from typing import Optional, Dict, Any


class CompendiumTranslationError(Exception):
    """Base exception for all compendium translation errors.

    Attributes:
        message: Human-readable error message
        context: Additional context about the error
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        base = f"{self.__class__.__name__}: {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base += f" (context: {context_str})"
        return base


class ConfigError(CompendiumTranslationError):
    """Raised for a missing credential, a malformed prompt template or an unknown provider."""
    pass


class ProviderError(CompendiumTranslationError):
    """Raised when a provider call fails (non-2xx status, network failure, unparseable body).

    Attributes:
        provider: Provider identifier
        status_code: HTTP status code, if a response was received
    """

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, context)
        self.provider = provider
        self.status_code = status_code


class EmptySourceError(CompendiumTranslationError):
    """Raised when the source collection holds no document."""
    pass


class CollectionCreationError(CompendiumTranslationError):
    """Raised when the destination collection cannot be created."""
    pass
