"""
Interfaces of the host collaborators.

The translation core reads documents from and writes documents to a
DocumentStore, and reports to a Notifier. Hosts provide the implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from compendium_translator.core.models import Collection, Document


class DocumentStore(ABC):
    """Document storage of the host"""

    @abstractmethod
    async def list_documents(self, collection: Collection) -> List[Document]:
        """Return every document of a collection, in collection order."""

    @abstractmethod
    async def find_collection(self, label: str, kind: str) -> Optional[Collection]:
        """Return the collection with this label and document kind, if any."""

    @abstractmethod
    async def create_collection(self, label: str, kind: str,
                                ownership: Dict[str, str]) -> Collection:
        """Create an empty collection."""

    @abstractmethod
    async def create_document(self, collection: Collection, data: Dict[str, Any]) -> Document:
        """
        Create a document in a collection.

        The store assigns a fresh identifier; the data carries none.
        Must be safe to call concurrently.
        """


class Notifier(ABC):
    """User-visible notification and progress sink"""

    @abstractmethod
    def info(self, message: str) -> None:
        pass

    @abstractmethod
    def warn(self, message: str) -> None:
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        pass

    @abstractmethod
    def progress(self, label: str, percent: int) -> None:
        """Display a progress bar at percent (0-100) with a label."""
