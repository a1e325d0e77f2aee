"""
In-memory document store.

Reference implementation of DocumentStore, used by tests and by hosts that
load their collections into memory before a run.
"""

import copy
import logging
import secrets
import string
from typing import Any, Dict, List, Optional

from compendium_translator.core.models import Collection, Document
from .interfaces import DocumentStore

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_letters + string.digits
ID_LENGTH = 16


def random_id(length: int = ID_LENGTH) -> str:
    """Random alphanumeric identifier, as assigned by the host to new documents."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


class InMemoryDocumentStore(DocumentStore):
    """Collections and their documents held in dictionaries"""

    def __init__(self):
        self.collections: Dict[str, Collection] = {}
        self._documents: Dict[str, List[Document]] = {}

    def add_collection(self, label: str, kind: str,
                       documents: Optional[List[Dict[str, Any]]] = None,
                       ownership: Optional[Dict[str, str]] = None) -> Collection:
        """Add a collection holding copies of the given document data."""
        collection = Collection(
            collection_id=f"world.{random_id(8).lower()}",
            label=label,
            kind=kind,
            ownership=dict(ownership or {})
        )
        self.collections[collection.collection_id] = collection
        self._documents[collection.collection_id] = [
            Document(kind=kind, data=copy.deepcopy(data)) for data in documents or []
        ]
        return collection

    def documents(self, collection: Collection) -> List[Document]:
        """Documents currently stored in a collection."""
        return list(self._documents.get(collection.collection_id, []))

    async def list_documents(self, collection: Collection) -> List[Document]:
        return [
            Document(kind=doc.kind, data=copy.deepcopy(doc.data))
            for doc in self._documents.get(collection.collection_id, [])
        ]

    async def find_collection(self, label: str, kind: str) -> Optional[Collection]:
        for collection in self.collections.values():
            if collection.label == label and collection.kind == kind:
                return collection
        return None

    async def create_collection(self, label: str, kind: str,
                                ownership: Dict[str, str]) -> Collection:
        logger.info("Creating collection '%s' (%s)", label, kind)
        return self.add_collection(label, kind, ownership=ownership)

    async def create_document(self, collection: Collection, data: Dict[str, Any]) -> Document:
        if collection.collection_id not in self._documents:
            raise KeyError(f"Unknown collection: {collection.collection_id}")

        document_data = copy.deepcopy(data)
        document_data["_id"] = random_id()
        document = Document(kind=collection.kind, data=document_data)
        self._documents[collection.collection_id].append(document)
        return document
