"""
Data models for compendium translation.

Documents are kept as the plain nested dictionaries the host exports; the
classes here only add the typing the pipeline needs around them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

# Ordered keys locating a string inside a document, e.g. ("pages", 0, "text", "content")
FieldPath = Tuple[Union[str, int], ...]


class DocumentKind(str, Enum):
    """Document kinds with translatable fields."""
    ITEM = "Item"
    JOURNAL_ENTRY = "JournalEntry"
    ACTOR = "Actor"


@dataclass
class Document:
    """A document of a collection.

    Attributes:
        kind: Discriminant of the document ("Item", "JournalEntry", "Actor" or any other string)
        data: Field tree of the document, as exported by the host
    """
    kind: str
    data: Dict[str, Any]

    @property
    def id(self) -> Optional[str]:
        return self.data.get("_id")

    @property
    def name(self) -> str:
        return self.data.get("name", "")

    def __repr__(self) -> str:
        return f"Document(kind={self.kind}, id={self.id}, name='{self.name}')"


@dataclass
class Collection:
    """A document collection (compendium) of the host.

    Attributes:
        collection_id: Host identifier of the collection
        label: Display label
        kind: Kind of every document stored in the collection
        ownership: Default permissions given to players
    """
    collection_id: str
    label: str
    kind: str
    ownership: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TextField:
    """A translatable string and where it lives in its document."""
    path: FieldPath
    text: str


@dataclass
class TranslationJob:
    """Translation work for one document of a batch.

    Attributes:
        document: Source document
        fields: Text fields extracted from the document
        translations: Translated text by field path, filled as fields resolve
    """
    document: Document
    fields: List[TextField] = field(default_factory=list)
    translations: Dict[FieldPath, str] = field(default_factory=dict)


@dataclass
class RunSummary:
    """Outcome of a whole translation run."""
    status: str  # "completed" | "empty"
    source_label: str
    target_label: str
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    failed_names: List[str] = field(default_factory=list)
