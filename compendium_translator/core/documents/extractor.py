"""
Extraction of translatable text fields from documents.

Each document kind registers a function that lists the (path, text) pairs to
send to translation. Empty, whitespace-only and non-string values are skipped,
so they pass through the rebuild untouched.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from ..models import Document, DocumentKind, FieldPath, TextField

logger = logging.getLogger(__name__)

Extractor = Callable[[Document], List[TextField]]

_MISSING = object()


def get_path_value(data: Any, path: FieldPath) -> Any:
    """Read the value at a field path, or None when any step is missing."""
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(key, _MISSING)
            if current is _MISSING:
                return None
    return current


def is_translatable(value: Any) -> bool:
    """True for non-empty strings that are not only whitespace."""
    return isinstance(value, str) and value.strip() != ""


def _collect(data: Dict[str, Any], paths: List[FieldPath]) -> List[TextField]:
    fields = []
    for path in paths:
        value = get_path_value(data, path)
        if is_translatable(value):
            fields.append(TextField(path=path, text=value))
    return fields


def extract_item_fields(document: Document) -> List[TextField]:
    """Item description and its chat flavor text."""
    return _collect(document.data, [
        ("system", "description", "value"),
        ("system", "description", "chat"),
    ])


def extract_journal_fields(document: Document) -> List[TextField]:
    """Text page bodies and image captions of every page."""
    pages = document.data.get("pages")
    if not isinstance(pages, list):
        return []

    paths: List[FieldPath] = []
    for index, page in enumerate(pages):
        if not isinstance(page, dict):
            continue
        if page.get("type") == "text":
            paths.append(("pages", index, "text", "content"))
        # Captions are translated whatever the page type
        paths.append(("pages", index, "image", "caption"))
    return _collect(document.data, paths)


def extract_actor_fields(document: Document) -> List[TextField]:
    """Actor biography."""
    return _collect(document.data, [("system", "details", "biography", "value")])


_EXTRACTORS: Dict[str, Extractor] = {
    DocumentKind.ITEM.value: extract_item_fields,
    DocumentKind.JOURNAL_ENTRY.value: extract_journal_fields,
    DocumentKind.ACTOR.value: extract_actor_fields,
}


def _kind_key(kind) -> str:
    return kind.value if isinstance(kind, DocumentKind) else str(kind)


def register_extractor(kind: str, extractor: Extractor) -> None:
    """Register (or replace) the extractor used for a document kind."""
    _EXTRACTORS[_kind_key(kind)] = extractor


def get_extractor(kind: str) -> Optional[Extractor]:
    return _EXTRACTORS.get(_kind_key(kind))


def extract_text_fields(document: Document) -> List[TextField]:
    """
    List the text fields of a document that need translation.

    Args:
        document: Source document

    Returns:
        Ordered (path, text) pairs; empty for unknown kinds
    """
    extractor = get_extractor(document.kind)
    if extractor is None:
        logger.debug("No extractor for kind %r, nothing to translate in '%s'",
                     document.kind, document.name)
        return []
    return extractor(document)
