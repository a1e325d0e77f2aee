"""
Rebuild of translated documents.

The rebuild is a pure function of the original document data and the
translations keyed by field path: the original is deep-copied, never mutated.
"""

import copy
from typing import Any, Dict, List, Mapping

from ..models import FieldPath

# Identity and location fields that must not be carried into the destination
STRIPPED_FIELDS = ("_id", "pack", "folder")

PAGES_KEY = "pages"


def set_path_value(data: Any, path: FieldPath, value: Any) -> None:
    """
    Write a value at a field path, creating intermediate mappings as needed.

    Raises:
        KeyError: If a list index in the path does not exist
    """
    current = data
    for key in path[:-1]:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                raise KeyError(f"Invalid list index {key} in path {path}")
            current = current[key]
        else:
            if not isinstance(current.get(key), (dict, list)):
                current[key] = {}
            current = current[key]
    current[path[-1]] = value


def _rebuild_pages(
    pages: List[Any],
    translations: Mapping[FieldPath, str]
) -> List[Any]:
    """Rebuild the embedded page array, one independent copy per page."""
    # Translations addressed to each page, relative to the page
    per_page: Dict[int, Dict[FieldPath, str]] = {}
    for path, text in translations.items():
        if len(path) > 2 and path[0] == PAGES_KEY and isinstance(path[1], int):
            per_page.setdefault(path[1], {})[path[2:]] = text

    rebuilt = []
    for index, page in enumerate(pages):
        page_copy = copy.deepcopy(page)
        if isinstance(page_copy, dict):
            page_copy.pop("_id", None)
            for sub_path, text in per_page.get(index, {}).items():
                set_path_value(page_copy, sub_path, text)
        rebuilt.append(page_copy)
    return rebuilt


def rebuild_document(
    original: Mapping[str, Any],
    translations: Mapping[FieldPath, str],
    name_prefix: str
) -> Dict[str, Any]:
    """
    Build the creation data of a translated document.

    Args:
        original: Field tree of the source document
        translations: Translated text by field path
        name_prefix: Marker prepended to the original name

    Returns:
        New document data without identity fields, with a prefixed name
        and the translated text substituted at each path
    """
    rebuilt = copy.deepcopy(dict(original))
    for key in STRIPPED_FIELDS:
        rebuilt.pop(key, None)

    rebuilt["name"] = f"{name_prefix}{original.get('name', '')}"

    # Pages are replaced wholesale, never merged
    pages = original.get(PAGES_KEY)
    if isinstance(pages, list):
        rebuilt[PAGES_KEY] = _rebuild_pages(pages, translations)

    for path, text in translations.items():
        if path and path[0] == PAGES_KEY and isinstance(pages, list):
            continue
        set_path_value(rebuilt, path, text)

    return rebuilt
