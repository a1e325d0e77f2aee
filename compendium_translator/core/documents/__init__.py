"""
Document field extraction and rebuild
"""
from .extractor import extract_text_fields, register_extractor, get_path_value
from .rebuilder import rebuild_document, set_path_value

__all__ = [
    'extract_text_fields',
    'register_extractor',
    'get_path_value',
    'rebuild_document',
    'set_path_value',
]
