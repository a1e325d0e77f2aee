"""
Host collaborators: document storage and notifications
"""
from .interfaces import DocumentStore, Notifier
from .memory_store import InMemoryDocumentStore

__all__ = ['DocumentStore', 'Notifier', 'InMemoryDocumentStore']
