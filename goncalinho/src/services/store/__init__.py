"""Storage services package.

This package provides storage-related services including:
- DocumentStore: JSON-based storage for uploaded file records
- AnswerCache: In-memory, time-expiring cache of model answers

Both services are thread-safe and are created once per application.
"""

from .answer_cache import AnswerCache
from .document_store import DocumentStore

__all__ = ["DocumentStore", "AnswerCache"]
