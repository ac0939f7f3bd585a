"""Concurrency primitives and the per-culture document cache.

Exports:
    DocumentCache: Exactly-once-load cache of parsed documents per culture
    RWLock: Readers-writer lock used by the caches

Python 3.13+.
"""

from .document_cache import DocumentCache
from .rwlock import RWLock

__all__ = ["DocumentCache", "RWLock"]
