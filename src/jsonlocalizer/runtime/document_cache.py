"""Per-localizer cache of parsed resource documents.

Architecture:
    - One entry per culture suffix, created at most once
    - Each entry is a single-initialization cell with its own lock; the load
      runs while holding only that cell's lock
    - The culture -> cell map is guarded by an RWLock that is held only for
      the lookup or the insert-if-absent, never across file I/O
    - No eviction or invalidation: resource files are treated as static for
      the lifetime of the process

Concurrency guarantee:
    For any number of concurrent get_or_load() calls with the same culture,
    the loader runs exactly once. Every caller blocks until that single load
    has finished and then observes the same outcome: the same document, the
    same absence, or the same exception if the loader raised. Loads for
    different cultures proceed in parallel.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from jsonlocalizer.constants import NEUTRAL_CULTURE, ROOT_CULTURE_ALIAS
from jsonlocalizer.runtime.rwlock import RWLock

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from jsonlocalizer.document.nodes import JsonObject
    from jsonlocalizer.localization.loading import ResourceLoader, ResourceLoadResult
    from jsonlocalizer.localization.types import CultureName

__all__ = ["DocumentCache"]

logger = logging.getLogger(__name__)


class _LoadOnceCell:
    """Compute-once, publish-once holder for one culture's load result."""

    __slots__ = ("_done", "_error", "_lock", "_result", "_tb")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False
        self._result: ResourceLoadResult | None = None
        self._error: BaseException | None = None
        self._tb: TracebackType | None = None

    @property
    def done(self) -> bool:
        return self._done

    @property
    def result(self) -> ResourceLoadResult | None:
        """Published result, or None while pending or after a loader exception."""
        return self._result if self._done else None

    def get(self, compute: Callable[[], ResourceLoadResult]) -> ResourceLoadResult:
        """Return the memoized result, computing it on first call.

        Raises:
            Exception: Whatever ``compute`` raised on the first call, re-raised
                to every caller.
        """
        if not self._done:
            with self._lock:
                if not self._done:
                    try:
                        self._result = compute()
                    except Exception as e:  # noqa: BLE001 - memoized and re-raised below
                        self._error = e
                        self._tb = e.__traceback__
                    # Publish only after the outcome is fully stored
                    self._done = True
        if self._error is not None:
            # Every caller sees the traceback of the first failure
            raise self._error.with_traceback(self._tb)
        assert self._result is not None  # set whenever _error is None and _done
        return self._result


class DocumentCache:
    """Memoizes one ResourceLoadResult per culture for a single resource location.

    Example:
        >>> cache = DocumentCache(JsonResourceLoader(Path("Resources")))
        >>> cache.get_or_load("en-US")  # reads Resources/en-US.json once
        >>> cache.get_or_load("en-US")  # served from memory

    Attributes:
        loader: Loader invoked on cache misses
    """

    __slots__ = ("_entries", "_loader", "_lock")

    def __init__(self, loader: ResourceLoader) -> None:
        """Initialize an empty cache.

        Args:
            loader: Loader for the resource location this cache serves
        """
        self._loader = loader
        self._entries: dict[CultureName, _LoadOnceCell] = {}
        self._lock = RWLock()

    @property
    def loader(self) -> ResourceLoader:
        """Loader invoked on cache misses."""
        return self._loader

    @staticmethod
    def _normalize(culture: CultureName) -> CultureName:
        return NEUTRAL_CULTURE if culture == ROOT_CULTURE_ALIAS else culture

    def _get_or_add_cell(self, culture: CultureName) -> _LoadOnceCell:
        """Insert-if-absent with double-checked locking."""
        with self._lock.read():
            cell = self._entries.get(culture)
            if cell is not None:
                return cell

        with self._lock.write():
            cell = self._entries.get(culture)
            if cell is None:
                cell = _LoadOnceCell()
                self._entries[culture] = cell
            return cell

    def get_result(self, culture: CultureName) -> ResourceLoadResult:
        """Return the load result for ``culture``, loading it on first access.

        Args:
            culture: Culture suffix ("" or "." for the neutral culture)

        Returns:
            The memoized ResourceLoadResult

        Raises:
            Exception: Whatever the loader raised on the first load of this
                culture (memoized; loaders normally report failures in the
                result instead).
        """
        culture = self._normalize(culture)
        cell = self._get_or_add_cell(culture)
        return cell.get(lambda: self._load(culture))

    def _load(self, culture: CultureName) -> ResourceLoadResult:
        logger.debug("Cache miss for culture %r; loading", culture)
        result = self._loader.load(culture)
        logger.debug("Cached %s result for culture %r", result.status, culture)
        return result

    def get_or_load(self, culture: CultureName) -> JsonObject | None:
        """Return the document for ``culture``, or None if absent or unreadable."""
        return self.get_result(culture).document

    def results(self) -> tuple[ResourceLoadResult, ...]:
        """Return the load results of all completed entries, in insertion order."""
        with self._lock.read():
            cells = tuple(self._entries.values())
        return tuple(cell.result for cell in cells if cell.result is not None)

    @property
    def cultures(self) -> tuple[CultureName, ...]:
        """Cultures that have been requested so far."""
        with self._lock.read():
            return tuple(self._entries)

    def __contains__(self, culture: object) -> bool:
        with self._lock.read():
            return culture in self._entries

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)

    def __repr__(self) -> str:
        return f"DocumentCache(loader={self._loader!r}, entries={len(self)})"
