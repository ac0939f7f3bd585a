"""Readers-writer lock guarding the document cache map and the factory cache.

Lookups vastly outnumber insertions: once every culture a localizer serves
has been probed, every access is a read. The lock lets any number of
threads look entries up at once, while inserting a new entry is exclusive.

Rules:
- A thread may nest read acquisitions
- Queued writers block newly arriving readers, so inserts are not starved
- Holding the read lock and asking for the write lock raises RuntimeError,
  as does the reverse and re-entering the write lock. Callers use
  double-checked locking instead: look up under the read lock, release,
  then re-check under the write lock

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference and acquisition timeouts.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     entry = entries.get(culture)
        >>> with lock.write(timeout=1.0):
        ...     entries.setdefault(culture, new_entry)
    """

    __slots__ = ("_cond", "_holds", "_queued_writers", "_writer")

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        # Reader thread ident -> nesting depth
        self._holds: dict[int, int] = {}
        self._writer: int | None = None
        self._queued_writers = 0

    @staticmethod
    def _check_timeout(timeout: float | None) -> None:
        if timeout is not None and timeout < 0:
            msg = f"Timeout must be non-negative, got {timeout}"
            raise ValueError(msg)

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Hold the lock in shared mode for the ``with`` block.

        Args:
            timeout: Seconds to wait; None waits forever, 0 does not wait

        Raises:
            RuntimeError: If the calling thread holds the write lock
            TimeoutError: If the lock is not granted in time
            ValueError: If timeout is negative
        """
        self._check_timeout(timeout)
        me = threading.get_ident()
        with self._cond:
            if self._writer == me:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)
            if me in self._holds:
                self._holds[me] += 1
            else:
                granted = self._cond.wait_for(
                    lambda: self._writer is None and not self._queued_writers, timeout
                )
                if not granted:
                    msg = "Timed out waiting for read lock"
                    raise TimeoutError(msg)
                self._holds[me] = 1
        try:
            yield
        finally:
            with self._cond:
                self._holds[me] -= 1
                if not self._holds[me]:
                    del self._holds[me]
                    if not self._holds:
                        self._cond.notify_all()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Hold the lock in exclusive mode for the ``with`` block.

        Args:
            timeout: Seconds to wait; None waits forever, 0 does not wait

        Raises:
            RuntimeError: If the calling thread holds the read lock or
                already holds the write lock
            TimeoutError: If the lock is not granted in time
            ValueError: If timeout is negative
        """
        self._check_timeout(timeout)
        me = threading.get_ident()
        with self._cond:
            if me in self._holds:
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Cannot acquire write lock: already holding write lock"
                raise RuntimeError(msg)
            self._queued_writers += 1
            try:
                granted = self._cond.wait_for(
                    lambda: self._writer is None and not self._holds, timeout
                )
            finally:
                self._queued_writers -= 1
            if not granted:
                # Readers parked behind this writer may proceed now
                self._cond.notify_all()
                msg = "Timed out waiting for write lock"
                raise TimeoutError(msg)
            self._writer = me
        try:
            yield
        finally:
            with self._cond:
                self._writer = None
                self._cond.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding the read lock."""
        with self._cond:
            return len(self._holds)

    @property
    def writer_active(self) -> bool:
        """True while some thread holds the write lock."""
        with self._cond:
            return self._writer is not None
