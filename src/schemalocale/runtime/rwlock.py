"""Readers-writer lock guarding the locale registry.

Resolution (a read) happens on every formatted issue; registration (a write)
is rare and usually happens at start-up. The lock lets any number of
resolutions proceed together while a registration gets exclusive access.

Rules:
- Writer preference: once a writer is waiting, new readers queue behind it.
- Reads are reentrant per thread.
- Read-to-write upgrade, write-to-read downgrade and nested writes raise
  RuntimeError instead of deadlocking.

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
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass
        >>> with lock.write():
        ...     pass
    """

    __slots__ = ("_cond", "_readers", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        # thread id -> reentrant read depth
        self._readers: dict[int, int] = {}
        self._writer: int | None = None
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Generator[None]:
        """Hold the shared lock for the duration of the block.

        Raises:
            RuntimeError: If the calling thread holds the write lock.
        """
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Generator[None]:
        """Hold the exclusive lock for the duration of the block.

        Raises:
            RuntimeError: If the calling thread holds a read lock or already
                holds the write lock.
        """
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _acquire_read(self) -> None:
        me = threading.get_ident()

        with self._cond:
            if me in self._readers:
                self._readers[me] += 1
                return
            if self._writer == me:
                msg = (
                    "Cannot acquire read lock while holding write lock. "
                    "Release the write lock first."
                )
                raise RuntimeError(msg)

            self._cond.wait_for(
                lambda: self._writer is None and self._waiting_writers == 0
            )
            self._readers[me] = 1

    def _release_read(self) -> None:
        me = threading.get_ident()

        with self._cond:
            depth = self._readers.get(me)
            if depth is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)
            if depth > 1:
                self._readers[me] = depth - 1
                return
            del self._readers[me]
            if not self._readers:
                self._cond.notify_all()

    def _acquire_write(self) -> None:
        me = threading.get_ident()

        with self._cond:
            if me in self._readers:
                msg = (
                    "Cannot upgrade read lock to write lock. "
                    "Release the read lock first."
                )
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Cannot acquire write lock: already holding write lock"
                raise RuntimeError(msg)

            self._waiting_writers += 1
            try:
                self._cond.wait_for(
                    lambda: not self._readers and self._writer is None
                )
                self._writer = me
            finally:
                self._waiting_writers -= 1

    def _release_write(self) -> None:
        with self._cond:
            if self._writer != threading.get_ident():
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._writer = None
            self._cond.notify_all()
