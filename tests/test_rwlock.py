"""Tests for the RWLock guarding the locale registry.

Tests verify:
- Multiple concurrent readers
- Exclusive writer access
- Writer preference (new readers wait behind a waiting writer)
- Reentrant read locks
- Read-to-write upgrade, write-to-read downgrade and write reentry rejection
- Release without acquisition
"""

import threading
import time

import pytest

from schemalocale.runtime.rwlock import RWLock


class TestRWLockBasics:
    """Test basic RWLock functionality."""

    def test_single_reader(self) -> None:
        """Single reader can acquire lock."""
        lock = RWLock()
        with lock.read():
            assert len(lock._readers) == 1
        assert len(lock._readers) == 0

    def test_single_writer(self) -> None:
        """Single writer can acquire lock."""
        lock = RWLock()
        with lock.write():
            assert lock._writer is not None
        assert lock._writer is None

    def test_multiple_reads_concurrent(self) -> None:
        """Multiple readers hold the lock at the same time."""
        lock = RWLock()
        barrier = threading.Barrier(3, timeout=5)
        peak: list[int] = []

        def reader() -> None:
            with lock.read():
                barrier.wait()
                peak.append(len(lock._readers))

        threads = [threading.Thread(target=reader) for _ in range(3)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert max(peak) == 3

    def test_write_blocks_readers(self) -> None:
        """A reader waits until the writer releases."""
        lock = RWLock()
        writer_active = threading.Event()
        order: list[str] = []

        def writer() -> None:
            with lock.write():
                writer_active.set()
                time.sleep(0.05)
                order.append("writer")

        def reader() -> None:
            writer_active.wait()
            with lock.read():
                order.append("reader")

        threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert order == ["writer", "reader"]

    def test_lock_released_on_exception(self) -> None:
        """Context managers release the lock when the block raises."""
        lock = RWLock()
        with pytest.raises(KeyError), lock.write():
            raise KeyError("boom")
        assert lock._writer is None
        with lock.read():
            pass


class TestRWLockReentrancy:
    """Test reentrant reads and rejected lock transitions."""

    def test_reentrant_read(self) -> None:
        """A thread may nest read locks."""
        lock = RWLock()
        with lock.read(), lock.read():
            assert len(lock._readers) == 1
        assert len(lock._readers) == 0

    def test_reentrant_read_while_writer_waits(self) -> None:
        """Nested reads do not deadlock behind a waiting writer."""
        lock = RWLock()
        writer_done = threading.Event()

        def writer() -> None:
            with lock.write():
                writer_done.set()

        with lock.read():
            thread = threading.Thread(target=writer)
            thread.start()
            while lock._waiting_writers == 0:
                time.sleep(0.001)
            with lock.read():
                assert not writer_done.is_set()

        thread.join()
        assert writer_done.is_set()

    def test_upgrade_rejected(self) -> None:
        """Holding a read lock and asking for the write lock raises."""
        lock = RWLock()
        with lock.read(), pytest.raises(RuntimeError, match="upgrade"):
            with lock.write():
                pass

    def test_downgrade_rejected(self) -> None:
        """Holding the write lock and asking for a read lock raises."""
        lock = RWLock()
        with lock.write(), pytest.raises(RuntimeError, match="holding write lock"):
            with lock.read():
                pass

    def test_write_reentry_rejected(self) -> None:
        """The write lock is not reentrant."""
        lock = RWLock()
        with lock.write(), pytest.raises(RuntimeError, match="already holding"):
            with lock.write():
                pass


class TestRWLockWriterPreference:
    """Test that waiting writers take priority over new readers."""

    def test_new_reader_waits_for_waiting_writer(self) -> None:
        """A reader arriving after a waiting writer runs after it."""
        lock = RWLock()
        order: list[str] = []
        first_reader_in = threading.Event()
        release_first = threading.Event()

        def first_reader() -> None:
            with lock.read():
                first_reader_in.set()
                release_first.wait(timeout=5)

        def writer() -> None:
            with lock.write():
                order.append("writer")

        def late_reader() -> None:
            with lock.read():
                order.append("reader")

        holder = threading.Thread(target=first_reader)
        holder.start()
        first_reader_in.wait(timeout=5)

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        while lock._waiting_writers == 0:
            time.sleep(0.001)

        reader_thread = threading.Thread(target=late_reader)
        reader_thread.start()
        time.sleep(0.02)
        release_first.set()

        for thread in (holder, writer_thread, reader_thread):
            thread.join()

        assert order == ["writer", "reader"]


class TestRWLockReleaseErrors:
    """Test releasing locks the thread does not hold."""

    def test_release_read_without_acquire(self) -> None:
        """Releasing an unheld read lock raises."""
        lock = RWLock()
        with pytest.raises(RuntimeError, match="does not hold read lock"):
            lock._release_read()

    def test_release_write_without_acquire(self) -> None:
        """Releasing an unheld write lock raises."""
        lock = RWLock()
        with pytest.raises(RuntimeError, match="does not hold write lock"):
            lock._release_write()

    def test_release_write_from_other_thread(self) -> None:
        """Only the owning thread may release the write lock."""
        lock = RWLock()
        errors: list[RuntimeError] = []

        def intruder() -> None:
            try:
                lock._release_write()
            except RuntimeError as error:
                errors.append(error)

        with lock.write():
            thread = threading.Thread(target=intruder)
            thread.start()
            thread.join()
            assert lock._writer is not None

        assert len(errors) == 1
