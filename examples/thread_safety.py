"""Thread Safety Example - Concurrent resolution while registering locales.

LocaleRegistry guards its mapping with a readers-writer lock. Resolutions run
concurrently under the read lock; registrations take the write lock, so a
reader always sees either the old or the new formatter, never a partial
update.

Demonstrates:
1. Concurrent formatting from a thread pool
2. Registering a locale while readers are active

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

from schemalocale import Issue, IssueCode, LocaleRegistry, format_many


def example_1_thread_pool() -> None:
    """Example 1: Format batches for several locales in parallel."""
    print("=" * 60)
    print("Example 1: Thread Pool Formatting")
    print("=" * 60)

    registry = LocaleRegistry()
    batch = [
        Issue(IssueCode.INVALID_TYPE, 123, {"expected": "string"}),
        Issue(IssueCode.TOO_BIG, properties={"origin": "file", "maximum": 1024}),
    ]
    locales = ["en", "de", "es", "ko", "ru", "ar"]

    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = {
            pool.submit(format_many, batch, locale, registry=registry): locale
            for locale in locales
        }
        for future in as_completed(futures):
            print(f"  [{futures[future]}] {future.result()}")


def example_2_register_while_reading() -> None:
    """Example 2: Readers keep working while a writer registers a locale."""
    print("\n" + "=" * 60)
    print("Example 2: Registration Under Load")
    print("=" * 60)

    registry = LocaleRegistry()
    issue = Issue(IssueCode.NIL_POINTER)
    stop = threading.Event()
    seen: set[str] = set()
    seen_lock = threading.Lock()

    def reader() -> None:
        while not stop.is_set():
            message = registry.format(issue, "eo-XX")
            with seen_lock:
                seen.add(message)

    readers = [threading.Thread(target=reader) for _ in range(3)]
    for thread in readers:
        thread.start()

    time.sleep(0.01)
    registry.register("eo", lambda _issue: "Nula montrilo trovita")
    time.sleep(0.01)
    stop.set()
    for thread in readers:
        thread.join()

    for message in sorted(seen):
        print(f"  observed: {message}")


if __name__ == "__main__":
    example_1_thread_pool()
    example_2_register_while_reading()
