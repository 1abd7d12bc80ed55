"""Per-key locks that serialise workflow operations on the same order.

Locks are created on first use and discarded once no caller holds or waits
on them, so the registry does not grow with the number of orders seen.
A thread that already holds a key may take it again; command handlers hold
the order's key across their unit of work while the workflow they call
takes the same key.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class KeyedLock:
    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.RLock] = {}
        self._waiters: dict[str, int] = {}

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(key, threading.RLock())
            self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._waiters[key] -= 1
                if not self._waiters[key]:
                    del self._waiters[key]
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


# Shared by every workflow instance in the process.
order_locks = KeyedLock()
