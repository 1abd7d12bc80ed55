"""Tests for per-order lock serialisation."""

import threading
import time

from shipping.shipment.locks import KeyedLock


class TestKeyedLock:
    def test_same_key_is_serialised(self):
        locks = KeyedLock()
        active = []
        overlaps = []

        def worker():
            with locks.hold("ord-1"):
                active.append(1)
                if len(active) > 1:
                    overlaps.append(True)
                time.sleep(0.01)
                active.pop()

        threads = [threading.Thread(target=worker) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert overlaps == []

    def test_different_keys_do_not_block(self):
        locks = KeyedLock()
        with locks.hold("ord-1"):
            acquired = threading.Event()

            def worker():
                with locks.hold("ord-2"):
                    acquired.set()

            t = threading.Thread(target=worker)
            t.start()
            assert acquired.wait(timeout=1)
            t.join()

    def test_locks_are_released_after_use(self):
        locks = KeyedLock()
        with locks.hold("ord-1"):
            assert len(locks) == 1
        assert len(locks) == 0

    def test_same_thread_can_hold_a_key_twice(self):
        locks = KeyedLock()
        with locks.hold("ord-1"):
            with locks.hold("ord-1"):
                assert len(locks) == 1
            assert len(locks) == 1
        assert len(locks) == 0
