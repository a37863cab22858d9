"""Tests for the in-process key lock registry."""

from __future__ import annotations

import gc
import threading

from shared.application import locks
from shared.application.locks import key_lock


def test_entry_released_after_last_holder() -> None:
    with key_lock("room", "lock-test-1"):
        assert ("room", "lock-test-1") in locks._key_locks

    gc.collect()
    assert ("room", "lock-test-1") not in locks._key_locks


def test_registry_does_not_grow_with_distinct_keys() -> None:
    before = len(locks._key_locks)

    for key in range(1000, 1200):
        with key_lock("event", key):
            pass

    gc.collect()
    assert len(locks._key_locks) == before


def test_int_and_str_keys_share_one_mutex() -> None:
    entered = threading.Event()
    order = []

    def contender():
        with key_lock("room", "4242"):
            order.append("contender")
        entered.set()

    with key_lock("room", 4242):
        thread = threading.Thread(target=contender)
        thread.start()
        # the contender cannot get in while the int-keyed holder is inside
        assert not entered.wait(timeout=0.2)
        order.append("holder")

    thread.join(timeout=5)
    assert order == ["holder", "contender"]
    gc.collect()
    assert ("room", "4242") not in locks._key_locks
