"""
Exclusion helpers for check-then-write sections

Two layers are combined around every write that must re-validate an
invariant before committing:

1. ``key_lock`` - an in-process mutex keyed by the contended entity
   (``("room", 7)``, ``("event", 3)``). Threads of one process queue up
   here before touching the database.
2. ``lock_queryset_if_possible`` - ``SELECT ... FOR UPDATE`` on the parent
   row inside the surrounding transaction. On PostgreSQL this serialises
   writers running in different processes; backends without row locks
   (SQLite) fall back to their database-level write lock.
"""

from __future__ import annotations

import logging
import threading
import weakref
from contextlib import contextmanager
from typing import Hashable, Iterator, Tuple

from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

logger = logging.getLogger(__name__)

_registry_lock = threading.Lock()
# One mutex per contended key. Waiters and the holder keep it alive; the
# entry disappears once the last of them lets go.
_key_locks: weakref.WeakValueDictionary[Tuple[str, Hashable], threading.Lock] = weakref.WeakValueDictionary()


def _lock_for(namespace: str, key: Hashable) -> threading.Lock:
    with _registry_lock:
        lock = _key_locks.get((namespace, key))
        if lock is None:
            lock = threading.Lock()
            _key_locks[(namespace, key)] = lock
        return lock


@contextmanager
def key_lock(namespace: str, key: Hashable) -> Iterator[None]:
    """Hold the process-wide mutex for ``(namespace, key)``."""

    # "7" from a URL and 7 from the ORM name the same entity
    lock = _lock_for(namespace, str(key))
    if not lock.acquire(blocking=False):
        logger.debug("Waiting for %s:%s lock", namespace, key)
        lock.acquire()
    try:
        yield
    finally:
        lock.release()


def lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection(queryset.db).in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset
