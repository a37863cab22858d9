"""
Bounded retry for transient storage failures

Lock timeouts, deadlocks and serialization failures surface from the
database driver as ``django.db.OperationalError``. The decorated
operation is re-run from the start a few times with exponential
back-off; domain errors and integrity errors are never retried.

Retrying is only possible when the decorated call owns the outermost
transaction. Inside an enclosing ``atomic()`` block the connection is
already marked for rollback, so the error propagates immediately.
"""

from __future__ import annotations

import functools
import logging
import time

from django.conf import settings  # type: ignore
from django.db import OperationalError, transaction  # type: ignore

logger = logging.getLogger(__name__)


def retry_on_transient_errors(func):
    """Re-run ``func`` on ``OperationalError`` up to TRANSIENT_RETRY_ATTEMPTS times."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        max_retries = getattr(settings, "TRANSIENT_RETRY_ATTEMPTS", 3)
        backoff_seconds = getattr(settings, "TRANSIENT_RETRY_BACKOFF", 0.05)
        attempt = 0
        while True:
            try:
                return func(*args, **kwargs)
            except OperationalError as exc:
                attempt += 1
                nested = transaction.get_connection().in_atomic_block
                if attempt <= max_retries and not nested:
                    delay = backoff_seconds * (2 ** (attempt - 1))
                    logger.warning(
                        "%s hit a transient storage error (%s), retrying in %.2fs (attempt %s/%s)",
                        func.__name__,
                        exc,
                        delay,
                        attempt,
                        max_retries,
                    )
                    time.sleep(delay)
                    continue
                logger.error("%s failed after %s attempts: %s", func.__name__, attempt, exc)
                raise

    return wrapper
