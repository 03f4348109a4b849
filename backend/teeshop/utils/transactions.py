import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.orm import Session

from teeshop.config import settings
from teeshop.exceptions import StoreBusy

# Guards the catalog and the cart together. Not re-entrant: a locked
# operation must not call another locked operation.
_store_lock = threading.Lock()


@contextmanager
def locked_transaction(session: Session, timeout: Optional[float] = None) -> Iterator:
    """
    Serialize a read-check-adjust-commit sequence against the shared store.

    Acquires the process-wide store lock (bounded by `timeout`, default
    settings.LOCK_TIMEOUT_SECONDS), then runs the block inside one
    session.begin() transaction. The transaction commits before the lock is
    released; any exception rolls it back, so nothing from a failed block is
    visible.
    Usage:
        with locked_transaction(db):
            ... DB work ...
    Raises StoreBusy if the lock cannot be acquired in time.
    """
    if timeout is None:
        timeout = settings.LOCK_TIMEOUT_SECONDS
    if not _store_lock.acquire(timeout=timeout):
        raise StoreBusy("Could not acquire store lock; try again")
    try:
        with session.begin():
            yield
    finally:
        _store_lock.release()
