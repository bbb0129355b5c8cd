"""Advisory locking over a repository's metadata.

Mutating commands hold an exclusive lock for their whole duration;
read-only commands hold a shared lock so they never observe a half
written HEAD, branch record or index.
"""

import contextlib
import fcntl
import logging
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


class RepositoryLock:
    """File lock scoped to one repository root.

    Uses fcntl.flock on ``.mini-git/LOCK``. The lock is reentrant within one
    instance: nested ``exclusive()``/``shared()`` calls reuse the lock that
    the outermost call acquired.
    """

    def __init__(self, lock_path: Path):
        self.lock_path = lock_path
        self._depth = 0

    @contextlib.contextmanager
    def exclusive(self) -> Iterator[None]:
        """Hold an exclusive lock for the duration of the block."""
        with self._acquire(fcntl.LOCK_EX):
            yield

    @contextlib.contextmanager
    def shared(self) -> Iterator[None]:
        """Hold a shared lock for the duration of the block."""
        with self._acquire(fcntl.LOCK_SH):
            yield

    @contextlib.contextmanager
    def _acquire(self, mode: int) -> Iterator[None]:
        if self._depth > 0:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
            return

        lock_fd = open(self.lock_path, 'a')
        try:
            fcntl.flock(lock_fd, mode)
            self._depth = 1
            logger.debug("Acquired %s lock on %s",
                         'exclusive' if mode == fcntl.LOCK_EX else 'shared', self.lock_path)
            yield
        finally:
            self._depth = 0
            try:
                fcntl.flock(lock_fd, fcntl.LOCK_UN)
            except OSError as e:
                logger.debug("Lock release failed: %s", e)
            lock_fd.close()

    @property
    def held(self) -> bool:
        return self._depth > 0
