"""
Reader/writer lock used by every repository instance.

Readers may hold the lock concurrently; a writer holds it alone.
Waiting writers block new readers so a steady stream of reads cannot
starve a save.  The thread that holds the write lock may re‑enter it
and may also take the read lock, which lets a service run
``find_by_id`` and ``save`` inside one ``exclusive()`` block.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional


class ReadWriteLock:
    """Writer‑preferring reader/writer lock built on ``threading.Condition``."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writer: Optional[int] = None
        self._write_depth = 0

    def _owns_write(self) -> bool:
        return self._writer == threading.get_ident()

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------
    def acquire_read(self) -> bool:
        """Take the read lock.

        Returns ``False`` when the calling thread already holds the
        write lock; in that case nothing was acquired and
        ``release_read`` must not be called.
        """
        with self._cond:
            if self._owns_write():
                return False
            while self._writer is not None or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
            return True

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    # ------------------------------------------------------------------
    # Write side
    # ------------------------------------------------------------------
    def acquire_write(self) -> None:
        me = threading.get_ident()
        with self._cond:
            if self._writer == me:
                self._write_depth += 1
                return
            self._writers_waiting += 1
            try:
                while self._writer is not None or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = me
            self._write_depth = 1

    def release_write(self) -> None:
        with self._cond:
            if not self._owns_write():
                raise RuntimeError("release_write called by a thread that does not hold the lock")
            self._write_depth -= 1
            if self._write_depth == 0:
                self._writer = None
                self._cond.notify_all()

    # ------------------------------------------------------------------
    # Context managers
    # ------------------------------------------------------------------
    @contextmanager
    def read_locked(self) -> Iterator[None]:
        acquired = self.acquire_read()
        try:
            yield
        finally:
            if acquired:
                self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
