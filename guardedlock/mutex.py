"""Exclusive and reader/writer mutexes with an explicit lock/unlock interface."""

from __future__ import annotations

import threading


class Mutex:
    """A non-reentrant exclusive mutex.

    Only one thread may hold it at a time. It can also be used as a
    context manager.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def lock(self) -> None:
        """Block until the mutex is acquired exclusively."""
        self._lock.acquire()

    def unlock(self) -> None:
        """Release the mutex; raise RuntimeError if it is not held."""
        try:
            self._lock.release()
        except RuntimeError as exc:
            raise RuntimeError("unlock of a mutex that is not held") from exc

    def try_lock(self) -> bool:
        """Acquire the mutex if it is free; return whether it was acquired."""
        return self._lock.acquire(blocking=False)

    def __enter__(self) -> Mutex:
        self.lock()
        return self

    def __exit__(self, *args: object) -> None:
        self.unlock()


class SharedMutex:
    """A multiple-reader, single-writer mutex.

    Any number of threads may hold it in shared (reader) mode at once; a
    writer must wait until every reader has released it. Waiting writers
    keep new readers out so that writers are not starved.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def lock(self) -> None:
        """Block until the mutex is acquired exclusively."""
        with self._cond:
            self._waiting_writers += 1
            try:
                self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def unlock(self) -> None:
        """Release exclusive ownership; raise RuntimeError if not held."""
        with self._cond:
            if not self._writer:
                raise RuntimeError("unlock of a shared mutex that is not held exclusively")
            self._writer = False
            self._cond.notify_all()

    def try_lock(self) -> bool:
        """Acquire exclusively if nobody holds the mutex."""
        with self._cond:
            if self._writer or self._readers:
                return False
            self._writer = True
            return True

    def reader_lock(self) -> None:
        """Block until the mutex is acquired in shared mode."""
        with self._cond:
            self._cond.wait_for(
                lambda: not self._writer and self._waiting_writers == 0
            )
            self._readers += 1

    def reader_unlock(self) -> None:
        """Release one shared hold; raise RuntimeError if none is held."""
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("reader unlock of a shared mutex with no readers")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def reader_try_lock(self) -> bool:
        """Acquire in shared mode if no writer holds or awaits the mutex."""
        with self._cond:
            if self._writer or self._waiting_writers:
                return False
            self._readers += 1
            return True