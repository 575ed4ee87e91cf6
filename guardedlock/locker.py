"""Scoped holders that tie the ownership of a mutex to an object's lifetime."""

from __future__ import annotations

import enum

from guardedlock.mutex import Mutex, SharedMutex


class LockMode(enum.Enum):
    """How a locker treats its mutex when it is created."""

    ACQUIRE = enum.auto()
    """Acquire the mutex now."""
    ADOPT = enum.auto()
    """The caller already holds the mutex; take over its ownership."""
    DEFER = enum.auto()
    """The mutex is not held; acquire it later."""


class MutexLocker:
    """Holds a Mutex exclusively and releases it when the scope ends."""

    def __init__(self, mutex: Mutex, mode: LockMode = LockMode.ACQUIRE) -> None:
        self._mutex = mutex
        if mode is LockMode.ACQUIRE:
            mutex.lock()
            self._locked = True
        else:
            self._locked = mode is LockMode.ADOPT

    @property
    def locked(self) -> bool:
        """Whether this locker currently holds its mutex."""
        return self._locked

    def lock(self) -> None:
        """Acquire the mutex exclusively."""
        self._mutex.lock()
        self._locked = True

    def try_lock(self) -> bool:
        """Try to acquire the mutex; return whether it was acquired."""
        self._locked = self._mutex.try_lock()
        return self._locked

    def unlock(self) -> None:
        """Release the mutex; raise RuntimeError if this locker does not hold it."""
        if not self._locked:
            raise RuntimeError("unlock of a locker that does not hold its mutex")
        self._mutex.unlock()
        self._locked = False

    def release(self) -> None:
        """Release the mutex if it is still held; otherwise do nothing."""
        if self._locked:
            self.unlock()

    def __enter__(self) -> MutexLocker:
        return self

    def __exit__(self, *args: object) -> None:
        self.release()


class SharedMutexLocker:
    """Holds a SharedMutex in shared mode and releases it when the scope ends."""

    def __init__(self, mutex: SharedMutex, mode: LockMode = LockMode.ACQUIRE) -> None:
        self._mutex = mutex
        if mode is LockMode.ACQUIRE:
            mutex.reader_lock()
            self._locked = True
        else:
            self._locked = mode is LockMode.ADOPT

    @property
    def locked(self) -> bool:
        """Whether this locker currently holds its mutex in shared mode."""
        return self._locked

    def reader_lock(self) -> None:
        """Acquire the mutex in shared mode."""
        self._mutex.reader_lock()
        self._locked = True

    def reader_try_lock(self) -> bool:
        """Try to acquire the mutex in shared mode."""
        self._locked = self._mutex.reader_try_lock()
        return self._locked

    def reader_unlock(self) -> None:
        """Release the shared hold; raise RuntimeError if this locker has none."""
        if not self._locked:
            raise RuntimeError("unlock of a locker that does not hold its mutex")
        self._mutex.reader_unlock()
        self._locked = False

    def release(self) -> None:
        """Release the shared hold if it is still held; otherwise do nothing."""
        if self._locked:
            self.reader_unlock()

    def __enter__(self) -> SharedMutexLocker:
        return self

    def __exit__(self, *args: object) -> None:
        self.release()