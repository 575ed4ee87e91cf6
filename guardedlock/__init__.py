"""Exclusive and shared mutexes, scoped lockers, and a thread-safe bank account."""

__version__ = "0.1.0"
__all__ = ["account", "cli", "locker", "mutex"]