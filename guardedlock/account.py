"""A bank account whose balance is protected by mutexes."""

from __future__ import annotations

import sys

from guardedlock.locker import MutexLocker, SharedMutexLocker
from guardedlock.mutex import Mutex, SharedMutex


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"amount must not be negative: {amount}")


class BankAccount:
    """An account holding a non-negative balance.

    Deposits and withdrawals take the exclusive mutex; reading the balance
    takes a separate reader lock.
    """

    def __init__(self) -> None:
        self._smu = SharedMutex()
        self._mu = Mutex()
        self._balance = 0

    def balance(self) -> int:
        """Return the current balance."""
        with SharedMutexLocker(self._smu):
            return self._balance

    def withdraw(self, amount: int) -> bool:
        """Withdraw amount if the balance covers it; return whether it did."""
        _check_amount(amount)
        with MutexLocker(self._mu):
            if amount <= self._balance:
                self._balance -= amount
                return True
            print(
                f"Requested withdrawal {amount} exceeds balance {self._balance}",
                file=sys.stderr,
            )
            return False

    def deposit(self, amount: int) -> None:
        """Add amount to the balance."""
        _check_amount(amount)
        with MutexLocker(self._mu):
            self._balance += amount

    def transfer_from(self, other: BankAccount, amount: int) -> None:
        """Withdraw amount from other and deposit it here.

        The deposit happens whether or not the withdrawal succeeded.
        """
        other.withdraw(amount)
        self.deposit(amount)