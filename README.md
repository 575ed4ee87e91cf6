# guardedlock

Small locking primitives for threaded Python code, and a bank account that
uses them.

## What is in the package

- `guardedlock.mutex`
  - `Mutex` is a non-reentrant exclusive lock. It has `lock()`, `unlock()`
    and a non-blocking `try_lock()` that returns whether it got the lock. It
    also works as a context manager.
  - `SharedMutex` is a readers–writer lock.
    - Any number of threads may hold it for reading, through
      `reader_lock()`, `reader_unlock()` and `reader_try_lock()`.
    - A writer holds it alone, through `lock()`, `unlock()` and `try_lock()`.
    - While a writer is waiting, new readers are kept out, so writers are not
      starved.
  - Unlocking a mutex that is not held raises `RuntimeError`.
- `guardedlock.locker`
  - `MutexLocker` and `SharedMutexLocker` are scoped holders for a `Mutex`
    and a `SharedMutex`. The shared locker always holds its mutex in shared
    (reader) mode.
  - Each locker can be used in a `with` block. When the block exits, the
    locker releases its mutex if it still holds it. You can also call
    `release()` yourself to do the same.
  - The `locked` property tells whether the locker currently holds its mutex.
  - Calling `unlock()` or `reader_unlock()` on a locker that holds nothing
    raises `RuntimeError`.
  - `LockMode` chooses what the locker does with the mutex when it is created:
    - `LockMode.ACQUIRE` (the default) acquires the mutex now.
    - `LockMode.ADOPT` takes over a mutex that the caller already holds.
    - `LockMode.DEFER` leaves the mutex unheld, to be acquired later with
      `lock()` / `try_lock()` (or `reader_lock()` / `reader_try_lock()`).
- `guardedlock.account`
  - `BankAccount` is a worked example built on these primitives.
    - `deposit(amount)` and `withdraw(amount)` run under the account's
      exclusive mutex.
    - A withdrawal that exceeds the balance is refused. It writes a message
      to standard error and returns `False`.
    - Negative amounts raise `ValueError`.
    - `balance()` reads the balance under a separate reader lock, not under
      the deposit/withdraw mutex.
    - `transfer_from(other, amount)` withdraws from `other` and then deposits
      into this account. The deposit happens even if the withdrawal was
      refused.
- `guardedlock.cli`
  - `run_simulation(iterations=100, amount=1000)` starts two threads on a
    fresh account. One makes `iterations` deposits of `amount`. The other
    makes `iterations` withdrawal attempts of `amount`.
  - It returns the final balance once both threads have finished.

## Installation

```
pip install guardedlock
```

## Usage

```python
from guardedlock.mutex import Mutex, SharedMutex
from guardedlock.locker import LockMode, MutexLocker, SharedMutexLocker

mu = Mutex()
with MutexLocker(mu):
    ...  # mu is held here and released on exit

deferred = MutexLocker(mu, LockMode.DEFER)
with deferred:
    if deferred.try_lock():
        ...  # got it without blocking; released on exit

smu = SharedMutex()
with SharedMutexLocker(smu):
    ...  # held for reading; other readers may enter too
```

```python
from guardedlock.account import BankAccount

account = BankAccount()
account.deposit(1000)
account.withdraw(400)        # True
account.withdraw(10_000)     # False: exceeds the balance
account.balance()            # 600
```

## Command line

`guardedlock-bank` runs the two-thread simulation and prints
`Final balance: <n>`:

```
guardedlock-bank
guardedlock-bank --iterations 500 --amount 10
```

The command takes these options:

- `--iterations` sets how many deposits and withdrawal attempts each thread
  makes. The default is 100.
- `--amount` sets the amount of each deposit and withdrawal attempt. The
  default is 1000.

Negative values for either option are rejected.

If the final balance is zero, the command exits with status 0. Otherwise it
prints `Account did not end empty` to standard error and exits with status 1.
A withdrawal attempt can come before there is money to cover it, and refused
withdrawals are not retried. Because of this, a non-zero result can happen
depending on how the two threads interleave.

## What it does not do

- Accounts live only in memory. Nothing is saved, and there is no notion of
  account identity, history or interest.
- The mutexes are plain in-process thread locks. They do not work across
  processes.
- The mutexes do not check ownership: any thread may unlock a mutex that is
  held.

## Running the tests

```
pip install -e ".[test]"
pytest
```