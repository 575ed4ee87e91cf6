"""Run two threads that deposit into and withdraw from one account."""

from __future__ import annotations

import argparse
import sys
import threading

from guardedlock.account import BankAccount


def run_simulation(iterations: int = 100, amount: int = 1000) -> int:
    """Deposit and withdraw amount iterations times concurrently; return the balance."""
    account = BankAccount()

    def depositor() -> None:
        for _ in range(iterations):
            account.deposit(amount)

    def withdrawer() -> None:
        for _ in range(iterations):
            account.withdraw(amount)

    workers = [threading.Thread(target=depositor), threading.Thread(target=withdrawer)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return account.balance()


def main(argv: list[str] | None = None) -> int:
    """Run the simulation and report whether the account ended empty."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--iterations", type=int, default=100)
    parser.add_argument("--amount", type=int, default=1000)
    args = parser.parse_args(argv)
    if args.iterations < 0:
        parser.error("--iterations must not be negative")
    if args.amount < 0:
        parser.error("--amount must not be negative")

    balance = run_simulation(args.iterations, args.amount)
    print(f"Final balance: {balance}")
    if balance != 0:
        print("Account did not end empty", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())