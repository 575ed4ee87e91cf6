import threading

import pytest

from guardedlock.account import BankAccount


def test_new_account_is_empty():
    assert BankAccount().balance() == 0


def test_deposit_then_withdraw_round_trip():
    account = BankAccount()
    account.deposit(1000)
    assert account.balance() == 1000
    assert account.withdraw(1000) is True
    assert account.balance() == 0


def test_withdraw_exceeding_balance_fails(capsys):
    account = BankAccount()
    account.deposit(5)
    assert account.withdraw(6) is False
    assert account.balance() == 5
    err = capsys.readouterr().err
    assert "Requested withdrawal 6 exceeds balance 5" in err


def test_negative_amounts_rejected():
    account = BankAccount()
    with pytest.raises(ValueError):
        account.deposit(-1)
    with pytest.raises(ValueError):
        account.withdraw(-1)
    assert account.balance() == 0


def test_transfer_preserves_total():
    source = BankAccount()
    target = BankAccount()
    source.deposit(100)
    target.transfer_from(source, 40)
    assert source.balance() + target.balance() == 100
    assert target.balance() == 40


def test_transfer_deposits_even_when_withdrawal_fails(capsys):
    source = BankAccount()
    target = BankAccount()
    target.transfer_from(source, 7)
    assert source.balance() == 0
    assert target.balance() == 7
    assert "exceeds balance" in capsys.readouterr().err


def test_concurrent_deposits_are_not_lost():
    account = BankAccount()
    threads_n, per_thread, amount = 8, 200, 3

    def work():
        for _ in range(per_thread):
            account.deposit(amount)

    threads = [threading.Thread(target=work) for _ in range(threads_n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert account.balance() == threads_n * per_thread * amount