import pytest

from guardedlock.cli import main, run_simulation


def test_simulation_with_no_iterations_is_empty():
    assert run_simulation(0, 1000) == 0


def test_simulation_balance_is_bounded_multiple():
    iterations, amount = 50, 10
    balance = run_simulation(iterations, amount)
    assert 0 <= balance <= iterations * amount
    assert balance % amount == 0


def test_simulation_with_zero_amount_stays_empty():
    assert run_simulation(20, 0) == 0


def test_main_reports_empty_account(capsys):
    assert main(["--iterations", "0"]) == 0
    assert "Final balance: 0" in capsys.readouterr().out


def test_main_exit_code_matches_balance(capsys):
    code = main(["--iterations", "30", "--amount", "5"])
    out = capsys.readouterr().out
    balance = int(out.strip().rsplit(" ", 1)[1])
    assert code == (0 if balance == 0 else 1)


def test_main_rejects_negative_iterations():
    with pytest.raises(SystemExit) as excinfo:
        main(["--iterations", "-1"])
    assert excinfo.value.code == 2