from __future__ import annotations

import pytest

import FP_CLI


def _feed(monkeypatch, answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(replies))


@pytest.mark.parametrize(
    "value,expected",
    [(None, "--"), (float("nan"), "--"), (3, "3"), (1.23456789, "1.23457"), ("x", "x")],
)
def test_format_value(value, expected):
    assert FP_CLI._format_value(value) == expected


def test_prompt_float_retries_until_numeric(monkeypatch, capsys):
    _feed(monkeypatch, ["abc", "", "2.5"])
    assert FP_CLI._prompt_float("Enter a:") == 2.5
    out = capsys.readouterr().out
    assert "Invalid number" in out
    assert "Value is required" in out


def test_prompt_float_default(monkeypatch):
    _feed(monkeypatch, [""])
    assert FP_CLI._prompt_float("Tolerance:", default=1e-4) == 1e-4


def test_session_prints_table_and_summary(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "-3", "2", "0", "1.5", "0.001", "n"])
    FP_CLI.main()
    out = capsys.readouterr().out
    assert "f(x) = x**2 - 3*x + 2" in out
    assert "Two distinct real roots (Δ = 1.000000 > 0)" in out
    assert "Detailed Iterations" in out
    assert "Status        : Converged" in out
    assert "Thanks for using" in out


def test_session_reports_input_error_and_repeats(monkeypatch, capsys):
    _feed(
        monkeypatch,
        ["0", "1", "1", "0", "1", "", "y", "1", "0", "1", "-2", "2", "", "no"],
    )
    FP_CLI.main()
    out = capsys.readouterr().out
    assert "Input error: Coefficient 'a' cannot be zero" in out
    assert "Input error: f(xL) and f(xU) must have opposite signs" in out


def test_discriminant_line_is_not_repeated(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "-3", "2", "0", "1.5", "", "n"])
    FP_CLI.main()
    out = capsys.readouterr().out
    assert out.count("Two distinct real roots") == 1
    assert "Exact roots  : r1 = 2, r2 = 1" in out
