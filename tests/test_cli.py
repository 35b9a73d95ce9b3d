"""CLI tests via Typer's CliRunner."""

import json

import pytest
from typer.testing import CliRunner

from deskcalc.__main__ import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def _plain_env(monkeypatch):
    monkeypatch.setenv("DESKCALC_COLOR", "0")
    monkeypatch.setenv("DESKCALC_SHOW_KEYPAD", "0")


# --- press ---

def test_press_prints_final_display(runner):
    result = runner.invoke(app, ["press", "3", "+", "4", "x", "2", "="])
    assert result.exit_code == 0
    assert result.stdout.strip() == "14"


def test_press_packed_keys(runner):
    result = runner.invoke(app, ["press", "12+3="])
    assert result.exit_code == 0
    assert result.stdout.strip() == "15"


def test_press_divide_by_zero(runner):
    result = runner.invoke(app, ["press", "1", "/", "0", "="])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Infinity"


def test_press_json(runner):
    result = runner.invoke(app, ["press", "7", "=", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "display": "7",
        "previous_value": 7.0,
        "pending_operator": "=",
        "awaiting_fresh_operand": True,
    }


def test_press_trace_renders_tape(runner):
    result = runner.invoke(app, ["press", "5", "+", "3", "=", "--trace"])
    assert result.exit_code == 0
    assert "Tape" in result.output
    assert result.stdout.strip().splitlines()[-1] == "8"


def test_press_accepts_tokens_starting_with_minus(runner):
    result = runner.invoke(app, ["press", "9", "-5", "="])
    assert result.exit_code == 0
    assert result.stdout.strip() == "4"


def test_press_unknown_key_after_minus_exits_1(runner):
    result = runner.invoke(app, ["press", "9", "-?"])
    assert result.exit_code == 1
    assert "Unknown key" in result.output


def test_press_unknown_key_exits_1(runner):
    result = runner.invoke(app, ["press", "2", "^", "3"])
    assert result.exit_code == 1
    assert "Unknown key" in result.output


# --- repl ---

def test_repl_session(runner):
    result = runner.invoke(app, ["repl"], input="3 + 4 =\nx 2 =\nquit\n")
    assert result.exit_code == 0
    assert "7" in result.output
    assert "14" in result.output


def test_repl_skips_bad_line_and_continues(runner):
    result = runner.invoke(app, ["repl"], input="5 ?\n9\n")
    assert result.exit_code == 0
    assert "Ignored line" in result.output
    assert "9" in result.output


def test_repl_stops_on_eof(runner):
    result = runner.invoke(app, ["repl"], input="")
    assert result.exit_code == 0


# --- keys ---

def test_keys_lists_keypad(runner):
    result = runner.invoke(app, ["keys"])
    assert result.exit_code == 0
    assert "AC" in result.output
    assert "÷" in result.output
