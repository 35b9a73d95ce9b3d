"""Session tests: state ownership and the key-press tape."""

import pytest

from deskcalc.engine import INITIAL_STATE
from deskcalc.keypad import Key, UnknownKeyError
from deskcalc.models import Digit, Operator
from deskcalc.session import Session


@pytest.fixture
def session():
    return Session()


def test_new_session_starts_at_zero(session):
    assert session.display == "0"
    assert session.state == INITIAL_STATE
    assert session.tape == []


def test_press_returns_display(session):
    assert session.press(Key.THREE) == "3"
    assert session.press("+") == "3"
    assert session.press("4") == "4"
    assert session.press("×") == "7"
    assert session.press("2") == "2"
    assert session.press("=") == "14"


def test_press_all(session):
    assert session.press_all(["1", "÷", "0", "="]) == "Infinity"


def test_press_unknown_label_leaves_state_alone(session):
    session.press("5")
    with pytest.raises(UnknownKeyError):
        session.press("√")
    assert session.display == "5"
    assert len(session.tape) == 1


def test_send_raw_event(session):
    assert session.send(Digit("9")) == "9"
    assert session.tape[-1].key == "Digit"


def test_tape_records_each_press(session):
    session.press_all(["5", "+", "3", "="])
    assert [(e.key, e.display) for e in session.tape] == [
        ("5", "5"),
        ("+", "5"),
        ("3", "3"),
        ("=", "8"),
    ]


def test_clear_resets_state_but_keeps_tape(session):
    session.press_all(["5", "+", "3"])
    assert session.clear() == "0"
    assert session.state == INITIAL_STATE
    assert session.state.pending_operator is None
    assert len(session.tape) == 4
    assert session.tape[-1].key == "AC"


def test_aliases_press_through_session(session):
    session.press_all(["6", "*", "7", "="])
    assert session.display == "42"
    assert session.state.pending_operator == Operator.EQUALS
