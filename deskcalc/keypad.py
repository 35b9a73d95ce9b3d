"""Keypad labels and their mapping onto engine events.

Each labeled control on the keypad produces exactly one event. Terminal
users can't easily type ÷, × or −, so parse_key also accepts a few
plain-ASCII spellings for those labels.
"""

from __future__ import annotations

from enum import Enum

from deskcalc.models import (
    Clear,
    Decimal,
    Digit,
    Event,
    Negate,
    Operator,
    OperatorPress,
    Percent,
)


class Key(str, Enum):
    """On-screen key labels."""

    CLEAR = "AC"
    NEGATE = "±"
    PERCENT = "%"
    DIVIDE = "÷"
    MULTIPLY = "×"
    SUBTRACT = "−"
    ADD = "+"
    EQUALS = "="
    DECIMAL = "."
    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"


class KeyClass(str, Enum):
    """Visual grouping of keys."""

    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"


KEYPAD_ROWS: list[list[Key]] = [
    [Key.CLEAR, Key.NEGATE, Key.PERCENT, Key.DIVIDE],
    [Key.SEVEN, Key.EIGHT, Key.NINE, Key.MULTIPLY],
    [Key.FOUR, Key.FIVE, Key.SIX, Key.SUBTRACT],
    [Key.ONE, Key.TWO, Key.THREE, Key.ADD],
    [Key.ZERO, Key.DECIMAL, Key.EQUALS],
]

ASCII_ALIASES: dict[str, Key] = {
    "-": Key.SUBTRACT,
    "*": Key.MULTIPLY,
    "x": Key.MULTIPLY,
    "/": Key.DIVIDE,
    "+/-": Key.NEGATE,
    "c": Key.CLEAR,
    "C": Key.CLEAR,
}

_OPERATOR_KEYS: dict[Key, Operator] = {
    Key.ADD: Operator.ADD,
    Key.SUBTRACT: Operator.SUBTRACT,
    Key.MULTIPLY: Operator.MULTIPLY,
    Key.DIVIDE: Operator.DIVIDE,
    Key.EQUALS: Operator.EQUALS,
}

# Labels longer than one character, checked before splitting a run per char
_MULTI_CHAR_TOKENS = ("AC", "+/-")


class UnknownKeyError(ValueError):
    """A token that names no key on the keypad."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown key: {token!r}")
        self.token = token


def key_class(key: Key) -> KeyClass:
    if key in _OPERATOR_KEYS:
        return KeyClass.OPERATOR
    if key in (Key.CLEAR, Key.NEGATE, Key.PERCENT):
        return KeyClass.FUNCTION
    return KeyClass.NUMBER


def event_for(key: Key) -> Event:
    """Map a key to the single event it produces."""
    if key == Key.CLEAR:
        return Clear()
    if key == Key.NEGATE:
        return Negate()
    if key == Key.PERCENT:
        return Percent()
    if key == Key.DECIMAL:
        return Decimal()
    op = _OPERATOR_KEYS.get(key)
    if op is not None:
        return OperatorPress(op)
    return Digit(key.value)


def parse_key(token: str) -> Key:
    """Resolve a label or ASCII alias to a Key.

    Raises:
        UnknownKeyError: if the token matches no key.
    """
    if token in ASCII_ALIASES:
        return ASCII_ALIASES[token]
    try:
        return Key(token)
    except ValueError:
        raise UnknownKeyError(token) from None


def tokenize(text: str) -> list[Key]:
    """Split a line of input into keys.

    Whitespace separates keys; a run without whitespace is read one
    character at a time, except for the multi-character labels.
    '12+3=' → [1, 2, +, 3, =], 'AC 5 +/-' → [AC, 5, ±].
    """
    keys: list[Key] = []
    for word in text.split():
        i = 0
        while i < len(word):
            for multi in _MULTI_CHAR_TOKENS:
                if word.startswith(multi, i):
                    keys.append(parse_key(multi))
                    i += len(multi)
                    break
            else:
                keys.append(parse_key(word[i]))
                i += 1
    return keys
