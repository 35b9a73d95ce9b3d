"""Calculator engine: the key-press state machine.

``apply(state, event)`` is total: every event is accepted in every state and
nothing is ever raised. Division by zero and other non-finite results flow
through as inf/nan and are formatted like any other number.

The display string is the source of truth for the operand being typed.
Numbers are parsed out of it only when an operator, sign or percent key
needs a value, and computed results are written back as text.
"""

from __future__ import annotations

import decimal
import math
import re
from dataclasses import replace
from typing import Iterable, Optional

from deskcalc.models import (
    Clear,
    Decimal,
    Digit,
    EngineState,
    Event,
    Negate,
    Operator,
    OperatorPress,
    Percent,
)

INITIAL_STATE = EngineState()

# Longest numeric prefix, e.g. "12.5", ".5", "5.", "1e-7", "-Infinity"
_NUMBER_PREFIX_RE = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)
_EXPONENT_RE = re.compile(r"e([+-]?)0*(\d+)$")

# Integral values at or above this render in exponent form
_EXPONENT_THRESHOLD = 1e21
# Above this, int(value) would print binary noise instead of padded zeros
_EXACT_INT_LIMIT = 2 ** 53
# Fractional values below this render in exponent form
_SMALL_THRESHOLD = 1e-6


def parse_number(text: str) -> float:
    """Read the leading number out of a display string.

    Trailing junk is ignored ("5." → 5.0, "Infinity3" → inf). Text with no
    numeric prefix reads as nan.
    """
    m = _NUMBER_PREFIX_RE.match(text)
    if not m:
        return math.nan
    return float(m.group(1))


def format_number(value: float) -> str:
    """Render a computed value for the display.

    14.0 → '14', 0.05 → '0.05', 1e-07 → '1e-7', 1/0 → 'Infinity'.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    magnitude = abs(value)
    if value.is_integer() and magnitude < _EXACT_INT_LIMIT:
        return str(int(value))

    text = repr(value)
    if _SMALL_THRESHOLD <= magnitude < _EXPONENT_THRESHOLD:
        # Shortest round-trip digits, zero padded: 1e-05 → '0.00001',
        # 1.2345678901234568e+20 → '123456789012345680000'
        return format(decimal.Decimal(text).normalize(), "f")
    m = _EXPONENT_RE.search(text)
    if not m:
        return text
    sign = m.group(1) or "+"
    return f"{text[:m.start()]}e{sign}{m.group(2)}"


def evaluate(op: Optional[Operator], a: float, b: float) -> float:
    """Combine the pending left operand with the right operand.

    ``=`` (and anything unrecognized) yields the right operand, so pressing
    ``=`` again just re-displays the current value.
    """
    if op == Operator.ADD:
        return a + b
    if op == Operator.SUBTRACT:
        return a - b
    if op == Operator.MULTIPLY:
        return a * b
    if op == Operator.DIVIDE:
        return _divide(a, b)
    return b


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 is ±inf, 0/0 is nan."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def apply(state: EngineState, event: Event) -> EngineState:
    """Return the state that follows ``event``."""
    if isinstance(event, Digit):
        return _input_digit(state, event.digit)
    if isinstance(event, Decimal):
        return _input_decimal(state)
    if isinstance(event, Clear):
        return INITIAL_STATE
    if isinstance(event, Negate):
        return replace(state, display=format_number(parse_number(state.display) * -1))
    if isinstance(event, Percent):
        return replace(state, display=format_number(parse_number(state.display) / 100))
    if isinstance(event, OperatorPress):
        return _perform_operation(state, event.operator)
    return state


def _input_digit(state: EngineState, digit: str) -> EngineState:
    if state.awaiting_fresh_operand:
        return replace(state, display=digit, awaiting_fresh_operand=False)
    if state.display == "0":
        return replace(state, display=digit)
    return replace(state, display=state.display + digit)


def _input_decimal(state: EngineState) -> EngineState:
    if state.awaiting_fresh_operand:
        return replace(state, display="0.", awaiting_fresh_operand=False)
    if "." not in state.display:
        return replace(state, display=state.display + ".")
    return state


def _perform_operation(state: EngineState, op: Operator) -> EngineState:
    input_value = parse_number(state.display)
    display = state.display
    previous = state.previous_value

    if previous is None:
        # First operand of a new chain: nothing to evaluate yet, even for '='
        previous = input_value
    elif state.pending_operator is not None:
        # A NaN left operand (after 0 ÷ 0) restarts the chain from 0
        if math.isnan(previous):
            previous = 0.0
        previous = evaluate(state.pending_operator, previous, input_value)
        display = format_number(previous)

    return EngineState(
        display=display,
        previous_value=previous,
        pending_operator=op,
        awaiting_fresh_operand=True,
    )


def run(events: Iterable[Event], state: Optional[EngineState] = None) -> EngineState:
    """Fold a sequence of events over ``state`` (the initial state by default)."""
    current = state if state is not None else INITIAL_STATE
    for event in events:
        current = apply(current, event)
    return current
