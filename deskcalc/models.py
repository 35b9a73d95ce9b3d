"""Data models for the deskcalc engine.

Operator enum, the key-press event records and EngineState: the typed
structures that flow through keypad → engine → session → CLI.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Operator(str, Enum):
    """Binary operators plus the evaluate-now command."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    EQUALS = "="


DIGITS = "0123456789"


@dataclass(frozen=True)
class Digit:
    """Append one numeral digit to the display."""

    digit: str

    def __post_init__(self) -> None:
        if len(self.digit) != 1 or self.digit not in DIGITS:
            raise ValueError(f"Not a digit: {self.digit!r}")


@dataclass(frozen=True)
class Decimal:
    """Insert a decimal point."""


@dataclass(frozen=True)
class Clear:
    """Full reset (AC)."""


@dataclass(frozen=True)
class Negate:
    """Toggle the sign of the displayed number."""


@dataclass(frozen=True)
class Percent:
    """Divide the displayed number by 100."""


@dataclass(frozen=True)
class OperatorPress:
    """Choose an operator, evaluating any pending one first."""

    operator: Operator


Event = Union[Digit, Decimal, Clear, Negate, Percent, OperatorPress]


@dataclass(frozen=True)
class EngineState:
    """Everything the calculator remembers between key presses.

    ``previous_value`` and ``pending_operator`` are set and cleared together:
    both None means no operation chain is in progress.
    """

    display: str = "0"
    previous_value: Optional[float] = None
    pending_operator: Optional[Operator] = None
    awaiting_fresh_operand: bool = False

    @property
    def chain_pending(self) -> bool:
        return self.pending_operator is not None

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        previous = self.previous_value
        if previous is not None and not math.isfinite(previous):
            # JSON has no inf/nan literals
            previous = str(previous)
        return {
            "display": self.display,
            "previous_value": previous,
            "pending_operator": self.pending_operator.value if self.pending_operator else None,
            "awaiting_fresh_operand": self.awaiting_fresh_operand,
        }
