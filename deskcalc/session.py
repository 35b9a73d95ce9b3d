"""A calculator session: the single EngineState plus a tape of presses.

The session is the collaborator that serializes key presses into the
engine, one at a time, and re-reads the display after each.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from deskcalc.engine import INITIAL_STATE, apply
from deskcalc.keypad import Key, event_for, parse_key
from deskcalc.models import EngineState, Event


@dataclass
class TapeEntry:
    """One key press and the display it produced."""

    key: str
    display: str


@dataclass
class Session:
    """Owns the engine state for the lifetime of one calculator session."""

    state: EngineState = INITIAL_STATE
    tape: list[TapeEntry] = field(default_factory=list)

    @property
    def display(self) -> str:
        return self.state.display

    def send(self, event: Event, label: str = "") -> str:
        """Apply a raw event and return the new display."""
        self.state = apply(self.state, event)
        self.tape.append(TapeEntry(key=label or type(event).__name__, display=self.state.display))
        return self.state.display

    def press(self, key: Union[Key, str]) -> str:
        """Press a key (or its label) and return the new display.

        Raises:
            UnknownKeyError: if a label string names no key.
        """
        if not isinstance(key, Key):
            key = parse_key(key)
        return self.send(event_for(key), label=key.value)

    def press_all(self, keys: Iterable[Union[Key, str]]) -> str:
        for key in keys:
            self.press(key)
        return self.display

    def clear(self) -> str:
        return self.press(Key.CLEAR)
