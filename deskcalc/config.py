"""Environment-driven settings for the deskcalc CLI.

    DESKCALC_PROMPT        REPL prompt (default '> ')
    DESKCALC_SHOW_KEYPAD   print the keypad when the REPL starts (default on)
    DESKCALC_COLOR         Rich styling (default on)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_FALSY = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    prompt: str = "> "
    show_keypad: bool = True
    color: bool = True


def _flag(value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() not in _FALSY


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment (os.environ by default)."""
    env = os.environ if environ is None else environ
    return Settings(
        prompt=env.get("DESKCALC_PROMPT", "> "),
        show_keypad=_flag(env.get("DESKCALC_SHOW_KEYPAD"), True),
        color=_flag(env.get("DESKCALC_COLOR"), True),
    )
