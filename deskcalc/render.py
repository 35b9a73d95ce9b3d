"""Rich rendering for the calculator display, keypad and tape."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from deskcalc.keypad import ASCII_ALIASES, KEYPAD_ROWS, KeyClass, key_class
from deskcalc.models import EngineState, Operator
from deskcalc.session import TapeEntry

_KEY_STYLES = {
    KeyClass.NUMBER: "white on grey37",
    KeyClass.OPERATOR: "bold white on dark_orange",
    KeyClass.FUNCTION: "black on grey70",
}


def _display_text(state: EngineState) -> Text:
    text = Text(justify="right")
    if state.pending_operator is not None and state.pending_operator != Operator.EQUALS:
        text.append(f"{state.pending_operator.value}  ", style="dim")
    text.append(state.display, style="bold")
    return text


def render_display(state: EngineState, console: Console) -> None:
    """Render the display string in a right-aligned panel."""
    console.print(Panel(_display_text(state), width=30))


def render_keypad(console: Console) -> None:
    """Render the keypad grid, colored by key class."""
    table = Table(show_header=False, show_lines=True, box=None, padding=(0, 1))
    for _ in range(4):
        table.add_column(justify="center", min_width=5)

    for row in KEYPAD_ROWS:
        cells = [
            Text(f" {key.value} ", style=_KEY_STYLES[key_class(key)])
            for key in row
        ]
        table.add_row(*cells)

    console.print()
    console.print(table)
    aliases = ", ".join(f"{alias} → {key.value}" for alias, key in ASCII_ALIASES.items())
    console.print(f"[dim]ASCII aliases: {aliases}[/dim]")
    console.print()


def render_tape(tape: list[TapeEntry], console: Console) -> None:
    """Render a table of key presses and the display after each."""
    if not tape:
        console.print("[yellow]No keys pressed.[/yellow]")
        return

    table = Table(title="Tape", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Key", style="cyan", justify="center")
    table.add_column("Display", justify="right")

    for i, entry in enumerate(tape, 1):
        display = entry.display
        if display in ("Infinity", "-Infinity", "NaN"):
            display = f"[red]{display}[/red]"
        table.add_row(str(i), entry.key, display)

    console.print()
    console.print(table)
    console.print()
