"""CLI for the deskcalc key-press calculator.

Usage:
    python -m deskcalc press 3 + 4 x 2 =       # Print the final display
    python -m deskcalc press '12+3=' --trace    # Show every step
    python -m deskcalc press 7 = --json         # Dump the final state
    python -m deskcalc repl                     # Interactive session
    python -m deskcalc keys                     # Show the keypad
"""

from __future__ import annotations

import json

import typer
from rich.console import Console

from deskcalc.config import load_settings
from deskcalc.keypad import Key, UnknownKeyError, tokenize
from deskcalc.render import render_display, render_keypad, render_tape
from deskcalc.session import Session

app = typer.Typer(
    name="deskcalc",
    help="Key-press desk calculator",
    no_args_is_help=True,
)

_QUIT_WORDS = ("quit", "exit", "q")


def _console() -> Console:
    settings = load_settings()
    return Console(stderr=True, no_color=not settings.color)


def _parse_keys(tokens: list[str], console: Console) -> list[Key]:
    try:
        return tokenize(" ".join(tokens))
    except UnknownKeyError as e:
        console.print(f"[red]Unknown key:[/red] {e.token!r}. Run 'deskcalc keys' to list keys.")
        raise typer.Exit(1)


# Let key tokens such as '-5' through instead of treating them as options
@app.command("press", context_settings={"ignore_unknown_options": True})
def cmd_press(
    keys: list[str] = typer.Argument(help="Keys to press, e.g. 3 + 4 x 2 ="),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show the display after every key"),
    as_json: bool = typer.Option(False, "--json", help="Print the final engine state as JSON"),
) -> None:
    """Press a sequence of keys on a fresh calculator."""
    console = _console()
    session = Session()
    session.press_all(_parse_keys(keys, console))

    if trace:
        render_tape(session.tape, console)
    if as_json:
        typer.echo(json.dumps(session.state.to_dict(), indent=2, ensure_ascii=False))
    else:
        typer.echo(session.display)


@app.command("repl")
def cmd_repl() -> None:
    """Interactive session: type keys, see the display."""
    settings = load_settings()
    console = _console()
    session = Session()

    if settings.show_keypad:
        render_keypad(console)
    render_display(session.state, console)

    while True:
        try:
            line = console.input(settings.prompt)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if line.strip().lower() in _QUIT_WORDS:
            break
        try:
            keys = tokenize(line)
        except UnknownKeyError as e:
            console.print(f"[yellow]Ignored line, unknown key:[/yellow] {e.token!r}")
            continue
        if not keys:
            continue
        session.press_all(keys)
        render_display(session.state, console)


@app.command("keys")
def cmd_keys() -> None:
    """Show the keypad layout and ASCII aliases."""
    render_keypad(_console())


if __name__ == "__main__":
    app()
