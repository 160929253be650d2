from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from . import __version__, config, exchange, termutils
from .config import Settings
from .render import truncate
from .session import Outcome, SessionState
from .suggestions import filter_and_sort
from .termutils import err_print

app = typer.Typer(add_completion=False)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"tabpicker version: {__version__}")
        raise typer.Exit()


def _print_candidates(state: SessionState, settings: Settings) -> None:
    """prints the matching suggestions without starting the picker"""
    table = Table("label", "value")
    for candidate in state.candidates:
        table.add_row(candidate.label, truncate(candidate.value, settings.value_width))
    console.print(table)


@app.command()
def main(
    exchange_file: Annotated[
        Path | None,
        typer.Argument(
            help="json file holding the current input and the suggestions, the selection is written back to it",
            show_default=False,
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="path to an alternative settings.json"),
    ] = None,
    list_only: Annotated[
        bool,
        typer.Option("--list", help="print the matching suggestions and exit"),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="show version and exit",
        ),
    ] = None,
):
    """pick one of the custom suggestions and write it back to the exchange file"""
    if exchange_file is None:
        err_print("no input file provided")
        raise typer.Exit(code=1)

    settings = config.load_config(config_path)

    try:
        current_input, raw = exchange.load(exchange_file)
    except exchange.LoadError as e:
        # a broken file is reported and treated as an empty suggestion list
        err_print(f"failed to load suggestions: {e}")
        current_input, raw = "", {}

    candidates = filter_and_sort(raw, current_input)
    if not candidates:
        err_print("no custom suggestions available")
        raise typer.Exit(code=1)

    state = SessionState(candidates, current_input)
    if list_only:
        _print_candidates(state, settings)
        return

    result = termutils.run_curses_session(state, settings)

    if result.outcome is Outcome.CANCELLED:
        return
    if result.outcome is Outcome.INVALID or result.value is None:
        err_print("invalid selection")
        raise typer.Exit(code=1)

    try:
        exchange.save(exchange_file, result.value)
    except exchange.SaveError as e:
        err_print(f"failed to save selection: {e}")
        raise typer.Exit(code=1) from e
