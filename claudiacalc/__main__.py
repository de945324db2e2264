"""CLI for the ClaudiaCalc register calculator.

Usage:
    python -m claudiacalc run                    # Interactive session
    python -m claudiacalc run --no-menu          # Skip the startup menu
    python -m claudiacalc apply + 5 3            # One-shot operation on literals
    python -m claudiacalc menu                   # Print the command menu
"""

from __future__ import annotations

from typing import Optional

import typer

from claudiacalc import __version__
from claudiacalc.classifier import parse_literal
from claudiacalc.config import Settings
from claudiacalc.engine import apply
from claudiacalc.log import setup_logging
from claudiacalc.models import Operator
from claudiacalc.session import CalculatorSession, make_console

app = typer.Typer(
    name="claudiacalc",
    help="Four-register calculator for numbers and strings",
    no_args_is_help=True,
)
console = make_console()
err_console = make_console(stderr=True)


def _settings(log_level: Optional[str] = None, show_menu: Optional[bool] = None) -> Settings:
    settings = Settings.from_env().with_overrides(log_level=log_level, show_menu=show_menu)
    setup_logging(settings.log_level, settings.log_file)
    return settings


@app.command("run")
def cmd_run(
    no_menu: bool = typer.Option(False, "--no-menu", help="Skip the menu on startup"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="DEBUG, INFO, WARNING, ERROR"),
) -> None:
    """Start an interactive calculator session."""
    settings = _settings(log_level=log_level, show_menu=False if no_menu else None)
    console.print(f"[bold]ClaudiaCalc[/bold] v{__version__}")
    CalculatorSession(console, settings=settings).run()


@app.command("apply")
def cmd_apply(
    op: str = typer.Argument(help="Operator: +, -, *, /"),
    left: str = typer.Argument(help="Left operand (number or string)"),
    right: str = typer.Argument(help="Right operand (number or string)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="DEBUG, INFO, WARNING, ERROR"),
) -> None:
    """Apply one operator to two literal operands and print the result."""
    _settings(log_level=log_level)
    try:
        operator = Operator(op)
    except ValueError:
        err_console.print(f"[red]Invalid operator: {op}[/red]. Choose: +, -, *, /")
        raise typer.Exit(1)

    try:
        result = apply(operator, parse_literal(left), parse_literal(right))
    except MemoryError:
        err_console.print("[red]Error:[/red] Result too large")
        raise typer.Exit(1)
    if not result.ok:
        err_console.print(f"[red]Error:[/red] {result.error.message}")
        raise typer.Exit(1)
    console.print(result.output, markup=False)


@app.command("menu")
def cmd_menu() -> None:
    """Print the command menu."""
    settings = _settings()
    CalculatorSession(console, settings=settings).print_menu()


if __name__ == "__main__":
    app()
