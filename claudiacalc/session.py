"""Interactive session driver for ClaudiaCalc.

Reads one command per line, resolves register tokens through the
classifier, and prints what the store, formatter or engine returns.
Command errors are printed and the session moves on; only ``q``, end of
input or Ctrl-C end it.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from claudiacalc import __version__
from claudiacalc.classifier import parse_literal, register_for_slot, to_register
from claudiacalc.config import Settings
from claudiacalc.engine import apply
from claudiacalc.formatting import format_value
from claudiacalc.models import CalcError, Operator
from claudiacalc.registers import RegisterStore

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "Enter a command: "
OPERANDS_PROMPT = "Enter two registers (e.g., A B): "

_MENU_ROWS = [
    ("+", "Add"),
    ("-", "Subtract"),
    ("*", "Multiply"),
    ("/", "Divide"),
    ("a-d", "Enter a number or string for A,B,C,D"),
    ("1-4", "Clear register A,B,C,D"),
    ("m", "Prints the menu"),
    ("p", "Prints the registers"),
    ("q", "Quits the app"),
]


def make_console(file: Optional[TextIO] = None, stderr: bool = False) -> Console:
    """Console that prints user text verbatim (no highlighting, emoji or wrapping)."""
    return Console(file=file, stderr=stderr, highlight=False, emoji=False, soft_wrap=True)


class CalculatorSession:
    """One calculator session over a RegisterStore."""

    def __init__(
        self,
        console: Console,
        store: Optional[RegisterStore] = None,
        settings: Optional[Settings] = None,
        input_provider: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.console = console
        self.store = store if store is not None else RegisterStore()
        self.settings = settings if settings is not None else Settings()
        self._input = input_provider or console.input

    # --- output helpers ---

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False)

    def _error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {escape(message)}")

    def print_menu(self) -> None:
        table = Table(
            title=f"ClaudiaCalc v{__version__}",
            show_header=False,
            width=self.settings.menu_width,
        )
        table.add_column("Key", style="green", no_wrap=True)
        table.add_column("Action")
        for key, action in _MENU_ROWS:
            table.add_row(key, action)
        self.console.print(table)

    def print_registers(self) -> None:
        for name, value in self.store.items():
            self._say(f"Register {name.value}: {format_value(value)}")

    # --- commands ---

    def _assign(self, token: str, inline: str) -> None:
        name = to_register(token)
        raw = inline or self._input(f"Enter a number or string for register {name.value}: ")
        if not raw:
            self._error("Empty input")
            return
        self.store.set(name, parse_literal(raw))
        self._say(f"Register {name.value} set to {format_value(self.store.get(name))}")

    def _operate(self, symbol: str, inline: str) -> None:
        tokens = (inline or self._input(OPERANDS_PROMPT)).split()
        if len(tokens) == 1 and len(tokens[0]) >= 2:
            # "AB" names both registers, one character each
            tokens = [tokens[0][0], tokens[0][1]]
        if len(tokens) < 2:
            self._error("Invalid input")
            return
        left, right = to_register(tokens[0]), to_register(tokens[1])
        result = apply(symbol, self.store.get(left), self.store.get(right))
        self._say(f"{left.value} {symbol} {right.value} = {result.display}")

    def _clear(self, digit: str) -> None:
        name = register_for_slot(digit)
        self.store.clear(name)
        self._say(f"Cleared register {name.value}")

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the session should end."""
        parts = line.strip().split(None, 1)
        if not parts:
            self._error("Empty command")
            return True
        token = parts[0]
        inline = parts[1] if len(parts) > 1 else ""
        cmd = token[0].lower()

        try:
            if cmd in "abcd":
                self._assign(token, inline)
            elif cmd in (op.value for op in Operator):
                self._operate(cmd, inline)
            elif cmd in "1234":
                self._clear(cmd)
            elif cmd == "m":
                self.print_menu()
            elif cmd == "p":
                self.print_registers()
            elif cmd == "q":
                return False
            else:
                logger.debug("unknown command %r", token)
                self._error(f"Unknown command '{cmd}'")
        except CalcError as e:
            self._error(e.kind.message)
        except MemoryError:
            logger.warning("out of memory running %r", line)
            self._error("Result too large")
        return True

    def run(self) -> None:
        """Read and execute commands until quit or end of input."""
        if self.settings.show_menu:
            self.print_menu()
        while True:
            try:
                if not self.execute(self._input(COMMAND_PROMPT)):
                    break
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break
