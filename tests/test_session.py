"""Tests for the interactive session driver.

The session runs against an in-memory console and a scripted input
provider, so no terminal is involved.
"""

import io

import pytest

from claudiacalc.config import Settings
from claudiacalc.models import Number, RegisterName, Text
from claudiacalc.session import CalculatorSession, make_console


class ScriptedInput:
    """Input provider that replays lines, then raises EOFError."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def out():
    return io.StringIO()


def make_session(out, *lines, show_menu=False):
    console = make_console(file=out)
    scripted = ScriptedInput(*lines)
    session = CalculatorSession(console, settings=Settings(show_menu=show_menu), input_provider=scripted)
    return session, scripted


# --- Assignment (4 tests) ---

def test_assign_inline_number(out):
    session, _ = make_session(out)
    assert session.execute("a 42")
    assert session.store.get(RegisterName.A) == Number(42.0)
    assert "Register A set to 42 (number)" in out.getvalue()


def test_assign_prompts_for_value(out):
    session, scripted = make_session(out, "42x")
    session.execute("B")
    assert session.store.get(RegisterName.B) == Text("42x")
    assert scripted.prompts == ["Enter a number or string for register B: "]
    assert 'Register B set to "42x" (string)' in out.getvalue()


def test_assign_empty_input_is_error(out):
    session, _ = make_session(out, "")
    session.execute("c")
    assert session.store.get(RegisterName.C) == Number(0.0)
    assert "Error: Empty input" in out.getvalue()


def test_assign_prints_markup_verbatim(out):
    session, _ = make_session(out, "[bold]x[/bold]")
    session.execute("d")
    assert 'Register D set to "[bold]x[/bold]" (string)' in out.getvalue()


# --- Operations (5 tests) ---

def test_operation_inline_registers(out):
    session, _ = make_session(out)
    session.execute("a 5")
    session.execute("b 3")
    session.execute("+ a b")
    assert "A + B = 8" in out.getvalue()


def test_operation_prompts_for_registers(out):
    session, scripted = make_session(out, "B A")
    session.store.set(RegisterName.A, Text("ab"))
    session.store.set(RegisterName.B, Number(3.0))
    session.execute("*")
    assert scripted.prompts == ["Enter two registers (e.g., A B): "]
    assert "B * A = ababab" in out.getvalue()


def test_operation_error_is_printed(out):
    session, _ = make_session(out)
    session.execute("a 5")
    assert session.execute("/ a b")
    assert "A / B = Error: Division by zero" in out.getvalue()


def test_operation_invalid_register(out):
    session, _ = make_session(out)
    session.execute("+ a x")
    assert "Error: Invalid register" in out.getvalue()


def test_operation_needs_two_registers(out):
    session, _ = make_session(out, "a")
    session.execute("-")
    assert "Error: Invalid input" in out.getvalue()


# --- Other commands (6 tests) ---

def test_clear_register(out):
    session, _ = make_session(out)
    session.execute("c hello")
    session.execute("3")
    assert session.store.get(RegisterName.C) == Number(0.0)
    assert "Cleared register C" in out.getvalue()


def test_print_registers(out):
    session, _ = make_session(out)
    session.execute("b 2.5")
    session.execute("p")
    lines = [line for line in out.getvalue().splitlines() if line.startswith("Register ") and ":" in line]
    assert lines == [
        "Register A: 0 (number)",
        "Register B: 2.5 (number)",
        "Register C: 0 (number)",
        "Register D: 0 (number)",
    ]


def test_menu_lists_commands(out):
    session, _ = make_session(out)
    session.execute("m")
    text = out.getvalue()
    assert "ClaudiaCalc v" in text
    assert "Quits the app" in text


def test_empty_command(out):
    session, _ = make_session(out)
    assert session.execute("   ")
    assert "Error: Empty command" in out.getvalue()


def test_unknown_command(out):
    session, _ = make_session(out)
    assert session.execute("x")
    assert "Error: Unknown command 'x'" in out.getvalue()


def test_quit_ends_session(out):
    session, _ = make_session(out)
    assert session.execute("q") is False
    assert session.execute("Q") is False


# --- Full run (3 tests) ---

def test_run_end_to_end(out):
    session, _ = make_session(out, "a", "5", "b", "3", "+", "A B", "-", "a b", "a", "ab", "b", "3", "*", "B A", "q")
    session.run()
    text = out.getvalue()
    assert "A + B = 8" in text
    assert "A - B = 2" in text
    assert "B * A = ababab" in text


def test_run_stops_at_end_of_input(out):
    session, scripted = make_session(out, "a 1")
    session.run()
    assert session.store.get(RegisterName.A) == Number(1.0)
    assert scripted.prompts == ["Enter a command: ", "Enter a command: "]


def test_run_shows_menu_when_enabled(out):
    session, _ = make_session(out, "q", show_menu=True)
    session.run()
    assert "Prints the registers" in out.getvalue()


# --- Oversized results (3 tests) ---

def test_huge_repeat_count_does_not_end_session(out):
    session, _ = make_session(out, "a 1e20", "b ab", "* a b", "* b a", "p", "q")
    session.run()
    lines = [line.rstrip() for line in out.getvalue().splitlines()]
    assert "A * B =" in lines
    assert "B * A =" in lines
    assert 'Register B: "ab" (string)' in lines


def test_out_of_memory_reported_and_session_continues(out, monkeypatch):
    def exhausted(op, left, right):
        raise MemoryError

    monkeypatch.setattr("claudiacalc.session.apply", exhausted)
    session, _ = make_session(out, "* a b", "c 7", "q")
    session.run()
    text = out.getvalue()
    assert "Error: Result too large" in text
    assert "Register C set to 7 (number)" in text


def test_registers_without_space(out):
    session, _ = make_session(out, "AB")
    session.execute("a 5")
    session.execute("b 3")
    session.execute("-")
    assert "A - B = 2" in out.getvalue()
    session.execute("+ ba")
    assert "B + A = 8" in out.getvalue()
