"""Data models for the ClaudiaCalc register calculator.

Value variants, RegisterName, Operator, ErrorKind, OperationResult — the
typed structures that flow through classifier → store → engine → session.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class Number:
    """Numeric register value (an IEEE-754 double)."""

    value: float = 0.0

    @property
    def kind(self) -> str:
        return "number"


@dataclass(frozen=True)
class Text:
    """Textual register value, possibly empty."""

    value: str = ""

    @property
    def kind(self) -> str:
        return "text"


Value = Union[Number, Text]

ZERO = Number(0.0)


class RegisterName(str, Enum):
    """The four fixed register slots."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"


ALL_REGISTERS = [RegisterName.A, RegisterName.B, RegisterName.C, RegisterName.D]


class Operator(str, Enum):
    """Binary operators understood by the engine."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class ErrorKind(str, Enum):
    """Recoverable calculator errors."""

    INVALID_REGISTER = "invalid-register"
    DIVISION_BY_ZERO = "division-by-zero"
    INVALID_OPERAND_COMBINATION = "invalid-operand-combination"
    INVALID_STRING_MULTIPLICATION = "invalid-string-multiplication"
    STRING_DIVISION_UNSUPPORTED = "string-division-unsupported"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_REGISTER: "Invalid register",
    ErrorKind.DIVISION_BY_ZERO: "Division by zero",
    ErrorKind.INVALID_OPERAND_COMBINATION: "Invalid operation between string and number",
    ErrorKind.INVALID_STRING_MULTIPLICATION: "Invalid string multiplication",
    ErrorKind.STRING_DIVISION_UNSUPPORTED: "Cannot divide strings",
}


class CalcError(Exception):
    """Raised when a caller breaks a classifier precondition."""

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.message}: {detail}" if detail else kind.message)


@dataclass
class OperationResult:
    """Outcome of applying an operator: display text or an error kind."""

    output: str = ""
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def display(self) -> str:
        """Text the session prints for this result."""
        if self.error is not None:
            return f"Error: {self.error.message}"
        return self.output

    @classmethod
    def failure(cls, kind: ErrorKind) -> OperationResult:
        return cls(error=kind)
