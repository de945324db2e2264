"""Input classification: register tokens versus literal values.

Two independent concerns live here:
- deciding whether a token names a register (A-D, case-insensitive, only
  the first character counts), and
- turning a free-form input line into a Number when the whole line is a
  decimal float, or a Text otherwise.
"""

from __future__ import annotations

import math
import re

from claudiacalc.models import ALL_REGISTERS, CalcError, ErrorKind, Number, RegisterName, Text, Value

# Whole-string decimal float: 3, -2.5, .5, 5., 1e3, +4.2E-1
_DECIMAL_RE = re.compile(r"[+-]?(?P<mantissa>[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
# Non-finite spellings accepted by C's strtod family
_SPECIAL_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE | re.ASCII)

_REGISTER_CHARS = "abcd"


def is_register_token(s: str) -> bool:
    """True iff ``s`` is non-empty and starts with a, b, c or d (any case)."""
    return bool(s) and s[0].lower() in _REGISTER_CHARS


def to_register(s: str) -> RegisterName:
    """Resolve a register token to its RegisterName.

    Raises:
        CalcError: with ErrorKind.INVALID_REGISTER if ``s`` is not a
            register token.
    """
    if not is_register_token(s):
        raise CalcError(ErrorKind.INVALID_REGISTER, repr(s))
    return RegisterName(s[0].upper())


def register_for_slot(s: str) -> RegisterName:
    """Map a clear-command digit ('1'..'4') to its register.

    Raises:
        CalcError: with ErrorKind.INVALID_REGISTER for anything else.
    """
    if len(s) != 1 or s not in "1234":
        raise CalcError(ErrorKind.INVALID_REGISTER, repr(s))
    return ALL_REGISTERS[int(s) - 1]


def parse_literal(s: str) -> Value:
    """Interpret an input line as a Number if it is entirely a float, else Text.

    Whitespace is significant: ``" 3"`` is Text. Only ASCII digits count.
    Decimal literals out of double range are kept as Text: too large ones
    rather than becoming infinity, non-zero tiny ones rather than 0.0.

    >>> parse_literal("-2.5")
    Number(value=-2.5)
    >>> parse_literal("3abc")
    Text(value='3abc')
    """
    match = _DECIMAL_RE.fullmatch(s)
    if match:
        n = float(s)
        if math.isinf(n):
            return Text(s)
        if n == 0.0 and match.group("mantissa").strip("0.") != "":
            return Text(s)
        return Number(n)
    if _SPECIAL_RE.fullmatch(s):
        return Number(float(s))
    return Text(s)
