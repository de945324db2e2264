"""Display formatting for register values and engine results.

Register display and engine output deliberately use different number
renderings: registers show fixed-point trimmed to at most three decimals,
arithmetic results show six significant digits in general notation.
"""

from __future__ import annotations

from claudiacalc.models import Number, Text, Value


def _fmt_fixed3(n: float) -> str:
    """Fixed-point with 3 decimals, trailing zeros and dot removed."""
    s = f"{n:.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def format_value(value: Value) -> str:
    """Render a register value with its type suffix.

    >>> format_value(Number(42.0))
    '42 (number)'
    >>> format_value(Text("42x"))
    '"42x" (string)'
    """
    if isinstance(value, Number):
        return f"{_fmt_fixed3(value.value)} (number)"
    return f'"{value.value}" (string)'


def format_number(n: float) -> str:
    """Render an arithmetic result in general notation (6 significant digits)."""
    return f"{n:g}"


def number_to_text(n: float) -> str:
    """Coerce a number for string concatenation (fixed, 6 decimals)."""
    return f"{n:f}"


def value_text(value: Value) -> str:
    """Raw string form of a value, as used when mixing with text."""
    if isinstance(value, Text):
        return value.value
    return number_to_text(value.value)
