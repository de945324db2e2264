"""Operation engine — applies a binary operator to two register values.

The outcome depends on the operator and on which variants the operands
are. Each operator handler sees one of three combinations:

    number  Number op Number
    text    Text op Text
    mixed   Number op Text, or Text op Number (order preserved)

The engine is display-oriented: it returns the formatted text to print,
or an ErrorKind. It never touches the register store.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Union

from claudiacalc.formatting import format_number, value_text
from claudiacalc.models import ErrorKind, OperationResult, Operator, Text, Value

logger = logging.getLogger(__name__)

_NUMBER = "number"
_TEXT = "text"
_MIXED = "mixed"


def _combination(left: Value, right: Value) -> str:
    if left.kind == right.kind:
        return left.kind
    return _MIXED


def _add(combo: str, left: Value, right: Value) -> OperationResult:
    if combo == _NUMBER:
        return OperationResult(format_number(left.value + right.value))
    # text and mixed both concatenate, numbers coerced in place
    return OperationResult(value_text(left) + value_text(right))


def _subtract(combo: str, left: Value, right: Value) -> OperationResult:
    if combo == _NUMBER:
        return OperationResult(format_number(left.value - right.value))
    if combo == _TEXT:
        # First occurrence only; left unchanged when right is absent
        return OperationResult(left.value.replace(right.value, "", 1))
    return OperationResult.failure(ErrorKind.INVALID_OPERAND_COMBINATION)


_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1


def _repeat(text: str, times: float) -> str:
    # Counts outside the 32-bit int range, or non-finite, repeat zero times
    if not math.isfinite(times) or not _INT32_MIN - 1 < times < _INT32_MAX + 1:
        return ""
    count = int(times)  # truncates toward zero
    if count <= 0:
        return ""
    return text * count


def _multiply(combo: str, left: Value, right: Value) -> OperationResult:
    if combo == _NUMBER:
        return OperationResult(format_number(left.value * right.value))
    if combo == _TEXT:
        return OperationResult.failure(ErrorKind.INVALID_STRING_MULTIPLICATION)
    if isinstance(left, Text):
        return OperationResult(_repeat(left.value, right.value))
    return OperationResult(_repeat(right.value, left.value))


def _divide(combo: str, left: Value, right: Value) -> OperationResult:
    if combo == _NUMBER:
        if right.value == 0.0:
            return OperationResult.failure(ErrorKind.DIVISION_BY_ZERO)
        return OperationResult(format_number(left.value / right.value))
    if combo == _TEXT:
        return OperationResult.failure(ErrorKind.STRING_DIVISION_UNSUPPORTED)
    return OperationResult.failure(ErrorKind.INVALID_OPERAND_COMBINATION)


_HANDLERS: dict[Operator, Callable[[str, Value, Value], OperationResult]] = {
    Operator.ADD: _add,
    Operator.SUBTRACT: _subtract,
    Operator.MULTIPLY: _multiply,
    Operator.DIVIDE: _divide,
}


def apply(op: Union[Operator, str], left: Value, right: Value) -> OperationResult:
    """Apply ``op`` to two values.

    Args:
        op: Operator or its symbol ('+', '-', '*', '/').
        left: Left operand.
        right: Right operand.

    Returns:
        OperationResult holding the display text, or the ErrorKind when the
        combination is not allowed. Engine errors are never raised.

    Raises:
        ValueError: if ``op`` is not one of the four operator symbols.
    """
    operator = Operator(op)
    combo = _combination(left, right)
    result = _HANDLERS[operator](combo, left, right)
    if not result.ok:
        logger.debug("%s %s %s -> %s", left.kind, operator.value, right.kind, result.error.value)
    return result
