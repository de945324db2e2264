"""Register store: four fixed slots, always fully populated."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from claudiacalc.formatting import format_value
from claudiacalc.models import ALL_REGISTERS, ZERO, RegisterName, Value

logger = logging.getLogger(__name__)


def _zeroed() -> dict[RegisterName, Value]:
    return {name: ZERO for name in ALL_REGISTERS}


@dataclass
class RegisterStore:
    """Values held by registers A-D for one session.

    Every register exists from construction; there is no missing or null
    state, only Number(0.0) after a clear.
    """

    values: dict[RegisterName, Value] = field(default_factory=_zeroed)

    def get(self, name: RegisterName) -> Value:
        return self.values[name]

    def set(self, name: RegisterName, value: Value) -> None:
        self.values[name] = value
        logger.debug("register %s <- %s", name.value, format_value(value))

    def clear(self, name: RegisterName) -> None:
        self.set(name, ZERO)

    def items(self) -> Iterator[tuple[RegisterName, Value]]:
        """Yield (name, value) pairs in A, B, C, D order."""
        for name in ALL_REGISTERS:
            yield name, self.values[name]

