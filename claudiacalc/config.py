"""Runtime settings for ClaudiaCalc, read from CLAUDIACALC_* env vars.

CLI options take precedence; see ``Settings.with_overrides``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MENU_WIDTH = 40
_MIN_MENU_WIDTH = 20

_FALSY = ("0", "false", "no", "off")


def _env_int(raw: Optional[str], default: int, minimum: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


@dataclass(frozen=True)
class Settings:
    """Session and logging configuration."""

    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    menu_width: int = DEFAULT_MENU_WIDTH
    show_menu: bool = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from the environment (``os.environ`` by default)."""
        env = os.environ if env is None else env
        return cls(
            log_level=env.get("CLAUDIACALC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            log_file=env.get("CLAUDIACALC_LOG_FILE") or None,
            menu_width=_env_int(env.get("CLAUDIACALC_MENU_WIDTH"), DEFAULT_MENU_WIDTH, _MIN_MENU_WIDTH),
            show_menu=env.get("CLAUDIACALC_SHOW_MENU", "1").strip().lower() not in _FALSY,
        )

    def with_overrides(
        self,
        log_level: Optional[str] = None,
        show_menu: Optional[bool] = None,
    ) -> Settings:
        """Return a copy with any non-None CLI values applied."""
        changes: dict = {}
        if log_level is not None:
            changes["log_level"] = log_level.upper()
        if show_menu is not None:
            changes["show_menu"] = show_menu
        return replace(self, **changes)
