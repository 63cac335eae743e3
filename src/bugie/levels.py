"""
Log levels and their console presentation.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

# =============================================================================
# ANSI Color Codes
# =============================================================================

RESET = "\033[0m"

COLORS = {
    "debug": "\033[34m",
    "info": "\033[32m",
    "warning": "\033[1;33m",
    "error": "\033[1;31m",
    "reset": RESET,
}


class Level(IntEnum):
    """Severity of a record. ``NONE`` is a sentinel, never a real severity."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    NONE = 4

    @classmethod
    def parse(cls, value: Level | int | str) -> Level:
        """Resolve a level from an enum member, its integer value or its name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            name = _ALIASES.get(name, name)
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"unknown log level {value!r}") from None
        return cls(value)


_ALIASES = {
    "WARN": "WARNING",
    "CRITICAL": "ERROR",
    "FATAL": "ERROR",
}


class LevelStyle(NamedTuple):
    label: str
    color: str


_STYLES = {
    Level.DEBUG: LevelStyle("DEBUG", COLORS["debug"]),
    Level.INFO: LevelStyle("INFO", COLORS["info"]),
    Level.WARNING: LevelStyle("WARNING", COLORS["warning"]),
    Level.ERROR: LevelStyle("ERROR", COLORS["error"]),
}

UNKNOWN_STYLE = LevelStyle("UNKNOWN", RESET)


def describe(level: object) -> LevelStyle:
    """Map a level to its display label and ANSI color prefix.

    Anything outside DEBUG..ERROR, including ``Level.NONE`` and arbitrary
    integers, renders as ``UNKNOWN`` with the reset code as its color.
    """
    try:
        return _STYLES.get(level, UNKNOWN_STYLE)  # type: ignore[arg-type]
    except TypeError:
        return UNKNOWN_STYLE
