"""
Record rendering and message preparation.
"""

from __future__ import annotations

from typing import Any

from .levels import RESET, describe
from .timestamps import UNKNOWN_TIME

DEFAULT_MESSAGE_CAPACITY = 1024


# =============================================================================
# Message Preparation (printf-style)
# =============================================================================


def truncate_utf8(text: str, limit: int) -> str:
    """Cut ``text`` to at most ``limit`` UTF-8 bytes without splitting a character."""
    encoded = text.encode("utf-8", errors="replace")
    if len(encoded) <= limit:
        return text
    return encoded[:limit].decode("utf-8", errors="ignore")


def expand_message(fmt: str, args: tuple[Any, ...], capacity: int = DEFAULT_MESSAGE_CAPACITY) -> str:
    """Expand a printf-style format into a message that fits ``capacity``.

    The capacity counts a terminator, so at most ``capacity - 1`` bytes of
    message survive. A format that does not match its arguments falls back
    to the raw format followed by the arguments' reprs. The format is always
    expanded, so ``%%`` collapses even without arguments.
    """
    fmt = str(fmt)
    try:
        message = fmt % args
    except (TypeError, ValueError, KeyError):
        message = " ".join([fmt, *(repr(arg) for arg in args)])
    return truncate_utf8(message, capacity - 1)


# =============================================================================
# Line Formatter
# =============================================================================


class LineFormatter:
    """Renders one record as a single colorized line.

    Layout: ``<color>[<timestamp>][<label>] [<context>] - <message><reset>\\n``
    """

    TEMPLATE = "{color}[{timestamp}][{label}] [{context}] - {message}{reset}\n"

    @classmethod
    def format(
        cls,
        level: object,
        context: str | None,
        message: str,
        timestamp: str | None,
        *,
        use_color: bool = True,
    ) -> str:
        style = describe(level)
        return cls.TEMPLATE.format(
            color=style.color if use_color else "",
            timestamp=timestamp if timestamp is not None else UNKNOWN_TIME,
            label=style.label,
            context=context if context is not None else "",
            message=message,
            reset=RESET if use_color else "",
        )
