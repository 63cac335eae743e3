"""
structlog integration.

Routes structlog events through a bugie Logger so application code written
against ``structlog.get_logger()`` shares the same sinks and line format.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .core import Logger, get_default_logger
from .levels import Level

# =============================================================================
# Global State
# =============================================================================

_target: Logger | None = None

EXCLUDED_KEYS = {"level", "event", "logger", "_name", "timestamp"}


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger whose events carry ``name`` as their context."""
    return structlog.get_logger(_name=name or "root")


def _resolve_target() -> Logger:
    return _target if _target is not None else get_default_logger()


# =============================================================================
# Structlog Processors
# =============================================================================


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Move the bound ``_name`` to ``logger``."""
    event_dict["logger"] = event_dict.pop("_name", None) or "root"
    return event_dict


def event_level(event_dict: EventDict) -> Level:
    try:
        return Level.parse(str(event_dict.get("level", "info")))
    except ValueError:
        return Level.INFO


def event_message(event_dict: EventDict) -> str:
    """Join the event text with ``key=value`` pairs for every other field."""
    message = str(event_dict.get("event", ""))
    extras = [f"{key}={event_dict[key]}" for key in sorted(event_dict) if key not in EXCLUDED_KEYS]
    if extras:
        message = f"{message} " + " ".join(extras)
    return message


def bugie_renderer(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Emit through bugie. Returns empty to suppress structlog's own output."""
    target = _resolve_target()
    target.log(None, event_level(event_dict), event_dict.get("logger"), "%s", event_message(event_dict))
    return ""


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_NOP_FILE = _NopFile()


class SilentPrintLoggerFactory:
    """Logger factory that returns a logger writing to nowhere."""

    def __call__(self, *args: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=_NOP_FILE)


# =============================================================================
# Configuration Logic
# =============================================================================


def configure_structlog(level: str = "DEBUG", *, logger: Logger | None = None) -> None:
    """
    Send structlog output to bugie.

    Args:
        level: Minimum structlog level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger: Target logger; the process-wide default when omitted
    """
    global _target
    _target = logger

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            add_logger_name,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            bugie_renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.DEBUG)),
        context_class=dict,
        logger_factory=SilentPrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
