"""
bugie: a small thread-safe logging facade.

Writes one colorized line per record to a selectable sink:
- stdout: Standard output (default after ``init()``)
- stderr or any caller stream: borrowed, never closed
- file: appended to, owned and closed on replacement or cleanup

Line layout: ``<color>[YYYY-MM-DDTHH:MM:SSZ][LEVEL] [context] - message<reset>``
"""

from .config import ColorMode, LoggerSettings
from .core import (
    Logger,
    Record,
    SinkRegistry,
    cleanup,
    configure,
    debug,
    emit,
    error,
    get_default_logger,
    info,
    init,
    log,
    reset_default_logger,
    set_sink,
    set_sink_path,
    warning,
)
from .exceptions import BugieError, SinkError, SinkOpenError
from .formatters import LineFormatter
from .levels import Level, LevelStyle, describe
from .sinks import BaseSink, BorrowedSink, FileSink, StandardStreamSink, StreamSink, as_borrowed, as_sink
from .timestamps import now_iso8601

__all__ = [
    "BaseSink",
    "BorrowedSink",
    "BugieError",
    "ColorMode",
    "FileSink",
    "Level",
    "LevelStyle",
    "LineFormatter",
    "Logger",
    "LoggerSettings",
    "Record",
    "SinkError",
    "SinkOpenError",
    "SinkRegistry",
    "StandardStreamSink",
    "StreamSink",
    "as_borrowed",
    "as_sink",
    "cleanup",
    "configure",
    "debug",
    "describe",
    "emit",
    "error",
    "get_default_logger",
    "info",
    "init",
    "log",
    "now_iso8601",
    "reset_default_logger",
    "set_sink",
    "set_sink_path",
    "warning",
]
