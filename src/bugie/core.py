"""
Core logging state and the emission path.
"""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass
from typing import Any

from .config import LoggerSettings
from .exceptions import SinkOpenError
from .formatters import LineFormatter, expand_message
from .levels import Level
from .sinks import BaseSink, BorrowedSink, FileSink, StandardStreamSink, as_borrowed, as_sink
from .timestamps import Clock, now_iso8601, utc_now


@dataclass(frozen=True)
class Record:
    """One log entry handed to the emitter.

    ``message`` is already expanded and carries no trailing newline. A
    ``sink`` of None means the logger's default sink.
    """

    level: Level | int
    message: str
    context: str | None = None
    sink: Any = None


# =============================================================================
# Sink Registry
# =============================================================================


class SinkRegistry:
    """Holds the current default sink.

    Not synchronized on its own; ``Logger`` calls it with its lock held.
    """

    def __init__(self) -> None:
        self._default: BaseSink | None = None

    @property
    def default(self) -> BaseSink | None:
        return self._default

    @property
    def initialized(self) -> bool:
        return self._default is not None

    def _close_owned(self) -> None:
        if self._default is not None and self._default.owned:
            self._default.close()

    def init(self) -> None:
        self._close_owned()
        self._default = StandardStreamSink("stdout")

    def install(self, sink: BaseSink) -> None:
        if sink is self._default:
            return
        # re-borrowing the current owned sink hands it back to the caller open
        if not (isinstance(sink, BorrowedSink) and sink.inner is self._default):
            self._close_owned()
        self._default = sink

    def cleanup(self) -> None:
        self._close_owned()
        self._default = None


def report_diagnostic(message: str) -> None:
    """Write a one-line diagnostic to standard error, ignoring failures."""
    try:
        sys.stderr.write(message + "\n")
        sys.stderr.flush()
    except (OSError, ValueError, AttributeError):
        pass


# =============================================================================
# Logger
# =============================================================================


class Logger:
    """Owns a sink registry and the lock that serializes every emission.

    The lock covers sink selection, timestamping, rendering and the write,
    so lines from concurrent threads never interleave and timestamps follow
    line order. Registry changes take the same lock.
    """

    def __init__(self, settings: LoggerSettings | None = None, *, clock: Clock = utc_now):
        self._settings = settings or LoggerSettings()
        self._clock = clock
        self._registry = SinkRegistry()
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def settings(self) -> LoggerSettings:
        return self._settings

    def configure(self, **options: Any) -> LoggerSettings:
        """Replace settings, keeping options not named here."""
        with self._lock:
            self._settings = LoggerSettings.model_validate({**self._settings.model_dump(), **options})
            return self._settings

    @property
    def sink(self) -> BaseSink | None:
        with self._lock:
            return self._registry.default

    def init(self) -> None:
        with self._lock:
            self._registry.init()

    def cleanup(self) -> None:
        with self._lock:
            self._registry.cleanup()

    def set_sink(self, stream: Any) -> None:
        """Install ``stream`` as the default sink.

        The sink is always borrowed: bugie never closes it, even when it is a
        ``FileSink``. The caller keeps responsibility for closing it.
        """
        sink = as_borrowed(stream)
        with self._lock:
            self._registry.install(sink)

    def set_sink_path(self, path: str | os.PathLike[str]) -> bool:
        """Append to the file at ``path`` from now on.

        On failure the current sink stays in place and a diagnostic goes to
        standard error. Returns whether the file was opened.
        """
        with self._lock:
            try:
                sink = FileSink(path)
            except SinkOpenError as exc:
                report_diagnostic(str(exc))
                return False
            self._registry.install(sink)
            return True

    def __enter__(self) -> Logger:
        self.init()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.cleanup()

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def emit(self, record: Record) -> None:
        with self._lock:
            if record.level == Level.NONE and self._settings.suppress_none:
                return
            if record.sink is None:
                sink = self._registry.default
            else:
                try:
                    sink = as_sink(record.sink)
                except TypeError:
                    return
            if sink is None:
                return
            line = LineFormatter.format(
                record.level,
                record.context,
                record.message,
                now_iso8601(self._clock),
                use_color=self._settings.use_color(sink.isatty),
            )
            try:
                sink.write(line)
            except (OSError, ValueError):
                pass

    def log(self, sink: Any, level: Level | int, context: str | None, fmt: str, *args: Any) -> None:
        message = expand_message(fmt, args, self._settings.message_capacity)
        self.emit(Record(level=level, message=message, context=context, sink=sink))

    def debug(self, context: str | None, fmt: str, *args: Any, sink: Any = None) -> None:
        self.log(sink, Level.DEBUG, context, fmt, *args)

    def info(self, context: str | None, fmt: str, *args: Any, sink: Any = None) -> None:
        self.log(sink, Level.INFO, context, fmt, *args)

    def warning(self, context: str | None, fmt: str, *args: Any, sink: Any = None) -> None:
        self.log(sink, Level.WARNING, context, fmt, *args)

    def error(self, context: str | None, fmt: str, *args: Any, sink: Any = None) -> None:
        self.log(sink, Level.ERROR, context, fmt, *args)


# =============================================================================
# Global State
# =============================================================================

_logger = Logger()


def get_default_logger() -> Logger:
    return _logger


def reset_default_logger(settings: LoggerSettings | None = None) -> Logger:
    """Clean up and replace the process-wide logger (mainly for tests)."""
    global _logger
    _logger.cleanup()
    _logger = Logger(settings)
    return _logger


def init() -> None:
    """Point the default logger at standard output."""
    _logger.init()


def cleanup() -> None:
    """Close the default sink if bugie opened it."""
    _logger.cleanup()


def configure(**options: Any) -> LoggerSettings:
    return _logger.configure(**options)


def set_sink(stream: Any) -> None:
    _logger.set_sink(stream)


def set_sink_path(path: str | os.PathLike[str]) -> bool:
    return _logger.set_sink_path(path)


def emit(record: Record) -> None:
    _logger.emit(record)


def log(sink: Any, level: Level | int, context: str | None, fmt: str, *args: Any) -> None:
    """Format ``fmt % args`` and emit it. Never raises for logging failures."""
    _logger.log(sink, level, context, fmt, *args)


def debug(context: str | None, fmt: str, *args: Any, sink: Any = None) -> None:
    _logger.log(sink, Level.DEBUG, context, fmt, *args)


def info(context: str | None, fmt: str, *args: Any, sink: Any = None) -> None:
    _logger.log(sink, Level.INFO, context, fmt, *args)


def warning(context: str | None, fmt: str, *args: Any, sink: Any = None) -> None:
    _logger.log(sink, Level.WARNING, context, fmt, *args)


def error(context: str | None, fmt: str, *args: Any, sink: Any = None) -> None:
    _logger.log(sink, Level.ERROR, context, fmt, *args)
