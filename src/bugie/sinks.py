"""
Log sink abstractions and concrete implementations.

A sink is either borrowed (supplied by the caller or inherited from the
process, never closed here) or owned (opened by bugie and closed when it is
replaced or the logger is cleaned up).
"""

from __future__ import annotations

import io
import os
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Literal

from .exceptions import SinkOpenError

StandardStreamName = Literal["stdout", "stderr"]


# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for log sinks."""

    owned: bool = False

    @abstractmethod
    def write(self, line: str) -> None:
        """Write one fully rendered line in a single call."""
        ...

    def close(self) -> None:
        """Release resources held by the sink."""

    def isatty(self) -> bool:
        return False


def _is_binary(stream: Any) -> bool:
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(stream, "mode", None)
    return isinstance(mode, str) and "b" in mode


def _write_to_stream(stream: Any, line: str) -> None:
    if _is_binary(stream):
        stream.write(line.encode("utf-8"))
    else:
        stream.write(line)
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()


def _stream_isatty(stream: Any) -> bool:
    try:
        return bool(getattr(stream, "isatty", lambda: False)())
    except (OSError, ValueError):
        return False


class StreamSink(BaseSink):
    """Borrowed sink over a caller supplied stream (text or binary)."""

    def __init__(self, stream: Any):
        self._stream = stream

    @property
    def stream(self) -> Any:
        return self._stream

    def write(self, line: str) -> None:
        _write_to_stream(self._stream, line)

    def isatty(self) -> bool:
        return _stream_isatty(self._stream)

    def __repr__(self) -> str:
        return f"StreamSink({self._stream!r})"


class StandardStreamSink(BaseSink):
    """Borrowed sink for standard output or error.

    The stream is looked up on ``sys`` at write time, so redirections of
    ``sys.stdout`` / ``sys.stderr`` made after installation are followed.
    """

    def __init__(self, name: StandardStreamName = "stdout"):
        if name not in ("stdout", "stderr"):
            raise ValueError(f"unknown standard stream {name!r}")
        self.name = name

    @property
    def stream(self) -> Any:
        return getattr(sys, self.name)

    def write(self, line: str) -> None:
        _write_to_stream(self.stream, line)

    def isatty(self) -> bool:
        return _stream_isatty(self.stream)

    def __repr__(self) -> str:
        return f"StandardStreamSink({self.name!r})"


class FileSink(BaseSink):
    """Owned file sink opened in append mode.

    Existing content is never truncated. The file is flushed after each line
    but neither rotated nor fsynced.
    """

    owned = True

    def __init__(self, path: str | os.PathLike[str]):
        self._path = Path(path)
        try:
            self._file = open(self._path, "a", encoding="utf-8")
        except (OSError, ValueError) as exc:
            raise SinkOpenError(os.fspath(path), reason=str(exc)) from exc

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, line: str) -> None:
        self._file.write(line)
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __repr__(self) -> str:
        return f"FileSink({str(self._path)!r})"


class BorrowedSink(BaseSink):
    """Borrowed view of another sink; closing it leaves the inner sink open."""

    def __init__(self, inner: BaseSink):
        self.inner = inner

    def write(self, line: str) -> None:
        self.inner.write(line)

    def isatty(self) -> bool:
        return self.inner.isatty()

    def __repr__(self) -> str:
        return f"BorrowedSink({self.inner!r})"


# =============================================================================
# Coercion
# =============================================================================


def as_sink(target: Any) -> BaseSink:
    """Wrap a stream in a borrowed sink; sinks are returned unchanged."""
    if isinstance(target, BaseSink):
        return target
    if not hasattr(target, "write"):
        raise TypeError(f"log sink must be a stream or BaseSink, got {type(target).__name__}")
    return StreamSink(target)


def as_borrowed(target: Any) -> BaseSink:
    """Like ``as_sink``, but an owned sink is wrapped so bugie never closes it."""
    sink = as_sink(target)
    if sink.owned:
        return BorrowedSink(sink)
    return sink
