"""
Exception hierarchy for bugie.

None of these cross the public logging functions; they mark failures inside
the sink layer so the registry can report and recover.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class BugieError(Exception):
    """Root of all bugie exceptions."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class SinkError(BugieError):
    pass


class SinkOpenError(SinkError):
    """A file sink could not be opened for appending."""

    def __init__(self, path: str, *, reason: Optional[str] = None) -> None:
        details: Dict[str, Any] = {"path": path}
        if reason:
            details["reason"] = reason
        super().__init__(f"failed to open log file {path}", code="SINK_OPEN_FAILED", details=details)
        self.path = path
