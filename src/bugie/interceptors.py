"""
Interceptors for capturing standard library logging.
"""

import logging
from typing import Optional

from .core import Logger, get_default_logger
from .levels import Level


def level_from_stdlib(levelno: int) -> Level:
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARNING
    if levelno >= logging.INFO:
        return Level.INFO
    return Level.DEBUG


class BugieHandler(logging.Handler):
    """
    Redirect standard library logging records to a bugie Logger.

    The record's logger name becomes the context; the message is rendered
    with the handler's formatter (``%(message)s`` by default).
    """

    def __init__(self, logger: Optional[Logger] = None, level: int = logging.NOTSET):
        super().__init__(level)
        self._logger = logger

    @property
    def target(self) -> Logger:
        return self._logger if self._logger is not None else get_default_logger()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            self.target.log(None, level_from_stdlib(record.levelno), record.name, "%s", msg)
        except Exception:
            self.handleError(record)


def intercept_stdlib(level: int = logging.DEBUG, *, logger: Optional[Logger] = None) -> BugieHandler:
    """Replace the root logger's handlers with a single BugieHandler."""
    handler = BugieHandler(logger)
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    return handler
