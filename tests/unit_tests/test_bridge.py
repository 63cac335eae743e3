"""
structlog and standard library integration tests.
"""

from __future__ import annotations

import io
import logging

import pytest

from bugie import Level
from bugie.bridge import configure_structlog, event_level, event_message, get_logger
from bugie.interceptors import BugieHandler, intercept_stdlib, level_from_stdlib

from conftest import LINE_PATTERN


@pytest.fixture
def buffer(logger):
    stream = io.StringIO()
    logger.set_sink(stream)
    return stream


class TestStructlogBridge:
    """structlog events rendered as bugie lines"""

    def test_event_with_fields(self, logger, buffer) -> None:
        configure_structlog(logger=logger)
        get_logger("api").info("request", status=200, path="/x")
        match = LINE_PATTERN.fullmatch(buffer.getvalue())
        assert match is not None
        assert match.group(2) == "INFO"
        assert match.group(3) == "api"
        assert match.group(4) == "request path=/x status=200"

    def test_level_filtering(self, logger, buffer) -> None:
        configure_structlog("WARNING", logger=logger)
        log = get_logger("svc")
        log.info("quiet")
        log.warning("loud")
        lines = buffer.getvalue().splitlines()
        assert len(lines) == 1
        assert "[WARNING] [svc] - loud" in lines[0]

    def test_unnamed_logger_uses_root_context(self, logger, buffer) -> None:
        configure_structlog(logger=logger)
        get_logger().error("failed")
        assert "[ERROR] [root] - failed" in buffer.getvalue()

    def test_exception_is_attached(self, logger, buffer) -> None:
        configure_structlog(logger=logger)
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            get_logger("job").exception("crashed")
        output = buffer.getvalue()
        assert "[ERROR] [job] - crashed exception=Traceback" in output
        assert "RuntimeError: boom" in output
        assert output.count("\x1b[0m\n") == 1

    def test_defaults_to_process_logger(self, capsys) -> None:
        import bugie

        bugie.init()
        configure_structlog()
        get_logger("default").info("hello")
        assert "[INFO] [default] - hello" in capsys.readouterr().out

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("debug", Level.DEBUG), ("warning", Level.WARNING), ("critical", Level.ERROR), ("bogus", Level.INFO)],
    )
    def test_event_level(self, name, expected) -> None:
        assert event_level({"level": name}) is expected

    def test_event_message_without_extras(self) -> None:
        assert event_message({"event": "plain", "level": "info", "logger": "x"}) == "plain"


class TestStdlibHandler:
    """Standard library records rendered as bugie lines"""

    def test_handler_routes_records(self, logger, buffer) -> None:
        stdlib_logger = logging.getLogger("bugie.tests.stdlib")
        handler = BugieHandler(logger)
        stdlib_logger.addHandler(handler)
        stdlib_logger.setLevel(logging.DEBUG)
        stdlib_logger.propagate = False
        try:
            stdlib_logger.warning("disk %d%% full", 93)
        finally:
            stdlib_logger.removeHandler(handler)
        assert "[WARNING] [bugie.tests.stdlib] - disk 93% full" in buffer.getvalue()

    def test_intercept_stdlib_replaces_root_handlers(self, logger, buffer) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            handler = intercept_stdlib(logging.INFO, logger=logger)
            assert root.handlers == [handler]
            logging.getLogger("bugie.tests.root").debug("filtered")
            logging.getLogger("bugie.tests.root").info("passed")
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)
        output = buffer.getvalue()
        assert "filtered" not in output
        assert "[INFO] [bugie.tests.root] - passed" in output

    @pytest.mark.parametrize(
        ("levelno", "expected"),
        [
            (logging.DEBUG, Level.DEBUG),
            (logging.INFO, Level.INFO),
            (logging.WARNING, Level.WARNING),
            (logging.ERROR, Level.ERROR),
            (logging.CRITICAL, Level.ERROR),
            (5, Level.DEBUG),
        ],
    )
    def test_level_mapping(self, levelno, expected) -> None:
        assert level_from_stdlib(levelno) is expected
