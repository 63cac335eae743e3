from __future__ import annotations

import re
from datetime import datetime, timezone

import pytest
import structlog

import bugie
from bugie import Logger

LINE_PATTERN = re.compile(
    r"\x1b\[[0-9;]+m"
    r"\[(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z|UNKNOWN TIME)\]"
    r"\[(DEBUG|INFO|WARNING|ERROR|UNKNOWN)\] "
    r"\[([^\]]*)\] - (.*)\x1b\[0m\n",
    re.DOTALL,
)

FIXED_TIME = datetime(2024, 3, 5, 7, 8, 9, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def fresh_default_logger():
    """Give every test a clean process-wide logger and structlog config."""
    bugie.reset_default_logger()
    yield
    bugie.reset_default_logger()
    structlog.reset_defaults()


@pytest.fixture
def logger():
    """An initialized standalone Logger with a frozen clock."""
    with Logger(clock=lambda: FIXED_TIME) as instance:
        yield instance
