"""
Timestamp source tests.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from bugie.timestamps import now_iso8601

ISO_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z$")


class TestNowIso8601:
    def test_real_clock_matches_format(self) -> None:
        stamp = now_iso8601()
        assert stamp is not None
        assert len(stamp) == 20
        assert ISO_PATTERN.match(stamp)

    def test_fixed_clock(self) -> None:
        moment = datetime(2023, 12, 31, 23, 59, 58, 999999, tzinfo=timezone.utc)
        assert now_iso8601(lambda: moment) == "2023-12-31T23:59:58Z"

    def test_converts_other_timezones_to_utc(self) -> None:
        tz = timezone(timedelta(hours=5, minutes=30))
        moment = datetime(2024, 1, 1, 3, 0, 0, tzinfo=tz)
        assert now_iso8601(lambda: moment) == "2023-12-31T21:30:00Z"

    def test_naive_values_are_taken_as_utc(self) -> None:
        assert now_iso8601(lambda: datetime(2024, 6, 1, 12, 0, 0)) == "2024-06-01T12:00:00Z"

    def test_clock_failure_returns_none(self) -> None:
        def broken_clock() -> datetime:
            raise OSError("clock unavailable")

        assert now_iso8601(broken_clock) is None

    def test_unrenderable_value_returns_none(self) -> None:
        assert now_iso8601(lambda: None) is None  # type: ignore[arg-type,return-value]
