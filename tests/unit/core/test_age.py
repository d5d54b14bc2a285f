"""Unit tests for relative age formatting."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from k8s_resource_monitor.core.age import UNKNOWN_AGE, format_age

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


def _age(**kwargs: float) -> str:
    return format_age(NOW - timedelta(**kwargs), NOW)


@pytest.mark.unit
class TestFormatAge:
    """Tests for format_age."""

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=0), "0s"),
            (timedelta(seconds=45), "45s"),
            (timedelta(seconds=59, milliseconds=999), "59s"),
            (timedelta(seconds=60), "1m"),
            (timedelta(seconds=90), "1m"),
            (timedelta(minutes=59, seconds=59), "59m"),
            (timedelta(hours=1), "1h"),
            (timedelta(hours=23, minutes=59, seconds=59), "23h"),
            (timedelta(hours=24), "1d"),
            (timedelta(hours=25), "1d"),
            (timedelta(days=6, hours=23), "6d"),
            (timedelta(days=800), "800d"),
        ],
    )
    def test_buckets_truncate(self, delta: timedelta, expected: str) -> None:
        """Ages should truncate into the largest bucket that fits."""
        assert format_age(NOW - delta, NOW) == expected

    def test_no_year_bucket(self) -> None:
        """Very old resources are still reported in days."""
        assert _age(days=365 * 3) == "1095d"

    def test_negative_duration_reported_as_seconds(self) -> None:
        """Clock skew lands in the seconds branch."""
        assert format_age(NOW + timedelta(seconds=5), NOW) == "-5s"

    def test_missing_timestamp(self) -> None:
        """A missing creation timestamp renders as unknown."""
        assert format_age(None, NOW) == UNKNOWN_AGE

    def test_naive_timestamps_treated_as_utc(self) -> None:
        """Naive datetimes are compared as UTC."""
        created = datetime(2024, 6, 1, 10, 30, 0)
        assert format_age(created, NOW) == "1h"

    def test_granularity_is_monotonic(self) -> None:
        """Crossing each boundary moves to a coarser unit, never back."""
        order = {"s": 0, "m": 1, "h": 2, "d": 3}
        previous = -1
        for seconds in (1, 59, 60, 3599, 3600, 86399, 86400, 10 * 86400):
            unit = order[_age(seconds=seconds)[-1]]
            assert unit >= previous
            previous = unit
