"""Tests for date range normalization."""

from datetime import datetime, timedelta, timezone

import pytest

from genesys_cloud_mcp.jobs import (
    InvalidEndError,
    InvalidStartError,
    RangeInvertedError,
    normalize_date_range,
)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def test_valid_range_is_parsed_as_utc() -> None:
    time_range = normalize_date_range("2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z", now=NOW)

    assert time_range.start == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert time_range.end == datetime(2024, 1, 2, tzinfo=timezone.utc)
    assert time_range.interval == "2024-01-01T00:00:00.000Z/2024-01-02T00:00:00.000Z"
    assert time_range.start_ms == 1704067200000
    assert time_range.end_ms == 1704153600000


def test_offsets_are_converted_and_naive_values_read_as_utc() -> None:
    time_range = normalize_date_range("2024-01-01T02:00:00+02:00", "2024-01-01T05:30:00", now=NOW)

    assert time_range.start == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
    assert time_range.end == datetime(2024, 1, 1, 5, 30, tzinfo=timezone.utc)


def test_invalid_start() -> None:
    with pytest.raises(InvalidStartError, match="startDate is not a valid ISO-8601 date"):
        normalize_date_range("invalid-date", "2024-01-02T00:00:00Z", now=NOW)


def test_invalid_end() -> None:
    with pytest.raises(InvalidEndError, match="endDate is not a valid ISO-8601 date"):
        normalize_date_range("2024-01-01T00:00:00Z", "invalid-date", now=NOW)


@pytest.mark.parametrize(
    "start, end",
    [
        ("2024-01-02T00:00:00Z", "2024-01-01T00:00:00Z"),
        ("2024-01-01T00:00:00Z", "2024-01-01T00:00:00Z"),
    ],
)
def test_start_not_before_end_is_rejected(start: str, end: str) -> None:
    with pytest.raises(RangeInvertedError, match="Start date must be before end date"):
        normalize_date_range(start, end, now=NOW)


def test_future_end_is_clamped_to_now() -> None:
    time_range = normalize_date_range("2025-05-01T00:00:00Z", "2030-01-01T00:00:00Z", now=NOW)

    assert time_range.end == NOW


def test_future_end_is_never_later_than_wall_clock() -> None:
    time_range = normalize_date_range("2024-01-01T00:00:00Z", "2999-01-01T00:00:00Z")

    now = datetime.now(timezone.utc)
    assert time_range.end <= now
    assert now - time_range.end < timedelta(seconds=5)


def test_future_start_is_rejected_once_end_is_clamped() -> None:
    with pytest.raises(RangeInvertedError):
        normalize_date_range("2026-01-01T00:00:00Z", "2027-01-01T00:00:00Z", now=NOW)
