"""Date range parsing for analytics queries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


class DateRangeError(ValueError):
    """Raised when a requested start/end pair cannot be used for a query."""


class InvalidStartError(DateRangeError):
    def __init__(self) -> None:
        super().__init__("startDate is not a valid ISO-8601 date")


class InvalidEndError(DateRangeError):
    def __init__(self) -> None:
        super().__init__("endDate is not a valid ISO-8601 date")


class RangeInvertedError(DateRangeError):
    def __init__(self) -> None:
        super().__init__("Start date must be before end date")


def _to_platform_iso(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class TimeRange:
    start: datetime
    end: datetime

    @property
    def interval(self) -> str:
        """ISO-8601 interval in the form accepted by the analytics APIs."""
        return f"{_to_platform_iso(self.start)}/{_to_platform_iso(self.end)}"

    @property
    def start_ms(self) -> int:
        return int(self.start.timestamp() * 1000)

    @property
    def end_ms(self) -> int:
        return int(self.end.timestamp() * 1000)


def _parse_timestamp(value: str) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (TypeError, ValueError, AttributeError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def normalize_date_range(
    start_date: str,
    end_date: str,
    now: Optional[datetime] = None,
) -> TimeRange:
    """Parse and validate a start/end pair.

    Timestamps without an offset are read as UTC. An end later than ``now`` is
    clamped to ``now`` rather than rejected, so the platform is never asked for
    data that cannot exist yet.
    """

    start = _parse_timestamp(start_date)
    if start is None:
        raise InvalidStartError()
    end = _parse_timestamp(end_date)
    if end is None:
        raise InvalidEndError()
    if start >= end:
        raise RangeInvertedError()

    current = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    if end > current:
        end = current
    # a start in the future leaves nothing to query once the end is clamped
    if start >= end:
        raise RangeInvertedError()

    return TimeRange(start=start, end=end)
