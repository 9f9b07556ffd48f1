"""Asynchronous platform job handling shared by the analytics tools."""

from .cache import ResponseCache, usage_cache_key
from .dates import (
    DateRangeError,
    InvalidEndError,
    InvalidStartError,
    RangeInvertedError,
    TimeRange,
    normalize_date_range,
)
from .polling import (
    CONVERSATION_DETAILS_JOB,
    OAUTH_CLIENT_USAGE_QUERY,
    JobFailedError,
    JobKind,
    JobPollError,
    JobState,
    JobStateUnknownError,
    JobSubmissionError,
    JobTimedOutError,
    poll_until_complete,
    run_job,
)
from .shaping import aggregate_usage, sample_evenly

__all__ = [
    "CONVERSATION_DETAILS_JOB",
    "OAUTH_CLIENT_USAGE_QUERY",
    "DateRangeError",
    "InvalidEndError",
    "InvalidStartError",
    "JobFailedError",
    "JobKind",
    "JobPollError",
    "JobState",
    "JobStateUnknownError",
    "JobSubmissionError",
    "JobTimedOutError",
    "RangeInvertedError",
    "ResponseCache",
    "TimeRange",
    "aggregate_usage",
    "normalize_date_range",
    "poll_until_complete",
    "run_job",
    "sample_evenly",
    "usage_cache_key",
]
