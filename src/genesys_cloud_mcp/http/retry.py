"""Retry policy helpers."""

from __future__ import annotations

import httpx
from tenacity import RetryCallState, retry_if_exception, retry_if_exception_type

from ..logging import get_logger

LOGGER = get_logger(__name__)

RATE_LIMITED_STATUS = 429


def log_retry_attempt(retry_state: RetryCallState) -> None:
    attempt_number = retry_state.attempt_number
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    LOGGER.warning("retrying_platform_request", attempt=attempt_number, error=str(exception))


def _is_rate_limited(exc: BaseException) -> bool:
    return getattr(exc, "status", None) == RATE_LIMITED_STATUS


# Requests that never reached the platform, or were turned away by its rate
# limiter, are safe to send again.
retry_on_network_error = retry_if_exception_type((httpx.ConnectError, httpx.ConnectTimeout))
retry_on_rate_limit = retry_if_exception(_is_rate_limited)
retry_on_transient_error = retry_on_network_error | retry_on_rate_limit
