"""Shared helpers for shaping Genesys Cloud tool results."""

from __future__ import annotations

import json
import math
import re
from datetime import datetime
from typing import Any, Dict, Optional, Union

import httpx
from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel

from ..auth import TokenRequestError
from .errors import PlatformApiError, is_unauthorised_error

# Failures of the remote platform, as opposed to bugs in this server.
REMOTE_ERRORS = (PlatformApiError, TokenRequestError, httpx.HTTPError)

UNAUTHORISED_MESSAGE = "Unauthorised access. Please check API credentials or permissions"

Payload = Union[BaseModel, Dict[str, Any], list]


def _dump(payload: Payload) -> str:
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    elif isinstance(payload, list):
        payload = [
            item.model_dump(mode="json", by_alias=True, exclude_none=True) if isinstance(item, BaseModel) else item
            for item in payload
        ]
    return json.dumps(payload, separators=(",", ":"))


def text_result(payload: Payload) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=_dump(payload))])


def error_result(message: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=_dump({"errorMessage": message}))],
        isError=True,
    )


def failure_message(prefix: str, error: BaseException, unauthorised_suffix: str = "") -> str:
    if is_unauthorised_error(error):
        return f"{prefix}: {UNAUTHORISED_MESSAGE}{unauthorised_suffix}"
    return f"{prefix}: {error}"


def _total_pages(total_hits: Optional[int], page_size: int) -> int:
    if not page_size or page_size <= 0:
        return 0
    if total_hits is None:
        return 1
    return math.ceil(total_hits / page_size)


def pagination_section(
    total_section_name: str,
    page_size: Optional[int] = None,
    page_number: Optional[int] = None,
    total_hits: Optional[int] = None,
    page_count: Optional[int] = None,
) -> Dict[str, Any]:
    """Describe a page of results; unknown values are reported as ``"N/A"``."""
    total_pages: Union[str, int] = "N/A"
    if page_count is not None:
        total_pages = page_count
    elif page_size is not None:
        total_pages = _total_pages(total_hits, page_size)

    return {
        "pageNumber": page_number if page_number is not None else "N/A",
        "pageSize": page_size if page_size is not None else "N/A",
        "totalPages": total_pages,
        total_section_name: total_hits if total_hits is not None else "N/A",
    }


def normalise_phone_number(phone_number: str) -> str:
    return re.sub(r"\D", "", phone_number)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


_MINUTES_IN_DAY = 1440
_MINUTES_IN_MONTH = 43200
_MINUTES_IN_YEAR = 525600


def format_duration(start: datetime, end: datetime) -> str:
    """Human readable distance between two instants, e.g. ``"5 minutes"``."""
    milliseconds = abs((end - start).total_seconds()) * 1000
    minutes = milliseconds / 60000

    if minutes < 1:
        value, unit = _round_half_up(milliseconds / 1000), "second"
    elif minutes < 60:
        value, unit = _round_half_up(minutes), "minute"
    elif minutes < _MINUTES_IN_DAY:
        value, unit = _round_half_up(minutes / 60), "hour"
    elif minutes < _MINUTES_IN_MONTH:
        value, unit = _round_half_up(minutes / _MINUTES_IN_DAY), "day"
    elif minutes < _MINUTES_IN_YEAR:
        value, unit = _round_half_up(minutes / _MINUTES_IN_MONTH), "month"
    else:
        value, unit = _round_half_up(minutes / _MINUTES_IN_YEAR), "year"

    return f"{value} {unit}" if value == 1 else f"{value} {unit}s"


def parse_platform_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def interpret_call_quality(mos: Optional[float]) -> str:
    if mos is None:
        return "Unknown"
    if mos < 3.5:
        return "Poor"
    if mos < 4.3:
        return "Acceptable"
    return "Excellent"


def scale_sentiment(score: float) -> int:
    """Scale a platform sentiment score (-1 to 1) to the -100 to 100 range."""
    return _round_half_up(score * 100)


def interpret_sentiment(score: Optional[int]) -> str:
    if score is None:
        return "Unknown"
    if score > 55:
        return "Positive"
    if score >= 20:
        return "Slightly Positive"
    if score > -20:
        return "Neutral"
    if score >= -55:
        return "Slightly Negative"
    return "Negative"


def format_utterance_offset(
    conversation_start_ms: Optional[int],
    utterance_start_ms: Optional[int],
    default: str = "--:--",
) -> str:
    """Minutes and seconds into the conversation at which an utterance began.

    Whole hours are not shown, so an utterance 1h 2m 5s in reads ``"02:05"``.
    """
    if conversation_start_ms is None or utterance_start_ms is None:
        return default
    elapsed_seconds = int(max(utterance_start_ms - conversation_start_ms, 0)) // 1000
    minutes = (elapsed_seconds // 60) % 60
    seconds = elapsed_seconds % 60
    return f"{minutes:02d}:{seconds:02d}"
