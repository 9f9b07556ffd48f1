"""Tests for result shaping helpers."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from genesys_cloud_mcp.genesys.errors import PlatformApiError
from genesys_cloud_mcp.genesys.helpers import (
    error_result,
    failure_message,
    format_duration,
    format_utterance_offset,
    interpret_call_quality,
    interpret_sentiment,
    normalise_phone_number,
    pagination_section,
    scale_sentiment,
    text_result,
)
from genesys_cloud_mcp.genesys.schemas import VoiceConversation

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_pagination_section_derives_total_pages() -> None:
    assert pagination_section("totalHits", page_size=100, page_number=2, total_hits=250) == {
        "pageNumber": 2,
        "pageSize": 100,
        "totalPages": 3,
        "totalHits": 250,
    }


def test_pagination_section_reports_unknown_values() -> None:
    assert pagination_section("totalHits") == {
        "pageNumber": "N/A",
        "pageSize": "N/A",
        "totalPages": "N/A",
        "totalHits": "N/A",
    }


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(seconds=1), "1 second"),
        (timedelta(seconds=42), "42 seconds"),
        (timedelta(minutes=5, seconds=20), "5 minutes"),
        (timedelta(minutes=90), "2 hours"),
        (timedelta(days=3), "3 days"),
        (timedelta(days=400), "1 year"),
    ],
)
def test_format_duration(delta, expected) -> None:
    assert format_duration(T0, T0 + delta) == expected


@pytest.mark.parametrize(
    "mos, label",
    [(None, "Unknown"), (3.49, "Poor"), (3.5, "Acceptable"), (4.29, "Acceptable"), (4.3, "Excellent")],
)
def test_interpret_call_quality(mos, label) -> None:
    assert interpret_call_quality(mos) == label


@pytest.mark.parametrize(
    "score, label",
    [
        (56, "Positive"),
        (55, "Slightly Positive"),
        (20, "Slightly Positive"),
        (19, "Neutral"),
        (-19, "Neutral"),
        (-20, "Slightly Negative"),
        (-55, "Slightly Negative"),
        (-56, "Negative"),
    ],
)
def test_interpret_sentiment(score, label) -> None:
    assert interpret_sentiment(score) == label


def test_scale_sentiment_rounds_to_whole_points() -> None:
    assert scale_sentiment(0.556) == 56
    assert scale_sentiment(-0.1) == -10


def test_normalise_phone_number_keeps_digits() -> None:
    assert normalise_phone_number("+44 (0)20-7946 0000") == "4402079460000"


def test_failure_message_hides_unauthorised_details() -> None:
    assert failure_message("Failed", PlatformApiError("Forbidden", status=403)) == (
        "Failed: Unauthorised access. Please check API credentials or permissions"
    )
    assert failure_message("Failed", PlatformApiError("Bad Request", status=400)) == "Failed: Bad Request"


def test_results_are_compact_json_text() -> None:
    result = text_result(VoiceConversation(conversation_id="c-1"))
    error = error_result("Something went wrong")

    assert result.content[0].text == '{"conversationId":"c-1"}'
    assert not result.isError
    assert error.isError
    assert json.loads(error.content[0].text) == {"errorMessage": "Something went wrong"}


def test_failure_message_can_terminate_unauthorised_sentence() -> None:
    error = PlatformApiError("Unauthorized", status=401)

    assert failure_message("Failed", error, unauthorised_suffix=".") == (
        "Failed: Unauthorised access. Please check API credentials or permissions."
    )
    assert failure_message("Failed", PlatformApiError("Boom", status=500), unauthorised_suffix=".") == "Failed: Boom"


@pytest.mark.parametrize(
    "conversation_start, utterance_start, expected",
    [
        (1_000, 1_000, "00:00"),
        (1_000, 66_999, "01:05"),
        (0, (62 * 60 + 5) * 1000, "02:05"),
        (None, 5_000, "--:--"),
        (1_000, None, "--:--"),
    ],
)
def test_format_utterance_offset(conversation_start, utterance_start, expected) -> None:
    assert format_utterance_offset(conversation_start, utterance_start) == expected
