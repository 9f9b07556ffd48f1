"""Tests for sampling and usage aggregation."""

from genesys_cloud_mcp.jobs import aggregate_usage, sample_evenly


def test_sample_is_spread_evenly_in_order() -> None:
    assert sample_evenly(list(range(1, 11)), 5) == [1, 3, 5, 7, 9]


def test_small_inputs_are_returned_whole() -> None:
    assert sample_evenly([1, 2, 3], 10) == [1, 2, 3]


def test_empty_and_zero_sized_samples() -> None:
    assert sample_evenly([], 10) == []
    assert sample_evenly([1, 2, 3], 0) == []


def test_large_sample_keeps_first_item_and_ordering() -> None:
    items = [f"conversation-{i:04d}" for i in range(250)]

    sampled = sample_evenly(items, 100)

    assert len(sampled) == 100
    assert sampled[0] == "conversation-0000"
    assert sampled == sorted(sampled)
    assert len(set(sampled)) == 100


def test_usage_is_totalled_per_endpoint() -> None:
    total, per_endpoint = aggregate_usage(
        [
            {"httpMethod": "GET", "templateUri": "a", "requests": 5},
            {"httpMethod": "GET", "templateUri": "b", "requests": 10},
        ]
    )

    assert total == 15
    assert per_endpoint == [
        {"endpoint": "GET a", "requests": 5},
        {"endpoint": "GET b", "requests": 10},
    ]


def test_endpoint_is_omitted_when_record_has_no_route() -> None:
    total, per_endpoint = aggregate_usage([{"requests": 3}, {"httpMethod": "POST", "templateUri": "c"}])

    assert total == 3
    assert per_endpoint == [{"requests": 3}, {"endpoint": "POST c"}]


def test_endpoint_with_method_only_has_no_trailing_space() -> None:
    _, per_endpoint = aggregate_usage([{"httpMethod": "GET", "requests": 1}])

    assert per_endpoint == [{"endpoint": "GET", "requests": 1}]
