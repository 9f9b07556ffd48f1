"""Transforms from raw job results to tool responses."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, TypeVar

T = TypeVar("T")


def sample_evenly(items: Sequence[T], sample_size: int) -> List[T]:
    """Pick up to ``sample_size`` items spread evenly across ``items``.

    The selection is deterministic for a given input and keeps the original
    ordering, so the same query always yields the same sample.
    """

    total = len(items)
    if sample_size <= 0 or total == 0:
        return []
    if total <= sample_size:
        return list(items)
    return [items[(i * total) // sample_size] for i in range(sample_size)]


def _endpoint(record: Mapping[str, Any]) -> str:
    parts = [record.get("httpMethod"), record.get("templateUri")]
    return " ".join("" if part is None else str(part) for part in parts).strip()


def aggregate_usage(records: Iterable[Mapping[str, Any]]) -> Tuple[int, List[Dict[str, Any]]]:
    """Total the request counts of usage records and list them per endpoint."""

    total = 0
    per_endpoint: List[Dict[str, Any]] = []
    for record in records:
        requests = record.get("requests")
        total += requests or 0
        entry: Dict[str, Any] = {}
        endpoint = _endpoint(record)
        if endpoint:
            entry["endpoint"] = endpoint
        if requests is not None:
            entry["requests"] = requests
        per_endpoint.append(entry)
    return total, per_endpoint
