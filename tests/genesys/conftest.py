"""Fixtures shared by the Genesys Cloud tool tests."""

from dataclasses import replace
from unittest.mock import AsyncMock

import pytest

from genesys_cloud_mcp.genesys import GenesysCloudApi, GenesysCloudTools
from genesys_cloud_mcp.jobs import CONVERSATION_DETAILS_JOB, OAUTH_CLIENT_USAGE_QUERY, ResponseCache


class FakeTimer:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def api() -> AsyncMock:
    return AsyncMock(spec=GenesysCloudApi)


@pytest.fixture
def timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture
def tools(api: AsyncMock, timer: FakeTimer) -> GenesysCloudTools:
    return GenesysCloudTools(
        api=api,
        usage_cache=ResponseCache(maxsize=500, ttl=300, timer=timer),
        conversation_job=replace(CONVERSATION_DETAILS_JOB, interval_seconds=0),
        usage_job=replace(OAUTH_CLIENT_USAGE_QUERY, interval_seconds=0),
    )
