"""Factory for the Genesys Cloud MCP server."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from mcp.server.fastmcp import FastMCP

from ..jobs import CONVERSATION_DETAILS_JOB, OAUTH_CLIENT_USAGE_QUERY, ResponseCache
from ..logging import get_logger
from ..settings import JobSettings, load_job_settings
from .api import GenesysCloudApi
from .schemas import OAuthClientUsageResponse
from .tools import GenesysCloudTools, build_tool_specs, tool_annotations

LOGGER = get_logger(__name__)

SERVER_NAME = "Genesys Cloud"


def build_tools(
    api: Optional[GenesysCloudApi] = None,
    usage_cache: Optional[ResponseCache[OAuthClientUsageResponse]] = None,
    job_settings: Optional[JobSettings] = None,
) -> GenesysCloudTools:
    settings = job_settings or load_job_settings()
    if usage_cache is None:
        usage_cache = ResponseCache(
            maxsize=settings.usage_cache_size,
            ttl=settings.usage_cache_ttl_seconds,
        )
    return GenesysCloudTools(
        api=api or GenesysCloudApi(),
        usage_cache=usage_cache,
        conversation_job=replace(
            CONVERSATION_DETAILS_JOB,
            max_attempts=settings.max_attempts,
            interval_seconds=settings.poll_interval_seconds,
        ),
        usage_job=replace(
            OAUTH_CLIENT_USAGE_QUERY,
            max_attempts=settings.max_attempts,
            interval_seconds=settings.poll_interval_seconds,
        ),
    )


def build_genesys_server(tools: Optional[GenesysCloudTools] = None) -> FastMCP:
    server = FastMCP(
        SERVER_NAME,
        json_response=True,
        stateless_http=True,
    )
    tools = tools or build_tools()

    for spec in build_tool_specs(tools):
        # handlers return CallToolResult envelopes themselves
        server.tool(
            name=spec["name"],
            title=spec["title"],
            description=spec["summary"],
            annotations=tool_annotations(spec),
            structured_output=False,
        )(spec["func"])
        LOGGER.info("tool_registered", tool=spec["name"])

    return server
