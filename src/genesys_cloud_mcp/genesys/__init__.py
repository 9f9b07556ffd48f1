"""Genesys Cloud analytics tools exposed over MCP."""

from .api import GenesysCloudApi
from .server import build_genesys_server, build_tools
from .tools import GenesysCloudTools, build_tool_specs

__all__ = [
    "GenesysCloudApi",
    "GenesysCloudTools",
    "build_genesys_server",
    "build_tool_specs",
    "build_tools",
]
