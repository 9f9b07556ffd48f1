"""MCP server exposing Genesys Cloud analytics as callable tools."""

__version__ = "0.1.0"
