"""Authentication helpers for the Genesys Cloud MCP server."""

from .tokens import ClientCredentialsTokenProvider, OAuthToken, TokenRequestError

__all__ = ["ClientCredentialsTokenProvider", "OAuthToken", "TokenRequestError"]
