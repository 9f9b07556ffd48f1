"""OAuth client-credentials authentication against Genesys Cloud."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Callable, Optional

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..logging import get_logger
from ..settings import GenesysCloudSettings, load_genesys_cloud_settings

LOGGER = get_logger(__name__)

# refresh this long before the platform would reject the token
EXPIRY_MARGIN_SECONDS = 60


class TokenRequestError(Exception):
    """Raised when the login service refuses to issue an access token."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


@dataclass
class OAuthToken:
    access_token: str
    token_type: str
    expires_in: Optional[int] = None


class ClientCredentialsTokenProvider:
    """Issue and cache access tokens using the client-credentials grant."""

    def __init__(
        self,
        settings: Optional[GenesysCloudSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings or load_genesys_cloud_settings()
        self._transport = transport
        self._timer = timer
        self._token: Optional[OAuthToken] = None
        self._expires_at = 0.0
        self._lock = asyncio.Lock()

    async def get_access_token(self) -> str:
        async with self._lock:
            if self._token is None or self._timer() >= self._expires_at:
                token = await self._request_token()
                lifetime = token.expires_in if token.expires_in is not None else 3600
                self._token = token
                self._expires_at = self._timer() + max(lifetime - EXPIRY_MARGIN_SECONDS, 0)
            return self._token.access_token

    def invalidate(self) -> None:
        self._token = None
        self._expires_at = 0.0

    @retry(
        wait=wait_exponential(min=1, max=8),
        stop=stop_after_attempt(3),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _request_token(self) -> OAuthToken:
        auth_header = httpx.BasicAuth(
            self.settings.client_id,
            self.settings.client_secret.get_secret_value(),
        )
        async with httpx.AsyncClient(timeout=15.0, transport=self._transport) as client:
            LOGGER.info("requesting_genesys_token", token_url=self.settings.login_url)
            response = await client.post(
                self.settings.login_url,
                data={"grant_type": "client_credentials"},
                auth=auth_header,
                headers={
                    "Accept": "application/json",
                    "Content-Type": "application/x-www-form-urlencoded",
                },
            )
        if response.is_error:
            raise TokenRequestError(
                f"Failed to authenticate with Genesys Cloud ({response.status_code})",
                response.status_code,
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise TokenRequestError(
                "Login service returned a response that is not JSON", response.status_code
            ) from exc
        if not isinstance(payload, dict) or not payload.get("access_token"):
            raise TokenRequestError(
                "Login service response did not include an access token", response.status_code
            )
        return OAuthToken(
            access_token=payload["access_token"],
            token_type=payload.get("token_type", "bearer"),
            expires_in=payload.get("expires_in"),
        )
