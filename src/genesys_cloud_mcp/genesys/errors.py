"""Errors raised by the Genesys Cloud Platform API and how to classify them."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

MISSING_PERMISSIONS_CODE = "missing.any.permissions"


class PlatformApiError(Exception):
    """A non-successful response from the Platform API."""

    def __init__(
        self,
        message: str,
        status: int,
        code: Optional[str] = None,
        correlation_id: Optional[str] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.correlation_id = correlation_id
        self.body = body or {}

    @classmethod
    def from_response(cls, response: httpx.Response) -> "PlatformApiError":
        body: Dict[str, Any] = {}
        try:
            parsed = response.json()
            if isinstance(parsed, dict):
                body = parsed
        except ValueError:
            pass
        message = body.get("message") or response.reason_phrase or f"HTTP {response.status_code}"
        return cls(
            message=message,
            status=response.status_code,
            code=body.get("code"),
            correlation_id=response.headers.get("inin-correlation-id") or body.get("contextId"),
            body=body,
        )


def is_unauthorised_error(error: BaseException) -> bool:
    return getattr(error, "status", None) in (401, 403)


def is_missing_permissions_error(error: BaseException) -> bool:
    return (
        isinstance(error, PlatformApiError)
        and error.status == 403
        and error.code == MISSING_PERMISSIONS_CODE
    )


def is_not_found_error(error: BaseException) -> bool:
    return isinstance(error, PlatformApiError) and error.status == 404
