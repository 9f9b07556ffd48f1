"""Shared HTTPX client factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

import httpx


DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": "genesys-cloud-mcp/0.1.0",
    "Accept": "application/json",
}


@asynccontextmanager
async def create_async_client(
    base_url: str = "",
    timeout: float = 30.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        headers=DEFAULT_HEADERS,
        transport=transport,
    ) as client:
        yield client
