"""Async client for the parts of the Genesys Cloud Platform API the tools use."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import httpx
from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential

from ..auth import ClientCredentialsTokenProvider
from ..http import create_async_client, log_retry_attempt, retry_on_transient_error
from ..logging import get_logger
from ..settings import GenesysCloudSettings, load_genesys_cloud_settings
from .config import DEFAULT_ENDPOINTS, GenesysApiEndpoints
from .errors import PlatformApiError

LOGGER = get_logger(__name__)

QueryParams = Union[Dict[str, Any], List[Tuple[str, Any]]]


def _json_body(response: httpx.Response, path: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise PlatformApiError(f"Invalid response body from {path}", response.status_code) from exc


class GenesysCloudApi:
    """Thin wrapper over the Platform API REST endpoints.

    Every call authenticates with a client-credentials token and raises
    :class:`PlatformApiError` for non-successful responses.
    """

    def __init__(
        self,
        settings: Optional[GenesysCloudSettings] = None,
        token_provider: Optional[ClientCredentialsTokenProvider] = None,
        endpoints: GenesysApiEndpoints = DEFAULT_ENDPOINTS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        max_attempts: int = 3,
    ) -> None:
        self.settings = settings or load_genesys_cloud_settings()
        self.token_provider = token_provider or ClientCredentialsTokenProvider(self.settings, transport=transport)
        self.endpoints = endpoints
        self._transport = transport
        self._max_attempts = max_attempts

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[QueryParams] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        async for attempt in AsyncRetrying(
            wait=wait_exponential(min=1, max=8),
            stop=stop_after_attempt(self._max_attempts),
            retry=retry_on_transient_error,
            before_sleep=log_retry_attempt,
            reraise=True,
        ):
            with attempt:
                return await self._send(method, path, params, json)
        raise AssertionError("unreachable")  # pragma: no cover

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[QueryParams],
        json: Optional[Dict[str, Any]],
    ) -> Any:
        access_token = await self.token_provider.get_access_token()
        headers = {"Authorization": f"Bearer {access_token}"}
        async with create_async_client(
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout,
            transport=self._transport,
        ) as client:
            response = await client.request(method, path, params=params, json=json, headers=headers)
        if response.is_error:
            error = PlatformApiError.from_response(response)
            LOGGER.info(
                "platform_request_failed",
                method=method,
                path=path,
                status=error.status,
                code=error.code,
                correlation_id=error.correlation_id,
            )
            if error.status == 401:
                self.token_provider.invalidate()
            raise error
        if not response.content:
            return {}
        return _json_body(response, path)

    async def get_routing_queues(self, name: str, page_size: int, page_number: int) -> Dict[str, Any]:
        params = {"name": name, "pageSize": page_size, "pageNumber": page_number}
        return await self._request("GET", self.endpoints.routing_queues_path, params=params)

    async def submit_conversation_details_job(self, body: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", self.endpoints.conversation_details_jobs_path, json=body)

    async def get_conversation_details_job(self, job_id: str) -> Dict[str, Any]:
        path = self.endpoints.conversation_details_job_path.format(job_id=job_id)
        return await self._request("GET", path)

    async def get_conversation_details_job_results(self, job_id: str) -> Dict[str, Any]:
        """Collect every page of a fulfilled job's results."""
        path = self.endpoints.conversation_details_job_results_path.format(job_id=job_id)
        conversations: List[Dict[str, Any]] = []
        cursor: Optional[str] = None
        while True:
            params = {"cursor": cursor} if cursor else None
            page = await self._request("GET", path, params=params)
            conversations.extend(page.get("conversations") or [])
            cursor = page.get("cursor")
            if not cursor:
                break
        return {"conversations": conversations}

    async def query_conversation_details(self, body: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", self.endpoints.conversation_details_query_path, json=body)

    async def get_conversation_details(self, conversation_ids: Sequence[str]) -> Dict[str, Any]:
        params = [("id", conversation_id) for conversation_id in conversation_ids]
        return await self._request("GET", self.endpoints.conversation_details_path, params=params)

    async def query_conversation_aggregates(self, body: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", self.endpoints.conversation_aggregates_query_path, json=body)

    async def get_speech_conversation(self, conversation_id: str) -> Dict[str, Any]:
        path = self.endpoints.speech_conversation_path.format(conversation_id=conversation_id)
        return await self._request("GET", path)

    async def get_conversation(self, conversation_id: str) -> Dict[str, Any]:
        path = self.endpoints.conversation_analytics_details_path.format(conversation_id=conversation_id)
        return await self._request("GET", path)

    async def get_conversation_recording_metadata(self, conversation_id: str) -> List[Dict[str, Any]]:
        path = self.endpoints.conversation_recording_metadata_path.format(conversation_id=conversation_id)
        recordings = await self._request("GET", path)
        return recordings if isinstance(recordings, list) else []

    async def get_transcript_url(self, conversation_id: str, communication_id: str) -> Dict[str, Any]:
        path = self.endpoints.transcript_url_path.format(
            conversation_id=conversation_id, communication_id=communication_id
        )
        return await self._request("GET", path)

    async def fetch_transcript(self, url: str) -> Dict[str, Any]:
        """Download a transcript document from the pre-signed URL the platform issued."""
        async with create_async_client(timeout=self.settings.request_timeout, transport=self._transport) as client:
            response = await client.get(url)
        if response.is_error:
            raise PlatformApiError.from_response(response)
        return _json_body(response, response.url.path)

    async def query_transcript_aggregates(self, body: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", self.endpoints.transcript_aggregates_query_path, json=body)

    async def get_speech_topics(self, topic_ids: Sequence[str]) -> Dict[str, Any]:
        params: List[Tuple[str, Any]] = [("ids", topic_id) for topic_id in topic_ids]
        params.append(("pageSize", max(len(topic_ids), 1)))
        return await self._request("GET", self.endpoints.speech_topics_path, params=params)

    async def submit_oauth_client_usage_query(self, client_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        path = self.endpoints.oauth_client_usage_query_path.format(client_id=client_id)
        return await self._request("POST", path, json=body)

    async def get_oauth_client_usage_query_result(self, execution_id: str, client_id: str) -> Dict[str, Any]:
        path = self.endpoints.oauth_client_usage_result_path.format(
            client_id=client_id, execution_id=execution_id
        )
        return await self._request("GET", path)

    async def get_oauth_clients(self) -> Dict[str, Any]:
        return await self._request("GET", self.endpoints.oauth_clients_path)

    async def get_authorization_divisions(self, page_size: int) -> Dict[str, Any]:
        return await self._request(
            "GET", self.endpoints.authorization_divisions_path, params={"pageSize": page_size}
        )

    async def get_authorization_roles(self, role_ids: Sequence[str], page_size: int) -> Dict[str, Any]:
        params: List[Tuple[str, Any]] = [("id", role_id) for role_id in role_ids]
        params.append(("pageSize", page_size))
        return await self._request("GET", self.endpoints.authorization_roles_path, params=params)
