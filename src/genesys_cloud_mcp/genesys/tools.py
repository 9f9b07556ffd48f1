"""Genesys Cloud MCP tool implementations.

FastMCP builds each tool's input schema from the handler signature, so
annotations here are evaluated eagerly.
"""

import asyncio
from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Iterable, List, Mapping, Optional
from uuid import UUID

from mcp.types import CallToolResult, ToolAnnotations
from pydantic import Field

from ..jobs import (
    CONVERSATION_DETAILS_JOB,
    OAUTH_CLIENT_USAGE_QUERY,
    DateRangeError,
    JobKind,
    JobPollError,
    JobSubmissionError,
    ResponseCache,
    aggregate_usage,
    normalize_date_range,
    run_job,
    sample_evenly,
    usage_cache_key,
)
from ..logging import get_logger
from .api import GenesysCloudApi
from .errors import is_missing_permissions_error, is_not_found_error, is_unauthorised_error
from .helpers import (
    REMOTE_ERRORS,
    error_result,
    failure_message,
    format_duration,
    format_utterance_offset,
    interpret_call_quality,
    interpret_sentiment,
    normalise_phone_number,
    pagination_section,
    parse_platform_timestamp,
    scale_sentiment,
    text_result,
)
from .schemas import (
    CallQuality,
    ConversationSentiment,
    ConversationSentimentResponse,
    ConversationTopic,
    ConversationTopicsResponse,
    ConversationTranscriptResponse,
    DivisionReference,
    EndpointUsage,
    OAuthClientSummary,
    OAuthClientUsageResponse,
    QueueSummary,
    QueueVolume,
    QueueVolumesResponse,
    RoleWithDivisions,
    SampledConversationsResponse,
    SearchQueuesResponse,
    SearchVoiceConversationsResponse,
    TranscriptUtterance,
    VoiceCallQualityResponse,
    VoiceConversation,
)

LOGGER = get_logger(__name__)

CONVERSATION_SAMPLE_SIZE = 100
MAX_DIVISIONS_PAGE_SIZE = 99999

SPEAKERS = {"external": "Customer", "internal": "Agent", "ivr": "IVR", "acd": "IVR"}

StartDate = Annotated[
    str, Field(description="The start date/time in ISO-8601 format (e.g., '2024-01-01T00:00:00Z')")
]
EndDate = Annotated[
    str, Field(description="The end date/time in ISO-8601 format (e.g., '2024-01-07T23:59:59Z')")
]
ConversationId = Annotated[
    UUID, Field(description="A UUID for a conversation. (e.g., 00000000-0000-0000-0000-000000000000)")
]

CALL_QUALITY_DESCRIPTION = (
    "Retrieves voice call quality metrics for one or more conversations by ID. This tool specifically "
    "focuses on voice interactions and returns the minimum Mean Opinion Score (MOS) observed in each "
    "conversation as structured JSON. MOS is a measure of perceived audio quality based on factors such as "
    "jitter, latency, packet loss, and codec. Use the following legend to interpret MOS values:\n\n"
    "  • Poor:       MOS < 3.5\n"
    "  • Acceptable: 3.5 ≤ MOS < 4.3\n"
    "  • Excellent:  MOS ≥ 4.3"
)


def _combine_roles_and_divisions(
    client: Mapping[str, Any],
    division_names: Mapping[str, Optional[str]],
    role_names: Mapping[str, Optional[str]],
) -> List[RoleWithDivisions]:
    # roleIds is authoritative; roleDivisions may add divisions or extra roles
    roles: Dict[str, Dict[str, None]] = {role_id: {} for role_id in client.get("roleIds") or []}
    for role_division in client.get("roleDivisions") or []:
        role_id = role_division.get("roleId")
        if not role_id:
            continue
        divisions = roles.setdefault(role_id, {})
        if role_division.get("divisionId"):
            divisions[role_division["divisionId"]] = None

    return [
        RoleWithDivisions(
            id=role_id,
            name=role_names.get(role_id),
            divisions=[
                DivisionReference(id=division_id, name=division_names.get(division_id))
                for division_id in divisions
            ],
        )
        for role_id, divisions in roles.items()
    ]


def _format_oauth_client(
    client: Mapping[str, Any],
    division_names: Mapping[str, Optional[str]],
    role_names: Mapping[str, Optional[str]],
) -> OAuthClientSummary:
    return OAuthClientSummary(
        id=client.get("id"),
        name=client.get("name"),
        description=client.get("description"),
        roles=_combine_roles_and_divisions(client, division_names, role_names),
        date_created=client.get("dateCreated"),
        scope=client.get("scope"),
        state=client.get("state"),
        date_to_delete=client.get("dateToDelete"),
    )


def _transcript_utterances(documents: Iterable[Mapping[str, Any]]) -> List[TranscriptUtterance]:
    conversation_starts: List[int] = []
    phrases: List[Mapping[str, Any]] = []
    for document in documents:
        if document.get("startTime") is not None:
            conversation_starts.append(document["startTime"])
        for transcript in document.get("transcripts") or []:
            phrases.extend(phrase for phrase in transcript.get("phrases") or [] if phrase.get("text"))

    phrases.sort(key=lambda phrase: phrase.get("startTimeMs") or 0)
    conversation_start = min(conversation_starts) if conversation_starts else None
    if conversation_start is None and phrases:
        conversation_start = phrases[0].get("startTimeMs")

    return [
        TranscriptUtterance(
            time=format_utterance_offset(conversation_start, phrase.get("startTimeMs")),
            speaker=SPEAKERS.get((phrase.get("participantPurpose") or "").lower(), "Unknown"),
            text=phrase["text"],
        )
        for phrase in phrases
    ]


def _names_by_id(entities: Iterable[Mapping[str, Any]]) -> Dict[str, Optional[str]]:
    return {entity["id"]: entity.get("name") for entity in entities if entity.get("id")}


def _metric_stats(data: Iterable[Mapping[str, Any]]) -> Dict[str, Dict[str, float]]:
    totals: Dict[str, Dict[str, float]] = {}
    for interval in data:
        for metric in interval.get("metrics") or []:
            stats = metric.get("stats") or {}
            bucket = totals.setdefault(metric.get("metric"), {"count": 0, "sum": 0})
            bucket["count"] += stats.get("count") or 0
            bucket["sum"] += stats.get("sum") or 0
    return totals


def _queue_volume(group_result: Mapping[str, Any]) -> Optional[QueueVolume]:
    group = group_result.get("group") or {}
    queue_id = group.get("queueId")
    if not queue_id:
        return None
    stats = _metric_stats(group_result.get("data") or [])

    def count(metric: str) -> int:
        return int(stats.get(metric, {}).get("count", 0))

    handle = stats.get("tHandle", {})
    average_handle_time = None
    if handle.get("count"):
        average_handle_time = round(handle["sum"] / handle["count"] / 1000, 1)

    return QueueVolume(
        queue_id=queue_id,
        media_type=group.get("mediaType"),
        offered=count("nOffered"),
        connected=count("nConnected"),
        answered=count("tAnswered"),
        abandoned=count("tAbandon"),
        handled=count("tHandle"),
        average_handle_time_seconds=average_handle_time,
    )


class GenesysCloudTools:
    """Tool handlers bound to a Platform API client and an optional usage cache."""

    def __init__(
        self,
        api: GenesysCloudApi,
        usage_cache: Optional[ResponseCache[OAuthClientUsageResponse]] = None,
        conversation_job: JobKind = CONVERSATION_DETAILS_JOB,
        usage_job: JobKind = OAUTH_CLIENT_USAGE_QUERY,
    ) -> None:
        self.api = api
        self.usage_cache = usage_cache
        self.conversation_job = conversation_job
        self.usage_job = usage_job

    async def search_queues(
        self,
        name: Annotated[
            str,
            Field(
                min_length=1,
                description=(
                    "The name (or partial name) of the routing queue(s) to search for. Wildcards ('*') are "
                    "supported for pattern matching (e.g., 'Support*', '*Emergency', '*Sales*'). Use '*' alone "
                    "to retrieve all queues"
                ),
            ),
        ],
        pageNumber: Annotated[
            int,
            Field(
                gt=0,
                description=(
                    "The page number of the results to retrieve, starting from 1. Defaults to 1 if not "
                    "specified. Used with 'pageSize' for navigating large result sets"
                ),
            ),
        ] = 1,
        pageSize: Annotated[
            int,
            Field(
                gt=0,
                le=500,
                description=(
                    "The maximum number of queues to return per page. Defaults to 100 if not specified. Used "
                    "with 'pageNumber' for pagination. The maximum value is 500"
                ),
            ),
        ] = 100,
    ) -> CallToolResult:
        try:
            result = await self.api.get_routing_queues(name=name, page_size=pageSize, page_number=pageNumber)
        except REMOTE_ERRORS as exc:
            LOGGER.warning("search_queues_failed", error=str(exc))
            return error_result(failure_message("Failed to search queues", exc))

        entities = result.get("entities") or []
        queues = [
            QueueSummary(
                name=queue["name"],
                id=queue["id"],
                description=queue.get("description") or None,
                member_count=queue.get("memberCount"),
            )
            for queue in entities
            if queue.get("id") is not None and queue.get("name") is not None
        ]
        empty = len(entities) == 0
        pagination = pagination_section(
            "totalMatchingQueues",
            page_size=0 if empty else result.get("pageSize"),
            page_number=0 if empty else result.get("pageNumber"),
            total_hits=0 if empty else result.get("total"),
            page_count=0 if empty else result.get("pageCount"),
        )
        return text_result(SearchQueuesResponse(queues=queues, pagination=pagination))

    async def sample_conversations_by_queue(
        self,
        queueId: Annotated[
            UUID,
            Field(
                description=(
                    "The UUID of the queue to filter conversations by. "
                    "(e.g., 00000000-0000-0000-0000-000000000000)"
                )
            ),
        ],
        startDate: StartDate,
        endDate: EndDate,
    ) -> CallToolResult:
        try:
            time_range = normalize_date_range(startDate, endDate)
        except DateRangeError as exc:
            return error_result(str(exc))

        body = {
            "interval": time_range.interval,
            "order": "asc",
            "orderBy": "conversationStart",
            "segmentFilters": [
                {"type": "and", "predicates": [{"dimension": "purpose", "value": "customer"}]},
                {"type": "or", "predicates": [{"dimension": "queueId", "value": str(queueId)}]},
            ],
        }

        async def submit() -> Optional[str]:
            job = await self.api.submit_conversation_details_job(body)
            return job.get("jobId")

        try:
            results = await run_job(
                self.conversation_job,
                submit=submit,
                probe=self.api.get_conversation_details_job,
                fetch=self.api.get_conversation_details_job_results,
            )
        except (JobPollError, JobSubmissionError) as exc:
            return error_result(str(exc))
        except REMOTE_ERRORS as exc:
            LOGGER.warning("sample_conversations_failed", queue_id=str(queueId), error=str(exc))
            return error_result(failure_message("Failed to query conversations", exc))

        conversation_ids = [
            conversation["conversationId"]
            for conversation in results.get("conversations") or []
            if conversation.get("conversationId")
        ]
        sampled = sample_evenly(conversation_ids, CONVERSATION_SAMPLE_SIZE)
        return text_result(
            SampledConversationsResponse(
                size_of_sample=len(sampled),
                total_conversations_sampled=len(conversation_ids),
                sampled_conversations=sampled,
            )
        )

    async def query_queue_volumes(
        self,
        queueIds: Annotated[
            List[UUID],
            Field(
                min_length=1,
                max_length=300,
                description="A list of up to 300 queue IDs to retrieve conversation volumes for",
            ),
        ],
        startDate: StartDate,
        endDate: EndDate,
    ) -> CallToolResult:
        try:
            time_range = normalize_date_range(startDate, endDate)
        except DateRangeError as exc:
            return error_result(str(exc))

        body = {
            "interval": time_range.interval,
            "groupBy": ["queueId", "mediaType"],
            "metrics": ["nOffered", "nConnected", "tAnswered", "tAbandon", "tHandle"],
            "filter": {
                "type": "or",
                "predicates": [{"dimension": "queueId", "value": str(queue_id)} for queue_id in queueIds],
            },
        }
        try:
            result = await self.api.query_conversation_aggregates(body)
        except REMOTE_ERRORS as exc:
            LOGGER.warning("query_queue_volumes_failed", error=str(exc))
            return error_result(failure_message("Failed to query queue volumes", exc))

        volumes = [
            volume
            for volume in (_queue_volume(group) for group in result.get("results") or [])
            if volume is not None
        ]
        return text_result(QueueVolumesResponse(queues=volumes))

    async def voice_call_quality(
        self,
        conversationIds: Annotated[
            List[ConversationId],
            Field(
                min_length=1,
                max_length=100,
                description="A list of up to 100 conversation IDs to evaluate voice call quality for",
            ),
        ],
    ) -> CallToolResult:
        try:
            details = await self.api.get_conversation_details([str(cid) for cid in conversationIds])
        except REMOTE_ERRORS as exc:
            LOGGER.warning("voice_call_quality_failed", error=str(exc))
            return error_result(
                failure_message("Failed to query conversations call quality", exc, unauthorised_suffix=".")
            )

        output: List[CallQuality] = []
        for conversation in details.get("conversations") or []:
            mos = conversation.get("mediaStatsMinConversationMos")
            if not conversation.get("conversationId") or not mos:
                continue
            output.append(
                CallQuality(
                    conversation_id=conversation["conversationId"],
                    minimum_mos=f"{mos:.2f}",
                    quality_label=interpret_call_quality(mos),
                )
            )
        return text_result(VoiceCallQualityResponse(conversations=output))

    async def conversation_sentiment(
        self,
        conversationIds: Annotated[
            List[ConversationId],
            Field(
                min_length=1,
                max_length=100,
                description="A list of up to 100 conversation IDs to retrieve sentiment for",
            ),
        ],
    ) -> CallToolResult:
        ids = [str(cid) for cid in conversationIds]
        outcomes = await asyncio.gather(
            *(self.api.get_speech_conversation(conversation_id) for conversation_id in ids),
            return_exceptions=True,
        )

        with_sentiment: List[ConversationSentiment] = []
        without_sentiment: List[str] = []
        for conversation_id, outcome in zip(ids, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                if is_not_found_error(outcome):
                    without_sentiment.append(conversation_id)
                elif is_unauthorised_error(outcome):
                    return error_result(
                        failure_message("Failed to retrieve sentiment analysis", outcome, unauthorised_suffix=".")
                    )
                else:
                    LOGGER.warning("sentiment_lookup_failed", conversation_id=conversation_id, error=str(outcome))
                continue

            found_id = (outcome.get("conversation") or {}).get("id")
            score = outcome.get("sentimentScore")
            if found_id is None or score is None:
                continue
            scaled = scale_sentiment(score)
            with_sentiment.append(
                ConversationSentiment(
                    conversation_id=found_id,
                    sentiment_score=scaled,
                    sentiment_description=interpret_sentiment(scaled),
                )
            )

        return text_result(
            ConversationSentimentResponse(
                conversations_with_sentiment=with_sentiment,
                conversations_without_sentiment=without_sentiment,
            )
        )

    async def conversation_topics(self, conversationId: ConversationId) -> CallToolResult:
        conversation_id = str(conversationId)
        try:
            conversation = await self.api.get_conversation(conversation_id)
        except REMOTE_ERRORS as exc:
            LOGGER.warning("conversation_lookup_failed", conversation_id=conversation_id, error=str(exc))
            return error_result(failure_message("Failed to retrieve conversation topics", exc))

        started = conversation.get("conversationStart")
        if not started:
            return error_result(f"Unable to find the start date of conversation {conversation_id}")
        # conversations still in progress are searched up to now
        ended = conversation.get("conversationEnd") or datetime.now(timezone.utc).isoformat()
        try:
            time_range = normalize_date_range(started, ended)
        except DateRangeError as exc:
            return error_result(str(exc))

        body = {
            "interval": time_range.interval,
            "filter": {
                "type": "and",
                "predicates": [{"dimension": "conversationId", "value": conversation_id}],
            },
            "groupBy": ["topicId"],
            "metrics": ["nTopicCommunications"],
        }
        try:
            aggregates = await self.api.query_transcript_aggregates(body)
            topic_ids = list(
                dict.fromkeys(
                    group["topicId"]
                    for group in ((result.get("group") or {}) for result in aggregates.get("results") or [])
                    if group.get("topicId")
                )
            )
            topics = await self.api.get_speech_topics(topic_ids) if topic_ids else {}
        except REMOTE_ERRORS as exc:
            LOGGER.warning("conversation_topics_failed", conversation_id=conversation_id, error=str(exc))
            return error_result(failure_message("Failed to retrieve conversation topics", exc))

        detected = [
            ConversationTopic(name=topic["name"], description=topic.get("description") or None)
            for topic in topics.get("entities") or []
            if topic.get("name")
        ]
        return text_result(ConversationTopicsResponse(conversation_id=conversation_id, detected_topics=detected))

    async def conversation_transcription(self, conversationId: ConversationId) -> CallToolResult:
        conversation_id = str(conversationId)
        try:
            recordings = await self.api.get_conversation_recording_metadata(conversation_id)
            communication_ids = list(
                dict.fromkeys(
                    recording["sessionId"]
                    for recording in recordings
                    if recording.get("media") == "audio" and recording.get("sessionId")
                )
            )
            if not communication_ids:
                return error_result(f"No voice recordings found for conversation {conversation_id}")

            documents = []
            for communication_id in communication_ids:
                location = await self.api.get_transcript_url(conversation_id, communication_id)
                if location.get("url"):
                    documents.append(await self.api.fetch_transcript(location["url"]))
        except REMOTE_ERRORS as exc:
            LOGGER.warning("conversation_transcription_failed", conversation_id=conversation_id, error=str(exc))
            return error_result(failure_message("Failed to retrieve transcript", exc))

        return text_result(
            ConversationTranscriptResponse(
                conversation_id=conversation_id,
                utterances=_transcript_utterances(documents),
            )
        )

    async def search_voice_conversations(
        self,
        startDate: StartDate,
        endDate: EndDate,
        phoneNumber: Annotated[
            Optional[str],
            Field(
                description=(
                    "Optional. Filters results to only include conversations involving this phone number "
                    "(e.g., '+440000000000')"
                )
            ),
        ] = None,
        pageNumber: Annotated[
            int,
            Field(
                gt=0,
                description=(
                    "The page number of the results to retrieve, starting from 1. Defaults to 1 if not "
                    "specified. Used with 'pageSize' for navigating large result sets"
                ),
            ),
        ] = 1,
        pageSize: Annotated[
            int,
            Field(
                gt=0,
                le=100,
                description=(
                    "The maximum number of conversations to return per page. Defaults to 100 if not "
                    "specified. Used with 'pageNumber' for pagination. The maximum value is 100"
                ),
            ),
        ] = 100,
    ) -> CallToolResult:
        try:
            time_range = normalize_date_range(startDate, endDate)
        except DateRangeError as exc:
            return error_result(str(exc))

        segment_filters: List[Dict[str, Any]] = [
            {"type": "or", "predicates": [{"dimension": "mediaType", "value": "voice"}]},
            {
                "type": "or",
                "predicates": [
                    {"dimension": "direction", "value": "inbound"},
                    {"dimension": "direction", "value": "outbound"},
                ],
            },
        ]
        if phoneNumber:
            segment_filters.append(
                {"type": "or", "predicates": [{"dimension": "ani", "value": normalise_phone_number(phoneNumber)}]}
            )
        body = {
            "order": "desc",
            "orderBy": "conversationStart",
            "paging": {"pageSize": pageSize, "pageNumber": pageNumber},
            "interval": time_range.interval,
            "segmentFilters": segment_filters,
            "conversationFilters": [],
            "evaluationFilters": [],
            "surveyFilters": [],
        }
        try:
            result = await self.api.query_conversation_details(body)
        except REMOTE_ERRORS as exc:
            LOGGER.warning("search_voice_conversations_failed", error=str(exc))
            return error_result(failure_message("Failed to search conversations", exc))

        conversations: List[VoiceConversation] = []
        for conversation in result.get("conversations") or []:
            if not conversation.get("conversationId"):
                continue
            started = parse_platform_timestamp(conversation.get("conversationStart"))
            ended = parse_platform_timestamp(conversation.get("conversationEnd"))
            conversations.append(
                VoiceConversation(
                    conversation_id=conversation["conversationId"],
                    duration=format_duration(started, ended) if started and ended else None,
                )
            )

        pagination = pagination_section(
            "totalConversationsReturned",
            page_size=pageSize,
            page_number=pageNumber,
            total_hits=result.get("totalHits"),
        )
        return text_result(SearchVoiceConversationsResponse(conversations=conversations, pagination=pagination))

    async def oauth_clients(self) -> CallToolResult:
        try:
            result = await self.api.get_oauth_clients()
        except REMOTE_ERRORS as exc:
            LOGGER.warning("oauth_clients_failed", error=str(exc))
            return error_result(failure_message("Failed to retrieve list of all OAuth clients", exc))

        entities = result.get("entities") or []

        division_names: Dict[str, Optional[str]] = {}
        try:
            # divisions are few enough to fetch in one page
            divisions = await self.api.get_authorization_divisions(page_size=MAX_DIVISIONS_PAGE_SIZE)
            division_names = _names_by_id(divisions.get("entities") or [])
        except REMOTE_ERRORS as exc:
            LOGGER.warning(
                "division_names_unavailable",
                reason="missing_permission" if is_missing_permissions_error(exc) else str(exc),
            )

        role_ids = list(dict.fromkeys(role_id for entity in entities for role_id in entity.get("roleIds") or []))
        role_names: Dict[str, Optional[str]] = {}
        if role_ids:
            try:
                roles = await self.api.get_authorization_roles(role_ids, page_size=len(role_ids))
                role_names = _names_by_id(roles.get("entities") or [])
            except REMOTE_ERRORS as exc:
                LOGGER.warning(
                    "role_names_unavailable",
                    reason="missing_permission" if is_missing_permissions_error(exc) else str(exc),
                )

        return text_result([_format_oauth_client(entity, division_names, role_names) for entity in entities])

    async def oauth_client_usage(
        self,
        oauthClientId: Annotated[
            UUID,
            Field(
                description=(
                    "The UUID of the OAuth Client to retrieve the usage for "
                    "(e.g., 00000000-0000-0000-0000-000000000000)"
                )
            ),
        ],
        startDate: StartDate,
        endDate: EndDate,
    ) -> CallToolResult:
        client_id = str(oauthClientId)
        try:
            time_range = normalize_date_range(startDate, endDate)
        except DateRangeError as exc:
            return error_result(str(exc))

        cache_key = usage_cache_key(client_id, time_range)
        if self.usage_cache is not None:
            cached = self.usage_cache.get(cache_key)
            if cached is not None:
                LOGGER.info("usage_cache_hit", oauth_client_id=client_id)
                return text_result(cached)

        body = {
            "interval": time_range.interval,
            "metrics": ["Requests"],
            "groupBy": ["TemplateUri", "HttpMethod"],
        }

        async def submit() -> Optional[str]:
            execution = await self.api.submit_oauth_client_usage_query(client_id, body)
            return execution.get("executionId")

        async def probe(execution_id: str) -> Dict[str, Any]:
            return await self.api.get_oauth_client_usage_query_result(execution_id, client_id)

        try:
            # the completing probe already carries the results
            usage = await run_job(self.usage_job, submit=submit, probe=probe)
        except (JobPollError, JobSubmissionError) as exc:
            return error_result(str(exc))
        except REMOTE_ERRORS as exc:
            LOGGER.warning("oauth_client_usage_failed", oauth_client_id=client_id, error=str(exc))
            return error_result(failure_message("Failed to retrieve usage of OAuth client", exc))

        total_requests, per_endpoint = aggregate_usage(usage.get("results") or [])
        response = OAuthClientUsageResponse(
            start_date=startDate,
            end_date=endDate,
            total_requests=total_requests,
            requests_per_endpoint=[EndpointUsage(**entry) for entry in per_endpoint],
        )
        if self.usage_cache is not None:
            self.usage_cache.set(cache_key, response)
        return text_result(response)


def build_tool_specs(tools: GenesysCloudTools) -> List[Dict[str, Any]]:
    return [
        {
            "name": "search_queues",
            "title": "Search Queues",
            "func": tools.search_queues,
            "summary": (
                "Searches for routing queues based on their name, allowing for wildcard searches. Returns a "
                "paginated list of matching queues, including their Name, ID, Description (if available), and "
                "Member Count (if available). Also provides pagination details like current page, page size, "
                "total results found, and total pages available. Useful for finding specific queue IDs, "
                "checking queue configurations, or listing available queues."
            ),
        },
        {
            "name": "sample_conversations_by_queue",
            "title": "Sample Conversations by Queue",
            "func": tools.sample_conversations_by_queue,
            "summary": (
                "Retrieves conversation analytics for a specific queue between two dates, returning a "
                "representative sample of conversation IDs. Useful for reporting, investigation, or summarisation."
            ),
        },
        {
            "name": "query_queue_volumes",
            "title": "Query Queue Volumes",
            "func": tools.query_queue_volumes,
            "summary": (
                "Returns conversation volumes for one or more queues between two dates, broken down by media "
                "type: conversations offered, connected, answered, abandoned and handled, plus the average "
                "handle time in seconds."
            ),
        },
        {
            "name": "voice_call_quality",
            "title": "Voice Call Quality",
            "func": tools.voice_call_quality,
            "summary": CALL_QUALITY_DESCRIPTION,
        },
        {
            "name": "conversation_sentiment",
            "title": "Conversation Sentiment",
            "func": tools.conversation_sentiment,
            "summary": (
                "Retrieves sentiment analysis scores for one or more conversations. Sentiment is evaluated "
                "based on customer phrases, categorized as positive, neutral, or negative. The result includes "
                "both a numeric sentiment score (-100 to 100) and an interpreted sentiment label."
            ),
        },
        {
            "name": "conversation_topics",
            "title": "Conversation Topics",
            "func": tools.conversation_topics,
            "summary": (
                "Retrieves the Speech and Text Analytics topics detected in a conversation. Topics represent "
                "the business-level intents (e.g. cancellation, billing enquiry) detected in the transcript. "
                "Returns each topic's name and description."
            ),
        },
        {
            "name": "conversation_transcription",
            "title": "Conversation Transcription",
            "func": tools.conversation_transcription,
            "summary": (
                "Retrieves the transcript of a voice conversation. Each utterance is returned with the time "
                "into the call it started (mm:ss), who said it (Customer, Agent or IVR) and what was said. "
                "Requires Speech and Text Analytics to be enabled for the conversation's recordings."
            ),
        },
        {
            "name": "search_voice_conversations",
            "title": "Search Voice Conversations",
            "func": tools.search_voice_conversations,
            "summary": (
                "Searches for voice conversations within a specified time window, optionally filtering by "
                "phone number. Returns a paginated list of conversation IDs and call duration for use in "
                "further analysis or tool calls."
            ),
        },
        {
            "name": "oauth_clients",
            "title": "List OAuth Clients",
            "func": tools.oauth_clients,
            "summary": (
                "Retrieves a list of all OAuth clients, including their associated roles and divisions. This "
                "tool is useful for auditing and managing OAuth clients in the Genesys Cloud organization."
            ),
        },
        {
            "name": "oauth_client_usage",
            "title": "OAuth Client Usage",
            "func": tools.oauth_client_usage,
            "summary": (
                "Retrieves the usage of an OAuth Client for a given period. It returns the total number of "
                "requests and a breakdown of requests per endpoint."
            ),
        },
    ]


def tool_annotations(spec: Mapping[str, Any]) -> ToolAnnotations:
    return ToolAnnotations(title=spec["title"], readOnlyHint=True)
