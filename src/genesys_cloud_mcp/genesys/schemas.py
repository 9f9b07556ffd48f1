"""Pydantic models for Genesys Cloud tool output."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class QueueSummary(ToolResponse):
    name: str
    id: str
    description: Optional[str] = None
    member_count: Optional[int] = Field(None, alias="memberCount")


class SearchQueuesResponse(ToolResponse):
    queues: List[QueueSummary]
    pagination: Dict[str, Any]


class SampledConversationsResponse(ToolResponse):
    size_of_sample: int = Field(..., alias="sizeOfSample")
    total_conversations_sampled: int = Field(..., alias="totalConversationsSampled")
    sampled_conversations: List[str] = Field(..., alias="sampledConversations")


class QueueVolume(ToolResponse):
    queue_id: str = Field(..., alias="queueId")
    media_type: Optional[str] = Field(None, alias="mediaType")
    offered: int = 0
    connected: int = 0
    answered: int = 0
    abandoned: int = 0
    handled: int = 0
    average_handle_time_seconds: Optional[float] = Field(None, alias="averageHandleTimeSeconds")


class QueueVolumesResponse(ToolResponse):
    queues: List[QueueVolume]


class CallQuality(ToolResponse):
    conversation_id: str = Field(..., alias="conversationId")
    minimum_mos: str = Field(..., alias="minimumMos")
    quality_label: str = Field(..., alias="qualityLabel")


class VoiceCallQualityResponse(ToolResponse):
    conversations: List[CallQuality]


class ConversationSentiment(ToolResponse):
    conversation_id: str = Field(..., alias="conversationId")
    sentiment_score: int = Field(..., alias="sentimentScore")
    sentiment_description: str = Field(..., alias="sentimentDescription")


class ConversationSentimentResponse(ToolResponse):
    conversations_with_sentiment: List[ConversationSentiment] = Field(..., alias="conversationsWithSentiment")
    conversations_without_sentiment: List[str] = Field(..., alias="conversationsWithoutSentiment")


class VoiceConversation(ToolResponse):
    conversation_id: str = Field(..., alias="conversationId")
    duration: Optional[str] = None


class SearchVoiceConversationsResponse(ToolResponse):
    conversations: List[VoiceConversation]
    pagination: Dict[str, Any]


class DivisionReference(ToolResponse):
    id: str
    name: Optional[str] = None


class RoleWithDivisions(ToolResponse):
    id: str
    name: Optional[str] = None
    divisions: List[DivisionReference] = []


class OAuthClientSummary(ToolResponse):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    roles: List[RoleWithDivisions] = []
    date_created: Optional[str] = Field(None, alias="dateCreated")
    scope: Optional[List[str]] = None
    state: Optional[str] = None
    date_to_delete: Optional[str] = Field(None, alias="dateToDelete")


class EndpointUsage(ToolResponse):
    endpoint: Optional[str] = None
    requests: Optional[int] = None


class OAuthClientUsageResponse(ToolResponse):
    start_date: str = Field(..., alias="startDate")
    end_date: str = Field(..., alias="endDate")
    total_requests: int = Field(..., alias="totalRequests")
    requests_per_endpoint: List[EndpointUsage] = Field(..., alias="requestsPerEndpoint")


class TranscriptUtterance(ToolResponse):
    time: str
    speaker: str
    text: str


class ConversationTranscriptResponse(ToolResponse):
    conversation_id: str = Field(..., alias="conversationId")
    utterances: List[TranscriptUtterance]


class ConversationTopic(ToolResponse):
    name: str
    description: Optional[str] = None


class ConversationTopicsResponse(ToolResponse):
    conversation_id: str = Field(..., alias="conversationId")
    detected_topics: List[ConversationTopic] = Field(..., alias="detectedTopics")
