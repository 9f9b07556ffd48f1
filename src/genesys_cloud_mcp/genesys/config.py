"""Genesys Cloud Platform API paths."""

from __future__ import annotations

from pydantic import BaseModel


class GenesysApiEndpoints(BaseModel):
    routing_queues_path: str = "/api/v2/routing/queues"
    conversation_details_path: str = "/api/v2/analytics/conversations/details"
    conversation_details_query_path: str = "/api/v2/analytics/conversations/details/query"
    conversation_details_jobs_path: str = "/api/v2/analytics/conversations/details/jobs"
    conversation_details_job_path: str = "/api/v2/analytics/conversations/details/jobs/{job_id}"
    conversation_details_job_results_path: str = (
        "/api/v2/analytics/conversations/details/jobs/{job_id}/results"
    )
    conversation_aggregates_query_path: str = "/api/v2/analytics/conversations/aggregates/query"
    speech_conversation_path: str = "/api/v2/speechandtextanalytics/conversations/{conversation_id}"
    conversation_analytics_details_path: str = "/api/v2/analytics/conversations/{conversation_id}/details"
    conversation_recording_metadata_path: str = "/api/v2/conversations/{conversation_id}/recordingmetadata"
    transcript_url_path: str = (
        "/api/v2/speechandtextanalytics/conversations/{conversation_id}"
        "/communications/{communication_id}/transcripturl"
    )
    transcript_aggregates_query_path: str = "/api/v2/analytics/transcripts/aggregates/query"
    speech_topics_path: str = "/api/v2/speechandtextanalytics/topics"
    oauth_clients_path: str = "/api/v2/oauth/clients"
    oauth_client_usage_query_path: str = "/api/v2/oauth/clients/{client_id}/usage/query"
    oauth_client_usage_result_path: str = (
        "/api/v2/oauth/clients/{client_id}/usage/query/results/{execution_id}"
    )
    authorization_divisions_path: str = "/api/v2/authorization/divisions"
    authorization_roles_path: str = "/api/v2/authorization/roles"


DEFAULT_ENDPOINTS = GenesysApiEndpoints()
