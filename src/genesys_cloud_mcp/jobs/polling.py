"""Polling of asynchronous platform jobs.

Analytics queries that may take longer than a request/response cycle are
submitted as jobs on the platform. The caller receives an identifier and has
to poll the job's status until it reaches a terminal state. Every job type
follows the same loop; what differs is described by a :class:`JobKind`.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Tuple

from ..logging import get_logger

LOGGER = get_logger(__name__)

StatusProbe = Callable[[str], Awaitable[Mapping[str, Any]]]
JobSubmitter = Callable[[], Awaitable[Optional[str]]]
ResultFetcher = Callable[[str], Awaitable[Any]]


class JobState(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED_TERMINAL = "failed_terminal"
    FAILED_UNKNOWN = "failed_unknown"


class JobPollError(Exception):
    """Base class for jobs that did not complete successfully."""

    def __init__(self, message: str, job_id: str) -> None:
        super().__init__(message)
        self.job_id = job_id


class JobFailedError(JobPollError):
    """The platform reported an explicit failure, cancellation or expiry."""

    def __init__(self, message: str, job_id: str, status: str) -> None:
        super().__init__(message, job_id)
        self.status = status


class JobStateUnknownError(JobPollError):
    """The platform reported no determinable status for the job."""


class JobTimedOutError(JobPollError):
    """The job was still running after the attempt budget was spent."""

    def __init__(self, message: str, job_id: str, attempts: int) -> None:
        super().__init__(message, job_id)
        self.attempts = attempts


class JobSubmissionError(Exception):
    """The platform accepted a job request without returning an identifier."""


@dataclass(frozen=True)
class JobKind:
    name: str
    status_field: str
    success_status: str
    running_statuses: Tuple[str, ...]
    failure_statuses: Mapping[str, str] = field(default_factory=dict)
    unknown_status: str = "UNKNOWN"
    max_attempts: int = 10
    interval_seconds: float = 3.0

    def classify(self, status: Optional[str]) -> JobState:
        normalized = status.upper() if isinstance(status, str) else None
        if normalized == self.success_status:
            return JobState.SUCCEEDED
        if normalized in self.failure_statuses:
            return JobState.FAILED_TERMINAL
        if normalized in self.running_statuses:
            return JobState.PENDING
        # the explicit unknown sentinel and anything outside the vocabulary
        return JobState.FAILED_UNKNOWN


CONVERSATION_DETAILS_JOB = JobKind(
    name="Analytics job",
    status_field="state",
    success_status="FULFILLED",
    running_statuses=("QUEUED", "PENDING"),
    failure_statuses={
        "FAILED": "failed",
        "CANCELLED": "was cancelled",
        "EXPIRED": "results have expired",
    },
)

OAUTH_CLIENT_USAGE_QUERY = JobKind(
    name="OAuth client usage query",
    status_field="queryStatus",
    success_status="COMPLETE",
    running_statuses=("EXECUTING", "PENDING", "QUEUED"),
    failure_statuses={"FAILED": "failed"},
)


async def poll_until_complete(job_id: str, probe: StatusProbe, kind: JobKind) -> Dict[str, Any]:
    """Probe ``job_id`` until it reaches a terminal state.

    Returns the payload of the probe that reported success; callers that need
    no separate results call use it directly. Raises :class:`JobFailedError`,
    :class:`JobStateUnknownError` or :class:`JobTimedOutError` otherwise.
    """

    attempts = 0
    while attempts < kind.max_attempts:
        payload = await probe(job_id)
        attempts += 1
        raw_status = (payload or {}).get(kind.status_field)
        state = kind.classify(raw_status)

        if state is JobState.SUCCEEDED:
            LOGGER.info("job_completed", job_kind=kind.name, job_id=job_id, attempts=attempts)
            return dict(payload)

        if state is JobState.FAILED_TERMINAL:
            status = raw_status.upper()
            LOGGER.warning("job_failed", job_kind=kind.name, job_id=job_id, status=status)
            raise JobFailedError(
                f"{kind.name} {job_id} {kind.failure_statuses[status]}.",
                job_id,
                status,
            )

        if state is JobState.FAILED_UNKNOWN:
            LOGGER.warning("job_state_unknown", job_kind=kind.name, job_id=job_id, status=raw_status)
            raise JobStateUnknownError(
                f"{kind.name} {job_id} returned an unknown or undefined state.",
                job_id,
            )

        LOGGER.debug("job_pending", job_kind=kind.name, job_id=job_id, status=raw_status, attempt=attempts)
        if attempts < kind.max_attempts:
            await asyncio.sleep(kind.interval_seconds)

    LOGGER.warning("job_timed_out", job_kind=kind.name, job_id=job_id, attempts=attempts)
    raise JobTimedOutError(
        f"Timed out waiting for {kind.name} {job_id} to complete.",
        job_id,
        attempts,
    )


async def run_job(
    kind: JobKind,
    submit: JobSubmitter,
    probe: StatusProbe,
    fetch: Optional[ResultFetcher] = None,
) -> Any:
    """Submit a job, wait for it and return its results.

    Without ``fetch`` the payload of the completing status probe is returned.
    """

    job_id = await submit()
    if not job_id:
        raise JobSubmissionError(f"{kind.name} ID not returned from Genesys Cloud.")
    LOGGER.info("job_submitted", job_kind=kind.name, job_id=job_id)

    final_status = await poll_until_complete(job_id, probe, kind)
    if fetch is None:
        return final_status
    return await fetch(job_id)
