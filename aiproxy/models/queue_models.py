"""
Job queue models shared by providers that run inference asynchronously.

A provider that exposes a queue returns a handle from the create-job call,
reports progress through a status URL and serves the final output from a
response URL. See https://fal.ai/docs/model-endpoints/queue
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

NANOSECONDS_PER_SECOND = 1_000_000_000


class JobStatus(str, Enum):
    """Status of a queued job as reported by the provider"""

    QUEUED = "IN_QUEUE"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    UNKNOWN = "UNKNOWN"  # status field absent or not recognized

    @property
    def is_terminal(self) -> bool:
        return self is JobStatus.COMPLETED


class JobHandle(BaseModel):
    """Queue handle returned by a create-job call and by every status check"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    status_url: str | None = None
    response_url: str | None = None
    cancel_url: str | None = None
    request_id: str | None = None
    queue_position: int | None = None
    status: JobStatus = JobStatus.UNKNOWN

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> JobStatus:
        # Unrecognized statuses keep the poller going instead of failing the decode
        if isinstance(value, JobStatus):
            return value
        try:
            return JobStatus(value)
        except (TypeError, ValueError):
            return JobStatus.UNKNOWN

    @property
    def is_completed(self) -> bool:
        return self.status.is_terminal


class PollPolicy(BaseModel):
    """Attempt-counted polling bounds

    The total wait is bounded by ``max_attempts * interval_ns``; there is no
    wall-clock deadline.
    """

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(default=30, gt=0)
    interval_ns: int = Field(default=NANOSECONDS_PER_SECOND, gt=0)

    @classmethod
    def from_seconds(cls, max_attempts: int, seconds_between_attempts: int | float) -> "PollPolicy":
        return cls(
            max_attempts=max_attempts,
            interval_ns=int(seconds_between_attempts * NANOSECONDS_PER_SECOND),
        )

    @property
    def interval_seconds(self) -> float:
        return self.interval_ns / NANOSECONDS_PER_SECOND

    @property
    def max_wait_seconds(self) -> float:
        return self.max_attempts * self.interval_seconds


@dataclass(frozen=True)
class ErrorEnvelope:
    """Status code and raw body of a provider response that exceeded 299"""

    http_status_code: int
    raw_body: str
