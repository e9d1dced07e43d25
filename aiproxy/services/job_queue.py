"""
Job Queue Client

Drives the "create job -> poll status -> fetch result" protocol used by
providers that run inference asynchronously (Fal's queue is the reference).
Each call is an independent coroutine: a polling session owns its handle and
its sleeps, and shares only the transport with other sessions.
"""

import asyncio
import logging
from typing import Any, TypeVar

import httpx

from aiproxy.models.queue_models import JobHandle, JobStatus, PollPolicy
from aiproxy.services.codec import JSON_CONTENT_TYPE, deserialize, serialize
from aiproxy.services.proxy_request import ProxyRequestFactory, normalize_proxy_path
from aiproxy.services.transport import Transport
from aiproxy.utils.exceptions import (
    MissingResultURLError,
    MissingStatusURLError,
    RetryLimitReachedError,
    UnexpectedDomainError,
    ensure_successful_response,
)
from aiproxy.utils.security_validators import is_expected_host, sanitize_for_logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JobQueueClient:
    """
    Async client for a provider job queue reached through the proxy.

    Status and result URLs issued by the provider must live on
    ``expected_host``; their paths are replayed against the proxy.
    """

    def __init__(
        self,
        transport: Transport,
        request_factory: ProxyRequestFactory,
        expected_host: str,
        default_policy: PollPolicy | None = None,
        provider: str | None = None,
    ):
        """
        Initialize the job queue client.

        Args:
            transport: Transport used for every request
            request_factory: Builds proxy requests (key injection, service URL)
            expected_host: Host that status/response URLs must be on
            default_policy: Poll bounds used when a call doesn't pass its own
            provider: Provider name attached to log records (e.g. 'fal')
        """
        self.transport = transport
        self.request_factory = request_factory
        self.expected_host = expected_host
        self.default_policy = default_policy or PollPolicy()
        self.provider = provider

    async def submit(self, model: str, input: Any) -> JobHandle:
        """
        Create a job on the provider queue.

        Args:
            model: Model identifier, e.g. 'fal-ai/fast-sdxl'
            input: Request input (pydantic model, dict, dataclass...)

        Returns:
            JobHandle carrying the status URL to poll

        Raises:
            UnsuccessfulRequestError: If the proxy responds with status > 299
            MissingStatusURLError: If the response has no status_url
        """
        proxy_path = normalize_proxy_path(model)
        request = self.request_factory.create(
            proxy_path,
            body=serialize(input),
            verb="POST",
            content_type=JSON_CONTENT_TYPE,
        )

        log_extra = {"provider": self.provider, "model": proxy_path.lstrip("/")}
        logger.info(f"Submitting job to {sanitize_for_logging(proxy_path)}", extra=log_extra)
        body, status_code = await self.transport.send(request)
        ensure_successful_response(status_code, body)

        handle = deserialize(body, JobHandle)
        if handle.status_url is None:
            raise MissingStatusURLError()

        logger.info(
            f"Job queued for {sanitize_for_logging(proxy_path)} (status={handle.status.value})",
            extra={**log_extra, "request_id": handle.request_id},
        )
        return handle

    async def check_status(self, status_url: str) -> JobHandle:
        """
        Perform a single status check.

        Raises:
            UnexpectedDomainError: If status_url is not on the expected host
            UnsuccessfulRequestError: If the proxy responds with status > 299
        """
        url = self._require_expected_host(status_url)
        request = self.request_factory.create(url.path, verb="GET")

        body, status_code = await self.transport.send(request)
        ensure_successful_response(status_code, body)
        return deserialize(body, JobHandle)

    async def poll_until_complete(
        self, status_url: str, policy: PollPolicy | None = None
    ) -> JobHandle:
        """
        Poll a job's status URL until the provider reports it completed.

        Sleeps one interval before the first check, since a freshly created job
        is not expected to be ready, and one interval after every check that
        isn't completed. Queued, in-progress and unknown statuses all keep
        polling.

        Args:
            status_url: The status URL returned by submit
            policy: Attempt budget and interval; defaults to self.default_policy

        Returns:
            JobHandle with status COMPLETED

        Raises:
            UnexpectedDomainError: If status_url is not on the expected host
            UnsuccessfulRequestError: If any check responds with status > 299
            RetryLimitReachedError: If the job is not complete after max_attempts checks
        """
        policy = policy or self.default_policy
        self._require_expected_host(status_url)

        await asyncio.sleep(policy.interval_seconds)
        for attempt in range(1, policy.max_attempts + 1):
            handle = await self.check_status(status_url)

            log_extra = {
                "provider": self.provider,
                "request_id": handle.request_id,
                "attempt": attempt,
            }
            if handle.status is JobStatus.COMPLETED:
                logger.info(f"Job completed after {attempt} poll attempt(s)", extra=log_extra)
                return handle

            logger.debug(
                f"Job status {handle.status.value} "
                f"(attempt {attempt}/{policy.max_attempts}, queue_position={handle.queue_position})",
                extra=log_extra,
            )
            await asyncio.sleep(policy.interval_seconds)

        logger.warning(
            f"Job not complete after {policy.max_attempts} poll attempts",
            extra={"provider": self.provider, "attempt": policy.max_attempts},
        )
        raise RetryLimitReachedError(policy.max_attempts)

    async def fetch_result(self, response_url: str, output_type: type[T]) -> T:
        """
        Fetch and decode the output of a completed job.

        Only call this once poll_until_complete has returned.

        Args:
            response_url: The response_url of the completed JobHandle
            output_type: Type to decode the body into

        Raises:
            UnexpectedDomainError: If response_url is not on the expected host
            UnsuccessfulRequestError: If the proxy responds with status > 299
            DecodeError: If the body doesn't match output_type
        """
        url = self._require_expected_host(response_url)
        request = self.request_factory.create(url.path, verb="GET")

        body, status_code = await self.transport.send(request)
        ensure_successful_response(status_code, body)
        return deserialize(body, output_type)

    async def run_job(
        self,
        model: str,
        input: Any,
        output_type: type[T],
        policy: PollPolicy | None = None,
    ) -> T:
        """
        Submit a job, wait for it to complete and return its decoded output.

        Errors from each step propagate unchanged.

        Raises:
            MissingStatusURLError: If submission returned no status URL
            MissingResultURLError: If the completed job has no response URL
        """
        queued = await self.submit(model, input)
        if queued.status_url is None:
            raise MissingStatusURLError()

        completed = await self.poll_until_complete(queued.status_url, policy)
        if completed.response_url is None:
            raise MissingResultURLError()

        return await self.fetch_result(completed.response_url, output_type)

    def _require_expected_host(self, url: str) -> httpx.URL:
        if not is_expected_host(url, self.expected_host):
            raise UnexpectedDomainError(url=str(url), expected_host=self.expected_host)
        return httpx.URL(str(url))
