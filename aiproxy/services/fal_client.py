"""Fal.ai client routed through AIProxy.

Fal runs inference on a queue: creating an inference returns a status URL,
the status URL is polled until the job reports COMPLETED, and the output is
then fetched from the response URL.

Queue documentation: https://fal.ai/docs/model-endpoints/queue
"""

import logging
from typing import Any, TypeVar

from aiproxy.config import Config
from aiproxy.models.fal_models import FalFastSDXLInputSchema, FalFastSDXLOutputSchema
from aiproxy.models.queue_models import NANOSECONDS_PER_SECOND, JobHandle, PollPolicy
from aiproxy.services.job_queue import JobQueueClient
from aiproxy.services.proxy_request import ProxyRequestFactory
from aiproxy.services.transport import Transport, get_shared_transport

# Initialize logging
logger = logging.getLogger(__name__)

T = TypeVar("T")

FAL_FAST_SDXL_MODEL = "fal-ai/fast-sdxl"


class FalService:
    """
    Fal.ai inference through the proxy.

    The convenience methods (create_fast_sdxl_image) cover common models. For
    any other Fal model, either call run() with your own output type, or drive
    the queue yourself: create_inference, poll_for_inference_complete with the
    returned status_url, then get_response with the completed response_url.
    """

    def __init__(
        self,
        request_factory: ProxyRequestFactory,
        transport: Transport | None = None,
        queue_host: str | None = None,
    ):
        self.queue = JobQueueClient(
            transport=transport or get_shared_transport(),
            request_factory=request_factory,
            expected_host=queue_host or Config.FAL_QUEUE_HOST,
            default_policy=PollPolicy.from_seconds(
                Config.FAL_POLL_ATTEMPTS, Config.FAL_POLL_INTERVAL_SECONDS
            ),
            provider="fal",
        )

    async def create_fast_sdxl_image(
        self, input: FalFastSDXLInputSchema
    ) -> FalFastSDXLOutputSchema:
        """Generate images with fal-ai/fast-sdxl.

        Args:
            input: Prompt and generation controls

        Returns:
            The inference result. Each entry in `images` has a `url` for the
            generated image contents.
        """
        return await self.run(FAL_FAST_SDXL_MODEL, input, FalFastSDXLOutputSchema)

    async def run(
        self,
        model: str,
        input: Any,
        output_type: type[T] = dict[str, Any],
        policy: PollPolicy | None = None,
    ) -> T:
        """Create an inference on any Fal model and wait for its decoded output.

        Args:
            model: Fal model id, e.g. "fal-ai/flux/dev"
            input: The model's input schema (pydantic model or dict)
            output_type: Type matching the model's output schema; raw dict by default
            policy: Poll bounds; defaults to FAL_POLL_ATTEMPTS x FAL_POLL_INTERVAL_SECONDS
        """
        return await self.queue.run_job(model, input, output_type, policy)

    async def create_inference(self, model: str, input: Any) -> JobHandle:
        """Create an inference on Fal.

        The returned handle contains the status_url to poll.
        """
        return await self.queue.submit(model, input)

    async def poll_for_inference_complete(
        self,
        status_url: str,
        poll_attempts: int | None = None,
        seconds_between_poll_attempts: int | float | None = None,
    ) -> JobHandle:
        """Poll Fal's status_url until the inference completes.

        Args:
            status_url: The status URL returned from create_inference
            poll_attempts: Number of polls before RetryLimitReachedError is raised;
                defaults to FAL_POLL_ATTEMPTS
            seconds_between_poll_attempts: Seconds to wait between polls; defaults to
                FAL_POLL_INTERVAL_SECONDS

        Returns:
            A queue handle with status COMPLETED
        """
        default = self.queue.default_policy
        policy = PollPolicy(
            max_attempts=default.max_attempts if poll_attempts is None else poll_attempts,
            interval_ns=(
                default.interval_ns
                if seconds_between_poll_attempts is None
                else int(seconds_between_poll_attempts * NANOSECONDS_PER_SECOND)
            ),
        )
        return await self.queue.poll_until_complete(status_url, policy)

    async def get_response(self, url: str, output_type: type[T] = dict[str, Any]) -> T:
        """Get the output of a completed inference from its response_url.

        Only call this once poll_for_inference_complete returns. `output_type`
        should match the "Output" section of the model's API page on fal.ai.
        """
        return await self.queue.fetch_result(url, output_type)
