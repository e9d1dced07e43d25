"""
AIProxy Python client

Async client for AI inference providers reached through an AIProxy service
URL, including queue-based providers that need submit / poll / fetch.

Usage:
    from aiproxy import AIProxy, FalFastSDXLInputSchema

    fal = AIProxy.fal_service(partial_key="...", service_url="...")
    output = await fal.create_fast_sdxl_image(FalFastSDXLInputSchema(prompt="a lighthouse"))
"""

__version__ = "0.1.0"

from .client import AIProxy
from .models.anthropic_models import (
    AnthropicInputMessage,
    AnthropicMessageRequestBody,
    AnthropicMessageResponseBody,
)
from .models.fal_models import (
    FalCustomImageSize,
    FalFastSDXLInputSchema,
    FalFastSDXLOutputSchema,
    FalImageSize,
)
from .models.queue_models import ErrorEnvelope, JobHandle, JobStatus, PollPolicy
from .services.anthropic_client import AnthropicService
from .services.fal_client import FalService
from .services.job_queue import JobQueueClient
from .services.proxy_request import ProxyRequestFactory
from .services.transport import HttpxTransport, TransportResponse
from .utils.exceptions import (
    AIProxyError,
    DecodeError,
    MissingResultURLError,
    MissingStatusURLError,
    RetryLimitReachedError,
    TransportFailureError,
    UnexpectedDomainError,
    UnsuccessfulRequestError,
)

__all__ = [
    "AIProxy",
    "AIProxyError",
    "AnthropicInputMessage",
    "AnthropicMessageRequestBody",
    "AnthropicMessageResponseBody",
    "AnthropicService",
    "DecodeError",
    "ErrorEnvelope",
    "FalCustomImageSize",
    "FalFastSDXLInputSchema",
    "FalFastSDXLOutputSchema",
    "FalImageSize",
    "FalService",
    "HttpxTransport",
    "JobHandle",
    "JobQueueClient",
    "JobStatus",
    "MissingResultURLError",
    "MissingStatusURLError",
    "PollPolicy",
    "ProxyRequestFactory",
    "RetryLimitReachedError",
    "TransportFailureError",
    "TransportResponse",
    "UnexpectedDomainError",
    "UnsuccessfulRequestError",
]
