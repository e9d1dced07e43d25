"""Anthropic client routed through AIProxy.

Message requests are synchronous on Anthropic's side: one POST, one response,
no job queue.

API Documentation: https://docs.anthropic.com/en/api/messages
"""

import logging

from aiproxy.models.anthropic_models import (
    AnthropicMessageRequestBody,
    AnthropicMessageResponseBody,
)
from aiproxy.services.codec import JSON_CONTENT_TYPE, deserialize, serialize
from aiproxy.services.proxy_request import ProxyRequestFactory
from aiproxy.services.transport import Transport, get_shared_transport
from aiproxy.utils.exceptions import ensure_successful_response

# Initialize logging
logger = logging.getLogger(__name__)

ANTHROPIC_MESSAGES_PATH = "/v1/messages"


class AnthropicService:
    def __init__(self, request_factory: ProxyRequestFactory, transport: Transport | None = None):
        self.request_factory = request_factory
        self.transport = transport or get_shared_transport()

    async def message_request(
        self, body: AnthropicMessageRequestBody
    ) -> AnthropicMessageResponseBody:
        """Make a non-streaming request to /v1/messages.

        Args:
            body: The request body. `stream` is forced off.

        Returns:
            The decoded message response

        Raises:
            UnsuccessfulRequestError: If the proxy responds with status > 299
            DecodeError: If the response doesn't match the message schema
        """
        body = body.model_copy(update={"stream": False})
        request = self.request_factory.create(
            ANTHROPIC_MESSAGES_PATH,
            body=serialize(body),
            verb="POST",
            content_type=JSON_CONTENT_TYPE,
        )

        log_extra = {"provider": "anthropic", "model": body.model}
        logger.info(f"Making Anthropic request with model: {body.model}", extra=log_extra)
        logger.debug(f"Request params: message_count={len(body.messages)}")

        response_body, status_code = await self.transport.send(request)
        ensure_successful_response(status_code, response_body)

        response = deserialize(response_body, AnthropicMessageResponseBody)
        logger.info(f"Anthropic request successful for model: {body.model}", extra=log_extra)
        return response
