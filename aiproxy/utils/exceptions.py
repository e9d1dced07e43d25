"""
Exceptions raised by the AIProxy client.

Every error reaches the immediate caller unchanged. Only the queue poller
loops, and only on non-terminal job statuses; none of these exceptions are
retried internally.

Usage:
    from aiproxy.utils.exceptions import RetryLimitReachedError, UnsuccessfulRequestError

    try:
        output = await fal.create_fast_sdxl_image(input_schema)
    except UnsuccessfulRequestError as e:
        print(e.status_code, e.response_body)
    except RetryLimitReachedError:
        # job still queued after the poll budget; resubmit or poll again
        ...
"""

import logging

from aiproxy.models.queue_models import ErrorEnvelope
from aiproxy.utils.security_validators import sanitize_for_logging

logger = logging.getLogger(__name__)


class AIProxyError(Exception):
    """Base exception for AIProxy client errors."""

    pass


class TransportFailureError(AIProxyError):
    """Raised when the request never produced an HTTP response (DNS, connect, read timeout, ...)."""

    pass


class UnsuccessfulRequestError(AIProxyError):
    """Raised when the proxy or provider answers with a status code above 299."""

    def __init__(self, status_code: int, response_body: str):
        super().__init__(f"Request failed with status {status_code}: {response_body}")
        self.status_code = status_code
        self.response_body = response_body

    @property
    def envelope(self) -> ErrorEnvelope:
        return ErrorEnvelope(http_status_code=self.status_code, raw_body=self.response_body)


class MissingStatusURLError(AIProxyError):
    """Raised when a create-job response carries no status URL to poll."""

    def __init__(self, message: str = "Queue response did not include a status_url"):
        super().__init__(message)


class MissingResultURLError(AIProxyError):
    """Raised when a completed job carries no response URL to fetch."""

    def __init__(self, message: str = "Completed queue response did not include a response_url"):
        super().__init__(message)


class UnexpectedDomainError(AIProxyError):
    """Raised when a polling or result URL is not on the provider's queue host.

    This means the provider changed its infrastructure; it is never retried.
    """

    def __init__(self, url: str, expected_host: str):
        super().__init__(f"Expected a URL on {expected_host}, got {url}")
        self.url = url
        self.expected_host = expected_host


class RetryLimitReachedError(AIProxyError):
    """Raised when the poll attempt budget runs out before the job completes."""

    def __init__(self, attempts: int):
        super().__init__(f"Job did not complete after {attempts} poll attempts")
        self.attempts = attempts


class DecodeError(AIProxyError):
    """Raised when a response body does not match the expected schema."""

    pass


def ensure_successful_response(status_code: int, body: bytes) -> None:
    """
    Raise UnsuccessfulRequestError for any status code above 299.

    Args:
        status_code: HTTP status code of the response
        body: Raw response body; kept verbatim, or "" if it is not valid UTF-8

    Raises:
        UnsuccessfulRequestError: If status_code > 299
    """
    if status_code <= 299:
        return

    try:
        response_body = body.decode("utf-8")
    except UnicodeDecodeError:
        response_body = ""

    logger.error(
        f"Unsuccessful request (HTTP {status_code}): {sanitize_for_logging(response_body[:500])}",
        extra={"status_code": status_code},
    )
    raise UnsuccessfulRequestError(status_code=status_code, response_body=response_body)
