"""
HTTP transport for proxy requests.

Wraps a pooled ``httpx.AsyncClient`` behind a tiny ``send`` contract so the
job queue client and provider services never touch httpx response objects.
A single transport is safe to share across concurrent polls of different
jobs; it holds no per-job state.
"""

import logging
from typing import NamedTuple, Protocol

import httpx

from aiproxy.config import Config
from aiproxy.utils.exceptions import TransportFailureError

logger = logging.getLogger(__name__)


def _default_limits() -> httpx.Limits:
    return httpx.Limits(
        max_connections=Config.HTTP_MAX_CONNECTIONS,
        max_keepalive_connections=Config.HTTP_MAX_KEEPALIVE_CONNECTIONS,
        keepalive_expiry=30.0,  # Seconds to keep idle connections alive
    )


def _default_timeout() -> httpx.Timeout:
    return httpx.Timeout(
        connect=Config.HTTP_CONNECT_TIMEOUT,
        read=Config.HTTP_READ_TIMEOUT,  # Synchronous inference endpoints can be slow
        write=10.0,
        pool=5.0,
    )


class TransportResponse(NamedTuple):
    body: bytes
    status_code: int


class Transport(Protocol):
    async def send(self, request: httpx.Request) -> TransportResponse: ...


class HttpxTransport:
    """
    Transport backed by a pooled httpx.AsyncClient.

    The client is created lazily on first send. A client passed in by the
    caller is used as-is and is never closed by this transport.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: httpx.Timeout | None = None,
        limits: httpx.Limits | None = None,
    ):
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout
        self._limits = limits

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the pooled async HTTP client"""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(
                timeout=self._timeout or _default_timeout(),
                limits=self._limits or _default_limits(),
            )
            self._owns_client = True
        return self._client

    async def send(self, request: httpx.Request) -> TransportResponse:
        """
        Send a prepared request and return its raw body and status code.

        Non-2xx statuses are returned, not raised; callers decide what counts
        as a failure.

        Raises:
            TransportFailureError: If no HTTP response was received
        """
        client = self._get_client()
        try:
            response = await client.send(request)
        except httpx.RequestError as e:
            logger.error(f"Transport failure for {request.method} {request.url.path}: {e}")
            raise TransportFailureError(f"{type(e).__name__}: {e}") from e

        logger.debug(f"{request.method} {request.url.path} -> {response.status_code}")
        return TransportResponse(body=response.content, status_code=response.status_code)

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it"""
        if self._owns_client and self._client is not None:
            if not self._client.is_closed:
                await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


# Global transport instance
_shared_transport: HttpxTransport | None = None


def get_shared_transport() -> HttpxTransport:
    """Get the global transport instance"""
    global _shared_transport
    if _shared_transport is None:
        _shared_transport = HttpxTransport()
    return _shared_transport


async def close_shared_transport() -> None:
    """Close the global transport"""
    global _shared_transport
    if _shared_transport:
        await _shared_transport.aclose()
        _shared_transport = None
