"""Builds requests addressed to an AIProxy service URL.

The proxy receives the provider path (e.g. ``/fal-ai/fast-sdxl`` or
``/v1/messages``) appended to the service URL and forwards it to the provider
with the full key. The client only ever holds the partial key.
"""

import logging
from typing import Literal

import httpx

logger = logging.getLogger(__name__)

HTTPVerb = Literal["GET", "POST", "PUT", "DELETE"]

PARTIAL_KEY_HEADER = "aiproxy-partial-key"
CLIENT_ID_HEADER = "aiproxy-client-id"


def normalize_proxy_path(path: str) -> str:
    """Ensure a model identifier or provider path starts with '/'"""
    if not path.startswith("/"):
        return "/" + path
    return path


class ProxyRequestFactory:
    """Creates httpx requests for one AIProxy service"""

    def __init__(self, partial_key: str, service_url: str, client_id: str | None = None):
        if not partial_key:
            raise ValueError("AIProxy partial key not configured")
        if not service_url:
            raise ValueError("AIProxy service URL not configured")

        self.partial_key = partial_key
        self.service_url = service_url.rstrip("/")
        self.client_id = client_id

    def create(
        self,
        proxy_path: str,
        body: bytes | None = None,
        verb: HTTPVerb = "GET",
        content_type: str | None = None,
    ) -> httpx.Request:
        """
        Build a request for the proxy.

        Args:
            proxy_path: Provider path to forward to, with or without a leading '/'
            body: Serialized request body, if any
            verb: HTTP method
            content_type: Content-Type header value, if any

        Returns:
            httpx.Request ready for a Transport
        """
        headers = {PARTIAL_KEY_HEADER: self.partial_key}
        if self.client_id:
            headers[CLIENT_ID_HEADER] = self.client_id
        if content_type:
            headers["Content-Type"] = content_type

        return httpx.Request(
            verb,
            f"{self.service_url}{normalize_proxy_path(proxy_path)}",
            headers=headers,
            content=body,
        )
