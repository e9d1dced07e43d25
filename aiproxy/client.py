"""
Service factory.

Usage:
    from aiproxy import AIProxy

    fal = AIProxy.fal_service(partial_key="...", service_url="https://api.aiproxy.pro/...")
    output = await fal.create_fast_sdxl_image(FalFastSDXLInputSchema(prompt="a lighthouse"))

Arguments left out fall back to AIPROXY_PARTIAL_KEY, AIPROXY_SERVICE_URL and
AIPROXY_CLIENT_ID from the environment.
"""

from aiproxy.config import Config
from aiproxy.services.anthropic_client import AnthropicService
from aiproxy.services.fal_client import FalService
from aiproxy.services.proxy_request import ProxyRequestFactory
from aiproxy.services.transport import Transport


def _request_factory(
    partial_key: str | None, service_url: str | None, client_id: str | None
) -> ProxyRequestFactory:
    return ProxyRequestFactory(
        partial_key=partial_key or Config.AIPROXY_PARTIAL_KEY,
        service_url=service_url or Config.AIPROXY_SERVICE_URL,
        client_id=client_id or Config.AIPROXY_CLIENT_ID,
    )


class AIProxy:
    """Entry point for creating provider services"""

    @staticmethod
    def fal_service(
        partial_key: str | None = None,
        service_url: str | None = None,
        client_id: str | None = None,
        transport: Transport | None = None,
    ) -> FalService:
        """Create a Fal.ai service. Raises ValueError if the key or URL is missing."""
        return FalService(_request_factory(partial_key, service_url, client_id), transport)

    @staticmethod
    def anthropic_service(
        partial_key: str | None = None,
        service_url: str | None = None,
        client_id: str | None = None,
        transport: Transport | None = None,
    ) -> AnthropicService:
        """Create an Anthropic service. Raises ValueError if the key or URL is missing."""
        return AnthropicService(_request_factory(partial_key, service_url, client_id), transport)
