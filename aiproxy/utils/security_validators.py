"""
Validation helpers for provider URLs and log output.

- Host pinning for provider-issued polling/result URLs
- Log injection protection for response bodies and identifiers
"""

import logging

import httpx

logger = logging.getLogger(__name__)


def is_expected_host(url: str | httpx.URL, expected_host: str) -> bool:
    """Check that a provider-issued URL points at the expected host.

    The comparison is exact (no subdomain matching): queue URLs are pinned to
    the single host the provider documents.

    Args:
        url: URL returned by the provider
        expected_host: Host the URL must be on (e.g., 'queue.fal.run')

    Returns:
        True if the URL's host matches, False otherwise
    """
    try:
        hostname = httpx.URL(str(url)).host
    except httpx.InvalidURL:
        logger.warning(f"Invalid provider URL: {sanitize_for_logging(str(url))}")
        return False

    if hostname != expected_host.lower():
        logger.warning(
            f"Provider URL host not allowed: {sanitize_for_logging(hostname)}. "
            f"Expected: {expected_host}"
        )
        return False

    return True


def sanitize_for_logging(value: str) -> str:
    """Sanitize provider-controlled strings for safe logging.

    Prevents log injection by removing newlines and other control characters
    that could be used to forge log entries.

    Args:
        value: String value to sanitize (can be None)

    Returns:
        Sanitized string with newlines replaced by spaces
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    # Replace newlines and carriage returns with spaces to prevent log injection
    return value.replace("\n", " ").replace("\r", " ").replace("\x00", "")
