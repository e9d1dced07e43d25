import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _get_env_var(name: str, default: str | None = None, *, strip: bool = True) -> str | None:
    """
    Fetch an environment variable with optional whitespace trimming.

    Args:
        name: Environment variable to look up.
        default: Value to return when the env var is unset or empty.
        strip: Whether to strip leading/trailing whitespace (default: True).

    Returns:
        The normalized string value or the provided default when empty.
    """
    value = os.environ.get(name)
    if value is None:
        return default

    if strip:
        value = value.strip()

    return value or default


def _get_int_env(name: str, default: int) -> int:
    """Read a positive integer env var, falling back to the default on bad input."""
    value = _get_env_var(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _get_float_env(name: str, default: float) -> float:
    """Read a positive float env var, falling back to the default on bad input."""
    value = _get_env_var(name)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


class Config:
    """Configuration class for the SDK"""

    # Environment Detection
    APP_ENV = os.environ.get("APP_ENV", "development")  # development, staging, production
    IS_DEVELOPMENT = APP_ENV == "development"

    LOG_LEVEL = (_get_env_var("LOG_LEVEL", "INFO") or "INFO").upper()

    # AIProxy Configuration
    # The partial key and service URL are issued per-service in the AIProxy dashboard
    AIPROXY_PARTIAL_KEY = _get_env_var("AIPROXY_PARTIAL_KEY")
    AIPROXY_SERVICE_URL = _get_env_var("AIPROXY_SERVICE_URL")
    AIPROXY_CLIENT_ID = _get_env_var("AIPROXY_CLIENT_ID")

    # Fal.ai queue configuration
    FAL_QUEUE_HOST = _get_env_var("FAL_QUEUE_HOST", "queue.fal.run")
    FAL_POLL_ATTEMPTS = _get_int_env("FAL_POLL_ATTEMPTS", 30)
    FAL_POLL_INTERVAL_SECONDS = _get_int_env("FAL_POLL_INTERVAL_SECONDS", 1)

    # HTTP transport configuration
    HTTP_CONNECT_TIMEOUT = _get_float_env("HTTP_CONNECT_TIMEOUT", 10.0)
    HTTP_READ_TIMEOUT = _get_float_env("HTTP_READ_TIMEOUT", 120.0)
    HTTP_MAX_CONNECTIONS = _get_int_env("HTTP_MAX_CONNECTIONS", 100)
    HTTP_MAX_KEEPALIVE_CONNECTIONS = _get_int_env("HTTP_MAX_KEEPALIVE_CONNECTIONS", 20)

    @classmethod
    def validate_critical_env_vars(cls) -> tuple[bool, list[str]]:
        """
        Validate that all critical environment variables are set.

        Returns:
            tuple: (is_valid, missing_vars)
                - is_valid: bool indicating if all critical vars are present
                - missing_vars: list of missing variable names
        """
        critical_vars = {
            "AIPROXY_PARTIAL_KEY": cls.AIPROXY_PARTIAL_KEY,
            "AIPROXY_SERVICE_URL": cls.AIPROXY_SERVICE_URL,
        }

        missing = [name for name, value in critical_vars.items() if not value]
        is_valid = len(missing) == 0

        return is_valid, missing
