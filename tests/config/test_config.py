"""
Tests for Config
"""

import pytest

from aiproxy.config import Config
from aiproxy.config.config import _get_env_var, _get_float_env, _get_int_env


class TestEnvHelpers:
    """Test the env var readers"""

    def test_get_env_var_strips(self, monkeypatch):
        monkeypatch.setenv("AIPROXY_TEST_VAR", "  value  ")
        assert _get_env_var("AIPROXY_TEST_VAR") == "value"

    def test_get_env_var_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv("AIPROXY_TEST_VAR", "   ")
        assert _get_env_var("AIPROXY_TEST_VAR", "fallback") == "fallback"

    def test_get_env_var_unset(self, monkeypatch):
        monkeypatch.delenv("AIPROXY_TEST_VAR", raising=False)
        assert _get_env_var("AIPROXY_TEST_VAR") is None

    @pytest.mark.parametrize(
        "raw,expected",
        [("12", 12), ("abc", 30), ("0", 30), ("-5", 30), ("", 30)],
    )
    def test_get_int_env(self, monkeypatch, raw, expected):
        monkeypatch.setenv("AIPROXY_TEST_INT", raw)
        assert _get_int_env("AIPROXY_TEST_INT", 30) == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [("2.5", 2.5), ("nope", 10.0), ("0", 10.0)],
    )
    def test_get_float_env(self, monkeypatch, raw, expected):
        monkeypatch.setenv("AIPROXY_TEST_FLOAT", raw)
        assert _get_float_env("AIPROXY_TEST_FLOAT", 10.0) == expected


class TestValidateCriticalEnvVars:
    """Test validate_critical_env_vars"""

    def test_all_present(self, monkeypatch):
        monkeypatch.setattr(Config, "AIPROXY_PARTIAL_KEY", "key")
        monkeypatch.setattr(Config, "AIPROXY_SERVICE_URL", "https://api.aiproxy.test/x")

        assert Config.validate_critical_env_vars() == (True, [])

    def test_missing_reported(self, monkeypatch):
        monkeypatch.setattr(Config, "AIPROXY_PARTIAL_KEY", None)
        monkeypatch.setattr(Config, "AIPROXY_SERVICE_URL", "")

        is_valid, missing = Config.validate_critical_env_vars()

        assert not is_valid
        assert missing == ["AIPROXY_PARTIAL_KEY", "AIPROXY_SERVICE_URL"]


class TestEnvironmentDetection:
    def test_development_flag_tracks_app_env(self):
        assert Config.IS_DEVELOPMENT == (Config.APP_ENV == "development")

    @pytest.mark.parametrize("flag", ["IS_PRODUCTION", "IS_TESTING"])
    def test_no_unread_environment_flags(self, flag):
        """Test that only environment flags the SDK reads are exposed"""
        assert not hasattr(Config, flag)


class TestDefaults:
    def test_fal_defaults(self):
        assert Config.FAL_QUEUE_HOST
        assert Config.FAL_POLL_ATTEMPTS > 0
        assert Config.FAL_POLL_INTERVAL_SECONDS > 0
