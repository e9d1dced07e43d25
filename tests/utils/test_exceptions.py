"""
Tests for the exception taxonomy
"""

import logging

import pytest

from aiproxy.models.queue_models import ErrorEnvelope
from aiproxy.utils.exceptions import (
    AIProxyError,
    DecodeError,
    MissingResultURLError,
    MissingStatusURLError,
    RetryLimitReachedError,
    TransportFailureError,
    UnexpectedDomainError,
    UnsuccessfulRequestError,
    ensure_successful_response,
)


class TestEnsureSuccessfulResponse:
    """Test the status code gate"""

    @pytest.mark.parametrize("status_code", [200, 201, 202, 204, 299])
    def test_success_passes(self, status_code):
        ensure_successful_response(status_code, b"whatever")

    @pytest.mark.parametrize("status_code", [300, 301, 400, 401, 404, 422, 429, 500, 502, 503, 599])
    def test_failure_raises_with_verbatim_body(self, status_code):
        body = '{"detail":"nope"}\n  trailing'

        with pytest.raises(UnsuccessfulRequestError) as exc_info:
            ensure_successful_response(status_code, body.encode("utf-8"))

        assert exc_info.value.status_code == status_code
        assert exc_info.value.response_body == body

    def test_non_utf8_body_becomes_empty(self):
        with pytest.raises(UnsuccessfulRequestError) as exc_info:
            ensure_successful_response(500, b"\xff\xfe\x00garbage")

        assert exc_info.value.response_body == ""

    def test_envelope(self):
        with pytest.raises(UnsuccessfulRequestError) as exc_info:
            ensure_successful_response(418, b"teapot")

        assert exc_info.value.envelope == ErrorEnvelope(http_status_code=418, raw_body="teapot")

    def test_error_record_carries_status_code(self, caplog):
        """Test that the failure log exposes the status code as structured context"""
        caplog.set_level(logging.ERROR, logger="aiproxy.utils.exceptions")

        with pytest.raises(UnsuccessfulRequestError):
            ensure_successful_response(503, b"unavailable")

        (record,) = [r for r in caplog.records if r.name == "aiproxy.utils.exceptions"]
        assert record.status_code == 503


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            TransportFailureError("x"),
            UnsuccessfulRequestError(500, "x"),
            MissingStatusURLError(),
            MissingResultURLError(),
            UnexpectedDomainError("https://a/b", "queue.fal.run"),
            RetryLimitReachedError(30),
            DecodeError("x"),
        ],
    )
    def test_all_derive_from_base(self, error):
        assert isinstance(error, AIProxyError)

    def test_retry_limit_message(self):
        error = RetryLimitReachedError(30)
        assert error.attempts == 30
        assert "30" in str(error)

    def test_unexpected_domain_fields(self):
        error = UnexpectedDomainError("https://other.host/x", "queue.fal.run")
        assert error.url == "https://other.host/x"
        assert error.expected_host == "queue.fal.run"
