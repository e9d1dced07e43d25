from unittest.mock import AsyncMock, patch

import pytest

from aiproxy.models.queue_models import PollPolicy
from aiproxy.services.job_queue import JobQueueClient
from tests.helpers.mocks import FAL_QUEUE_HOST, FakeTransport, make_request_factory


@pytest.fixture
def request_factory():
    return make_request_factory()


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def queue_client(transport, request_factory):
    """Job queue client pinned to Fal's queue host, backed by the fake transport"""
    return JobQueueClient(
        transport=transport,
        request_factory=request_factory,
        expected_host=FAL_QUEUE_HOST,
        default_policy=PollPolicy(max_attempts=30),
    )


@pytest.fixture
def mock_sleep():
    """
    Replace asyncio.sleep so poll loops don't wait.

    job_queue calls asyncio.sleep through the module, so the patch applies to
    every caller of asyncio.sleep while the fixture is active.

    Yields the AsyncMock so tests can assert on sleep counts and durations.
    """
    with patch("aiproxy.services.job_queue.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep
