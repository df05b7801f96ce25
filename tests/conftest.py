"""Pytest fixtures for party service tests."""

import pytest

from party_services.integrations.clients.mocks.rest_bridge import MockRestBridge
from party_services.messages import MessageCollector


@pytest.fixture
def bridge():
    """In-memory bridge that answers 501 unless a response is scripted."""
    return MockRestBridge()


@pytest.fixture
def messages():
    return MessageCollector()
