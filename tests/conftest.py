"""
Pytest configuration and fixtures for request-client tests.
"""

import pytest

from request_client import Client


@pytest.fixture
def base_url():
    """Base URL for testing."""
    return "https://api.example.com"


@pytest.fixture
def client(base_url):
    """Client instance with default options."""
    client = Client(base_url)
    yield client
    client.close()
