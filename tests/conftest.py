"""
Pytest configuration and shared fixtures
"""

from unittest.mock import Mock

import pytest
import requests

from firetruck.config import ClientConfig, Config


@pytest.fixture
def test_config():
    """Config object with the same values as the shipped api_config.yaml"""
    return Config(
        {
            "api": {
                "base_url": "https://api.firetruck.io",
                "version": "v1",
                "timeout": 10,
                "verify": True,
                "headers": {
                    "Accept": "application/vnd.api+json",
                    "Content-Type": "application/vnd.api+json",
                    "User-Agent": "Firetruck/API/Client",
                },
            }
        }
    )


@pytest.fixture
def client_config(test_config):
    return ClientConfig.from_config("test-key-123", test_config)


@pytest.fixture
def make_response():
    """
    Factory for mock requests.Response objects

    Usage:
        response = make_response(404, {"errors": [...]})
    """

    def _make(status_code=200, json_body=None):
        response = Mock(spec=requests.Response)
        response.status_code = status_code
        response.json.return_value = json_body
        return response

    return _make


@pytest.fixture
def mock_http_client(make_response):
    """Mock HttpClient returning a 200 response with an empty JSON object"""
    client = Mock()
    client.request.return_value = make_response(200, {})
    return client
