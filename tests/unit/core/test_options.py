"""
Tests for client options.
"""

import httpx
import pytest
import requests

from request_client import (
    Client,
    ConfigurationError,
    TimeoutConfig,
    TokenAuth,
    default_error_checker,
    json_unmarshaler,
    with_bearer_token,
    with_content_type,
    with_error_checker,
    with_timeout,
    with_token,
    with_transport,
    with_unmarshaler,
    with_user_agent,
    yaml_unmarshaler,
)


class TestOptionOrdering:
    """Options apply left to right."""

    def test_last_user_agent_wins(self, base_url):
        client = Client(base_url, with_user_agent("a/1"), with_user_agent("b/2"))
        assert client.user_agent == "b/2"
        client.close()

    def test_last_timeout_wins(self, base_url):
        client = Client(base_url, with_timeout(5), with_timeout((1, 2)))
        assert client.timeout == TimeoutConfig(connect=1, read=2)
        client.close()

    def test_no_options(self, client):
        assert client._error_checker is default_error_checker
        assert client._unmarshaler is json_unmarshaler


class TestHookOptions:
    """Error checker and unmarshaler options."""

    def test_none_restores_default_error_checker(self, base_url):
        client = Client(base_url, with_error_checker(lambda req, resp: None), with_error_checker(None))
        assert client._error_checker is default_error_checker
        client.close()

    def test_none_restores_default_unmarshaler(self, base_url):
        client = Client(base_url, with_unmarshaler(yaml_unmarshaler), with_unmarshaler(None))
        assert client._unmarshaler is json_unmarshaler
        client.close()

    def test_non_callable_error_checker_rejected(self, base_url):
        with pytest.raises(ConfigurationError):
            Client(base_url, with_error_checker("not callable"))

    def test_non_callable_unmarshaler_rejected(self, base_url):
        with pytest.raises(ConfigurationError):
            Client(base_url, with_unmarshaler(42))


class TestValueOptions:
    """Options that carry plain values."""

    def test_empty_bearer_token_accepted(self, base_url):
        client = Client(base_url, with_bearer_token(""))
        assert client.auth == TokenAuth("")
        client.close()

    def test_empty_token_accepted(self, base_url):
        client = Client(base_url, with_token(""))
        assert client.auth == TokenAuth("", scheme=None)
        client.close()

    @pytest.mark.parametrize("timeout", [0, -1, (0, 10), (10, -5), (1,), (1, 2, 3), "5", ("1", 2), True])
    def test_invalid_timeout_rejected(self, base_url, timeout):
        with pytest.raises(ConfigurationError):
            Client(base_url, with_timeout(timeout))

    def test_content_type_none(self, base_url):
        client = Client(base_url, with_content_type(None))
        assert client.content_type is None
        client.close()

    def test_wrong_transport_type_rejected(self, base_url):
        with pytest.raises(ConfigurationError, match="requests.Session"):
            Client(base_url, with_transport(httpx.Client()))

    def test_transport_accepted(self, base_url):
        session = requests.Session()
        client = Client(base_url, with_transport(session))
        assert client.session is session
        assert client.owns_transport is False
        session.close()
