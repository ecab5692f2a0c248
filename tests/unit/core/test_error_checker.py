"""
Tests for error checkers.
"""

from types import SimpleNamespace

import pytest
import responses

from request_client import Client, HTTPError, accepting_status, default_error_checker, with_error_checker
from request_client.core.response import Response


def make_response(status_code, content=b""):
    return Response(SimpleNamespace(status_code=status_code, url="https://api.example.com/x"), content)


class TestDefaultErrorChecker:
    """Success iff 200 <= status < 300."""

    @pytest.mark.parametrize("status", [200, 204, 299])
    def test_success(self, status):
        assert default_error_checker(None, make_response(status)) is None

    @pytest.mark.parametrize("status", [100, 199, 300, 404, 500])
    def test_error(self, status):
        error = default_error_checker(None, make_response(status))

        assert isinstance(error, HTTPError)
        assert error.status_code == status
        assert error.url == "https://api.example.com/x"


class TestAcceptingStatus:
    """accepting_status() widens the success range."""

    def test_accepted_codes_pass(self):
        checker = accepting_status(404, 409)

        assert checker(None, make_response(404)) is None
        assert checker(None, make_response(409)) is None

    def test_other_codes_use_base(self):
        checker = accepting_status(404)

        assert checker(None, make_response(200)) is None
        assert isinstance(checker(None, make_response(500)), HTTPError)

    def test_custom_base(self):
        def strict(request, response):
            return None if response.status_code == 200 else ValueError("not 200")

        checker = accepting_status(202, base=strict)

        assert checker(None, make_response(202)) is None
        assert isinstance(checker(None, make_response(201)), ValueError)

    @responses.activate
    def test_client_returns_404_response(self, base_url):
        responses.add(responses.GET, f"{base_url}/users/9", json={"error": "not found"}, status=404)

        with Client(base_url, with_error_checker(accepting_status(404))) as client:
            response = client.get("/users/9")

        assert response.status_code == 404
        assert not response.ok
        assert response.json() == {"error": "not found"}
