"""Tests for the single-attempt transport."""
from __future__ import annotations

import base64

import pytest
import requests

from payrex.core.errors import RequestTimeoutError, TransportError
from payrex.core.transport import Transport, build_url


class TestBuildUrl:
    @pytest.mark.parametrize(
        "base, path",
        [
            ("https://api.example.com/v1", "/customers"),
            ("https://api.example.com/v1/", "/customers"),
            ("https://api.example.com/v1/", "customers"),
            ("https://api.example.com/v1", "customers"),
        ],
    )
    def test_exactly_one_separator(self, base, path):
        assert build_url(base, path) == "https://api.example.com/v1/customers"


class TestHeaders:
    def test_basic_auth_uses_key_as_username(self, config, session):
        transport = Transport(config, session=session)
        expected = base64.b64encode(b"sk_test_123:").decode("ascii")
        assert transport.headers_for("GET")["Authorization"] == f"Basic {expected}"

    def test_user_agent_and_accept(self, config, session):
        headers = Transport(config, session=session).headers_for("GET")
        assert headers["User-Agent"] == config.user_agent
        assert headers["Accept"] == "application/json"

    def test_content_type_only_for_bodied_methods(self, config, session):
        transport = Transport(config, session=session)
        assert "Content-Type" not in transport.headers_for("GET")
        assert "Content-Type" not in transport.headers_for("DELETE")
        for method in ("POST", "PATCH", "PUT"):
            assert (
                transport.headers_for(method)["Content-Type"]
                == "application/x-www-form-urlencoded"
            )


class TestSend:
    def test_post_sends_form_and_timeout(self, config, session, respond):
        session.queue(respond(200, {}))
        Transport(config, session=session).send("post", "/customers", form=[("name", "Juan")])

        call = session.calls[0]
        assert call.method == "POST"
        assert call.url == "https://api.payrexhq.com/v1/customers"
        assert call.data == [("name", "Juan")]
        assert call.params is None
        assert call.kwargs["timeout"] == config.timeout

    def test_get_sends_query_without_body(self, config, session, respond):
        session.queue(respond(200, {}))
        Transport(config, session=session).send(
            "GET", "/customers", form=[("ignored", "x")], query=[("limit", "5")]
        )

        call = session.calls[0]
        assert call.data is None
        assert call.params == [("limit", "5")]

    def test_non_success_responses_are_returned(self, config, session, respond):
        session.queue(respond(500, "boom"))
        response = Transport(config, session=session).send("GET", "/customers")
        assert response.status_code == 500

    def test_timeout_carries_configured_timeout(self, config, session):
        session.queue(requests.Timeout("read timed out"))
        with pytest.raises(RequestTimeoutError) as excinfo:
            Transport(config, session=session).send("GET", "/customers")
        assert excinfo.value.timeout == config.timeout

    def test_connection_error_is_connect_class(self, config, session):
        session.queue(requests.ConnectionError("refused"))
        with pytest.raises(TransportError) as excinfo:
            Transport(config, session=session).send("GET", "/customers")
        assert excinfo.value.connect is True

    def test_other_request_errors_are_not_connect_class(self, config, session):
        session.queue(requests.TooManyRedirects("loop"))
        with pytest.raises(TransportError) as excinfo:
            Transport(config, session=session).send("GET", "/customers")
        assert excinfo.value.connect is False
