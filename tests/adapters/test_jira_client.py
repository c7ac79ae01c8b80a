from __future__ import annotations

import asyncio
import base64

import httpx
import pytest

from tests.support.http import make_client_factory
from tests.support.values import DOMAIN
from ticketgate.adapters.jira import JiraClient, basic_authorization, parse_error_text
from ticketgate.config.jira import JiraConfig
from ticketgate.domain.verification import Found, NotFound, TransportError

CREDENTIAL = "me@example.com:jira-token"


def _client(handler: object) -> JiraClient:
    return JiraClient(
        config=JiraConfig(domain=DOMAIN, token=CREDENTIAL),
        client_factory=make_client_factory(handler),  # type: ignore[arg-type]
    )


def test_found_issue_request_shape() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "10001", "key": "ABC-123", "fields": {}})

    outcome = asyncio.run(_client(handler).verify("ABC-123"))

    assert outcome == Found(ticket="ABC-123")
    request = seen[0]
    assert request.method == "GET"
    assert str(request.url) == f"https://{DOMAIN}/rest/api/3/issue/ABC-123"
    assert request.headers["Accept"] == "application/json"
    expected = base64.b64encode(CREDENTIAL.encode()).decode()
    assert request.headers["Authorization"] == f"Basic {expected}"


def test_ticket_is_quoted_into_one_path_segment() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(404, json={})

    asyncio.run(_client(handler).verify("ABC/1?X"))

    assert str(seen[0].url) == f"https://{DOMAIN}/rest/api/3/issue/ABC%2F1%3FX"
    assert seen[0].url.query == b""


def test_not_found_issue() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(
            404, json={"errorMessages": ["Issue does not exist"], "errors": {}}
        )

    outcome = asyncio.run(_client(handler).verify("ABC-404"))

    assert outcome == NotFound(ticket="ABC-404")


@pytest.mark.parametrize("status", [401, 403, 500])
def test_other_status_is_transport_error_with_raw_body(status: int) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(status, text="nope")

    outcome = asyncio.run(_client(handler).verify("ABC-1"))

    assert outcome == TransportError(ticket="ABC-1", detail="nope", status_code=status)


def test_network_failure_is_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    outcome = asyncio.run(_client(handler).verify("ABC-1"))

    assert isinstance(outcome, TransportError)
    assert "connection refused" in outcome.detail
    assert outcome.status_code is None


def test_client_is_a_ticket_lookup() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        del request
        return httpx.Response(200, json={"id": "1", "key": "ABC-1"})

    assert asyncio.run(_client(handler)("ABC-1")) == Found(ticket="ABC-1")


def test_credential_is_not_in_repr() -> None:
    config = JiraConfig(domain=DOMAIN, token=CREDENTIAL)

    assert CREDENTIAL not in repr(config)


def test_basic_authorization_encodes_raw_credential() -> None:
    assert basic_authorization("user:pass") == "Basic dXNlcjpwYXNz"


def test_parse_error_text() -> None:
    assert parse_error_text('{"errorMessages": ["gone"], "errors": {"key": "bad"}}') == (
        "gone; key: bad"
    )
    assert parse_error_text("<html>") is None
