# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx

from openai_factory.config import HttpSettings
from openai_factory.factory import Factory
from openai_factory.http.adapters import StubHttpClient
from openai_factory.http.headers import find_header, upsert_header
from openai_factory.http.httpx_client import HttpxClient
from openai_factory.http.models import HttpRequest, HttpResponse
from openai_factory.http.url import ensure_scheme, join_url, with_query


class FakeHttpxClient:
    def __init__(self):
        self.calls = []
        self.closed = False

    def request(self, method, url, headers=None, content=None, timeout=None, follow_redirects=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "content": content,
                "timeout": timeout,
                "follow_redirects": follow_redirects,
            }
        )
        return httpx.Response(
            201,
            headers={"Content-Type": "application/json"},
            content=b'{"id": "x"}',
            request=httpx.Request(method, url),
        )

    def close(self):
        self.closed = True


def test_httpx_client_success():
    fake = FakeHttpxClient()
    client = HttpxClient(HttpSettings(user_agent="UA/1.0", timeout=4.0), client=fake)
    resp = client.request(HttpRequest(url="https://example/v1/files", method="POST", headers={"X": "1"}, body="{}", allow_redirects=False))

    assert resp.ok is True
    assert resp.status_code == 201
    assert resp.text == '{"id": "x"}'
    assert resp.content == b'{"id": "x"}'
    assert resp.url == "https://example/v1/files"
    assert fake.calls[0]["headers"] == {"X": "1", "User-Agent": "UA/1.0"}
    assert fake.calls[0]["timeout"] == 4.0
    assert fake.calls[0]["follow_redirects"] is False

    client.close()
    assert fake.closed is True


def test_httpx_client_keeps_caller_user_agent_and_timeout():
    fake = FakeHttpxClient()
    client = HttpxClient(HttpSettings(user_agent="UA/1.0"), client=fake)
    client.request(HttpRequest(url="https://example", headers={"User-Agent": "mine"}, timeout=1.5))
    assert fake.calls[0]["headers"]["User-Agent"] == "mine"
    assert fake.calls[0]["timeout"] == 1.5
    assert fake.calls[0]["follow_redirects"] is True


def test_httpx_client_error_becomes_failed_response():
    class ErrorClient(FakeHttpxClient):
        def request(self, *_, **__):
            raise httpx.ConnectTimeout("boom")

    resp = HttpxClient(HttpSettings(), client=ErrorClient()).request(HttpRequest(url="https://example"))
    assert resp.ok is False
    assert resp.status_code is None
    assert resp.error_message == "boom"
    assert resp.error_type == "ConnectTimeout"
    assert resp.meta["error_category"] == "TIMEOUT"


def test_httpx_client_builds_underlying_client_from_settings(monkeypatch):
    captured = {}

    class RecordingClient(FakeHttpxClient):
        def __init__(self, follow_redirects, timeout, verify):
            super().__init__()
            captured.update(follow_redirects=follow_redirects, timeout=timeout, verify=verify)

    monkeypatch.setattr(httpx, "Client", RecordingClient)
    HttpxClient(HttpSettings(timeout=2.0, allow_redirects=False, verify_ssl=False))
    assert captured == {"follow_redirects": False, "timeout": 2.0, "verify": False}


def test_stub_http_client_returns_registered_responses():
    stub = StubHttpClient()
    custom_resp = HttpResponse(ok=True, status_code=200, text="hello")
    stub.add("http://example", custom_resp)
    result = stub.request(HttpRequest(url="http://example"))
    assert result.text == "hello"
    missing = stub.request(HttpRequest(url="http://missing"))
    assert missing.ok is False
    assert stub.requests[0].url == "http://example"


def test_header_helpers():
    pairs = (("Content-Type", "application/json"), ("X-Trace", "abc"))
    assert find_header(pairs, "content-type") == "application/json"
    assert find_header(pairs, "X-TRACE") == "abc"
    assert find_header(pairs, "missing") is None

    pairs = upsert_header((("Content-Type", "a"), ("X", "1")), "content-type", "b")
    assert pairs == (("content-type", "b"), ("X", "1"))
    assert upsert_header(pairs, "Y", "2")[-1] == ("Y", "2")


def test_url_helpers():
    assert ensure_scheme("api.openai.com/v1") == "https://api.openai.com/v1"
    assert ensure_scheme("http://localhost") == "http://localhost"
    assert join_url("https://host/v1/", "models") == "https://host/v1/models"
    assert join_url("https://host", "") == "https://host"
    assert with_query("https://host/v1?a=1", {"b": 2}) == "https://host/v1?a=1&b=2"
    assert with_query("https://host/v1", {}) == "https://host/v1"


def test_httpx_client_follows_settings_when_request_leaves_redirects_unset():
    fake = FakeHttpxClient()
    client = HttpxClient(HttpSettings(allow_redirects=False), client=fake)
    client.request(HttpRequest(url="https://example"))
    client.request(HttpRequest(url="https://example", allow_redirects=True))
    assert [call["follow_redirects"] for call in fake.calls] == [False, True]


def test_redirects_disabled_in_env_apply_to_factory_built_clients(monkeypatch):
    monkeypatch.setenv("OPENAI_FACTORY_HTTP_REDIRECTS", "false")
    created = []

    class RecordingClient(FakeHttpxClient):
        def __init__(self, follow_redirects, timeout, verify):  # noqa: ARG002
            super().__init__()
            self.follow_redirects = follow_redirects
            created.append(self)

    monkeypatch.setattr(httpx, "Client", RecordingClient)
    with Factory().with_api_key("sk-1").make() as client:
        result = client.transporter().request_object("GET", "models")

    assert result == {"id": "x"}
    assert created[0].follow_redirects is False
    assert created[0].calls[0]["follow_redirects"] is False
    assert created[0].calls[0]["url"] == "https://api.openai.com/v1/models"
    assert created[0].closed is True
