# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import pytest

from openai_factory.errors import ApiError, ErrorCategory, TransporterError, UnserializableResponse
from openai_factory.factory import Factory
from openai_factory.http.adapters import StubHttpClient
from openai_factory.http.models import HttpRequest, HttpResponse

MODELS_URL = "https://api.openai.com/v1/models"


def _transporter(stub, **query):
    factory = Factory().with_http_client(stub).with_api_key("sk-1")
    for name, value in query.items():
        factory.with_query_param(name, value)
    return factory.make().transporter()


def test_build_request_applies_resolved_config():
    transporter = _transporter(StubHttpClient(), **{"api-version": "2024-06-01"})
    request = transporter.build_request("post", "/chat/completions", payload={"model": "m"}, params={"stream": "false"})

    assert request.method == "POST"
    assert request.url == "https://api.openai.com/v1/chat/completions?api-version=2024-06-01&stream=false"
    assert request.headers == {"Content-Type": "application/json", "Authorization": "Bearer sk-1"}
    assert json.loads(request.body) == {"model": "m"}


def test_per_call_params_override_configured_params():
    transporter = _transporter(StubHttpClient(), limit="10")
    request = transporter.build_request("GET", "models", params={"limit": "5"})
    assert request.url == f"{MODELS_URL}?limit=5"
    assert request.body is None


def test_request_object_decodes_json():
    stub = StubHttpClient({MODELS_URL: HttpResponse(ok=True, status_code=200, text='{"object": "list", "data": []}')})
    result = _transporter(stub).request_object("GET", "models")

    assert result == {"object": "list", "data": []}
    assert stub.requests[0].headers["Authorization"] == "Bearer sk-1"


def test_request_object_raises_api_error_for_error_payload():
    body = json.dumps({"error": {"message": "Incorrect API key provided", "type": "invalid_request_error", "code": "invalid_api_key"}})
    stub = StubHttpClient({MODELS_URL: HttpResponse(ok=True, status_code=401, text=body)})

    with pytest.raises(ApiError) as excinfo:
        _transporter(stub).request_object("GET", "models")
    assert str(excinfo.value) == "Incorrect API key provided"
    assert excinfo.value.error_type == "invalid_request_error"
    assert excinfo.value.code == "invalid_api_key"
    assert excinfo.value.status_code == 401


def test_request_object_raises_for_non_json():
    stub = StubHttpClient({MODELS_URL: HttpResponse(ok=True, status_code=200, text="<html>")})
    with pytest.raises(UnserializableResponse):
        _transporter(stub).request_object("GET", "models")

    stub.add(MODELS_URL, HttpResponse(ok=True, status_code=502, text="Bad gateway"))
    with pytest.raises(ApiError) as excinfo:
        _transporter(stub).request_object("GET", "models")
    assert excinfo.value.status_code == 502


def test_transport_failure_raises_transporter_error_with_category():
    failed = HttpResponse(ok=False, error_message="timed out", error_type="ReadTimeout", meta={"error_category": "TIMEOUT"})
    stub = StubHttpClient({MODELS_URL: failed})

    with pytest.raises(TransporterError) as excinfo:
        _transporter(stub).request("GET", "models")
    assert excinfo.value.category is ErrorCategory.TIMEOUT
    assert str(excinfo.value) == "timed out"


def test_unstubbed_url_is_a_transport_failure():
    with pytest.raises(TransporterError) as excinfo:
        _transporter(StubHttpClient()).request("GET", "files")
    assert excinfo.value.category is ErrorCategory.UNKNOWN_ERROR


def test_client_exceptions_are_wrapped():
    class RaisingClient:
        def request(self, request: HttpRequest) -> HttpResponse:  # noqa: ARG002
            raise ConnectionResetError("reset")

        def close(self) -> None:
            return None

    transporter = Factory().with_http_client(RaisingClient()).make().transporter()
    with pytest.raises(TransporterError) as excinfo:
        transporter.request("GET", "models")
    assert excinfo.value.category is ErrorCategory.CONNECTION_ERROR
    assert isinstance(excinfo.value.__cause__, ConnectionResetError)


def test_http_error_status_is_returned_by_request():
    stub = StubHttpClient({MODELS_URL: HttpResponse(ok=False, status_code=500, text="{}")})
    response = _transporter(stub).request("GET", "models")
    assert response.status_code == 500
