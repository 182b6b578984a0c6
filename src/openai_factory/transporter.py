# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request transporter built from a TransportConfig."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from .errors import (
    ApiError,
    ErrorCategory,
    TransporterError,
    UnserializableResponse,
    categorize_exception,
    error_category_to_reason,
)
from .http.client import HttpClient
from .http.models import HttpRequest, HttpResponse
from .http.url import with_query
from .models.transporter import BaseUri, Headers, QueryParams, TransportConfig

logger = logging.getLogger(__name__)


def _response_category(response: HttpResponse) -> ErrorCategory:
    raw = response.meta.get("error_category")
    try:
        return ErrorCategory(raw) if raw else ErrorCategory.UNKNOWN_ERROR
    except ValueError:
        return ErrorCategory.UNKNOWN_ERROR


class HttpTransporter:
    """Sends JSON requests below a base URI with the resolved headers and query params."""

    def __init__(
        self,
        http_client: HttpClient,
        base_uri: BaseUri,
        headers: Headers,
        query_params: QueryParams,
    ):
        self._http_client = http_client
        self._base_uri = base_uri
        self._headers = headers
        self._query_params = query_params

    @classmethod
    def from_config(cls, config: TransportConfig) -> HttpTransporter:
        return cls(config.http_client, config.base_uri, config.headers, config.query_params)

    @property
    def base_uri(self) -> BaseUri:
        return self._base_uri

    @property
    def headers(self) -> Headers:
        return self._headers

    @property
    def query_params(self) -> QueryParams:
        return self._query_params

    def build_request(
        self,
        method: str,
        resource: str,
        *,
        payload: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> HttpRequest:
        """Assemble the request for ``resource``; performs no I/O."""
        query = self._query_params.to_dict()
        query.update(params or {})
        url = with_query(self._base_uri.join(resource), query)
        body = json.dumps(payload) if payload is not None else None
        return HttpRequest(url=url, method=method.upper(), headers=self._headers.to_dict(), body=body)

    def request(
        self,
        method: str,
        resource: str,
        *,
        payload: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> HttpResponse:
        """Send a request and return the raw response; raises TransporterError when nothing came back."""
        request = self.build_request(method, resource, payload=payload, params=params)
        logger.debug("Sending %s %s", request.method, request.url)
        try:
            response = self._http_client.request(request)
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            raise TransporterError(f"{error_category_to_reason(category)}: {exc}", category) from exc

        if not response.ok and response.status_code is None:
            category = _response_category(response)
            message = response.error_message or error_category_to_reason(category)
            raise TransporterError(message, category)
        return response

    def request_object(
        self,
        method: str,
        resource: str,
        *,
        payload: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request and decode the JSON object it returns."""
        response = self.request(method, resource, payload=payload, params=params)
        status = response.status_code

        try:
            data = json.loads(response.text or response.content.decode("utf-8", errors="replace"))
        except ValueError as exc:
            if status is not None and status >= 400:
                raise ApiError(f"HTTP {status} with undecodable body", status_code=status) from exc
            raise UnserializableResponse(f"Response from {response.url or resource} is not valid JSON") from exc

        if isinstance(data, dict) and data.get("error"):
            raise ApiError.from_payload(data, status)
        if status is not None and status >= 400:
            raise ApiError(f"HTTP {status}", status_code=status)
        if not isinstance(data, dict):
            raise UnserializableResponse(f"Expected a JSON object, got {type(data).__name__}")
        return data


__all__ = ["HttpTransporter"]
