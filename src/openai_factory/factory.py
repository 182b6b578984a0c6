# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Fluent builder that assembles a configured Client.

Setters only record values and never raise; everything is validated in ``make()``,
which resolves headers, base URI, query params and the HTTP client (in that order)
and returns a Client over a fresh, immutable TransportConfig.
"""

from __future__ import annotations

import logging

from .client import Client
from .config import DEFAULT_BASE_URL, ClientSettings, load_client_settings
from .discovery import HttpClientDiscovery, default_discovery
from .http.client import HttpClient
from .models.credentials import ApiKey
from .models.transporter import BaseUri, Headers, QueryParams, QueryValue, TransportConfig

logger = logging.getLogger(__name__)


class Factory:
    """Collects optional client configuration; call ``make()`` to build a Client."""

    def __init__(self, discovery: HttpClientDiscovery | None = None):
        self._api_key: str | None = None
        self._organization: str | None = None
        self._http_client: HttpClient | None = None
        self._base_url: str | None = None
        self._headers: dict[str, str] = {}
        self._query_params: dict[str, QueryValue] = {}
        self._discovery = discovery

    @classmethod
    def from_env(
        cls,
        settings: ClientSettings | None = None,
        *,
        discovery: HttpClientDiscovery | None = None,
    ) -> Factory:
        """Start from OPENAI_API_KEY / OPENAI_ORGANIZATION / OPENAI_BASE_URL."""
        settings = settings or load_client_settings()
        factory = cls(discovery)
        if settings.api_key is not None:
            factory.with_api_key(settings.api_key)
        if settings.organization is not None:
            factory.with_organization(settings.organization)
        if settings.base_url is not None:
            factory.with_base_url(settings.base_url)
        return factory

    def with_api_key(self, api_key: str) -> Factory:
        """Sets the API key for the requests."""
        self._api_key = api_key
        return self

    def with_organization(self, organization: str | None) -> Factory:
        """Sets the organization for the requests; None clears it."""
        self._organization = organization
        return self

    def with_http_client(self, client: HttpClient) -> Factory:
        """
        Sets the HTTP client for the requests.

        Without one, ``make()`` asks the discovery for a default client.
        """
        self._http_client = client
        return self

    def with_discovery(self, discovery: HttpClientDiscovery) -> Factory:
        """Sets the discovery used to find an HTTP client when none was given."""
        self._discovery = discovery
        return self

    def with_base_url(self, base_url: str) -> Factory:
        """Sets the base URL; unset or empty means ``api.openai.com/v1``."""
        self._base_url = base_url
        return self

    def with_http_header(self, name: str, value: str) -> Factory:
        """Adds a custom HTTP header, applied after the derived defaults."""
        self._headers[name] = value
        return self

    def with_query_param(self, name: str, value: QueryValue) -> Factory:
        """Adds a custom query parameter to every request URL."""
        self._query_params[name] = value
        return self

    def make(self) -> Client:
        """Creates a new Client. Raises a FactoryError subclass on invalid configuration."""
        headers = self._resolve_headers()
        base_uri = BaseUri.from_string(self._base_url or DEFAULT_BASE_URL)
        query_params = QueryParams.from_mapping(self._query_params)
        http_client, discovered = self._resolve_http_client()

        config = TransportConfig(
            http_client=http_client,
            base_uri=base_uri,
            headers=headers,
            query_params=query_params,
        )
        logger.debug(
            "Built client for %s (headers=%s, query=%s, http_client=%s)",
            base_uri,
            headers.names(),
            list(query_params.to_dict()),
            "discovered" if discovered else "injected",
        )
        return Client(config, owns_http_client=discovered)

    def _resolve_headers(self) -> Headers:
        headers = Headers.create()
        if self._api_key is not None:
            headers = headers.with_authorization(ApiKey.from_string(self._api_key))
        if self._organization is not None:
            headers = headers.with_organization(self._organization)
        for name, value in self._headers.items():
            headers = headers.with_custom_header(name, value)
        return headers

    def _resolve_http_client(self) -> tuple[HttpClient, bool]:
        if self._http_client is not None:
            return self._http_client, False
        discovery = self._discovery or default_discovery()
        return discovery.find(), True


__all__ = ["Factory"]
