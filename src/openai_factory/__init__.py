# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
openai-factory package entrypoint.

Builds immutable, pre-configured clients for the OpenAI HTTP API. The HTTP
transport is abstracted behind an injectable client interface (httpx by default),
and resolved configuration is modeled with frozen dataclasses.
"""

from .client import Client
from .config import DEFAULT_BASE_URL, ClientSettings, HttpSettings, load_client_settings, load_http_settings
from .discovery import DiscoveryCandidate, HttpClientDiscovery, default_discovery
from .errors import (
    ApiError,
    ErrorCategory,
    FactoryError,
    InvalidBaseUri,
    InvalidCredential,
    NoHttpClientAvailable,
    TransporterError,
    UnserializableResponse,
)
from .factory import Factory
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, StubHttpClient
from .log import setup_logging
from .models import ApiKey, BaseUri, Headers, QueryParams, TransportConfig
from .transporter import HttpTransporter
from .version import __version__

__all__ = [
    "DEFAULT_BASE_URL",
    "ApiError",
    "ApiKey",
    "BaseUri",
    "Client",
    "ClientSettings",
    "DiscoveryCandidate",
    "ErrorCategory",
    "Factory",
    "FactoryError",
    "Headers",
    "HttpClient",
    "HttpClientDiscovery",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpTransporter",
    "HttpxClient",
    "InvalidBaseUri",
    "InvalidCredential",
    "NoHttpClientAvailable",
    "QueryParams",
    "StubHttpClient",
    "TransportConfig",
    "TransporterError",
    "UnserializableResponse",
    "__version__",
    "default_discovery",
    "load_client_settings",
    "load_http_settings",
    "setup_logging",
]
