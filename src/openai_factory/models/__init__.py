# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for openai-factory."""

from ..http.models import HttpRequest, HttpResponse
from .credentials import ApiKey
from .transporter import (
    AUTHORIZATION_HEADER,
    CONTENT_TYPE_HEADER,
    JSON_CONTENT_TYPE,
    ORGANIZATION_HEADER,
    BaseUri,
    Headers,
    QueryParams,
    TransportConfig,
)

__all__ = [
    "AUTHORIZATION_HEADER",
    "CONTENT_TYPE_HEADER",
    "JSON_CONTENT_TYPE",
    "ORGANIZATION_HEADER",
    "ApiKey",
    "BaseUri",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "QueryParams",
    "TransportConfig",
]
