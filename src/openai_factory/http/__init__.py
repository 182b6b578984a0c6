# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient
from .headers import find_header, upsert_header
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import ensure_scheme, join_url, with_query

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "ensure_scheme",
    "find_header",
    "join_url",
    "upsert_header",
    "with_query",
]
