# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for base URIs and endpoint URLs."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlencode, urlsplit, urlunsplit

ALLOWED_SCHEMES = ("http", "https")


def ensure_scheme(raw: str, default_scheme: str = "https") -> str:
    """
    Prefix a schemeless URL with ``default_scheme``.

    Example:
      api.openai.com/v1 -> https://api.openai.com/v1
    """
    if "://" in raw:
        return raw
    return f"{default_scheme}://{raw}"


def strip_trailing_slash(path: str) -> str:
    return path.rstrip("/")


def join_url(base_url: str, resource: str) -> str:
    """
    Append a resource path to a base URL.

    Unlike ``urljoin()``, the base path is always kept:
      https://host/v1 + models -> https://host/v1/models
    """
    parts = urlsplit(base_url)
    base_path = strip_trailing_slash(parts.path)
    resource_path = str(resource or "").lstrip("/")
    path = f"{base_path}/{resource_path}" if resource_path else base_path
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, ""))


def with_query(url: str, params: Mapping[str, object] | None) -> str:
    """Return ``url`` with ``params`` encoded as its query string (existing query kept first)."""
    if not params:
        return url
    parts = urlsplit(url)
    encoded = urlencode({key: "" if value is None else str(value) for key, value in params.items()})
    query = f"{parts.query}&{encoded}" if parts.query else encoded
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


__all__ = ["ALLOWED_SCHEMES", "ensure_scheme", "join_url", "strip_trailing_slash", "with_query"]
