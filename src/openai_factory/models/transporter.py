# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Immutable values a transporter is constructed from."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from ..errors import InvalidBaseUri
from ..http.client import HttpClient
from ..http.headers import find_header, upsert_header
from ..http.url import ALLOWED_SCHEMES, ensure_scheme, join_url, strip_trailing_slash
from .credentials import ApiKey

CONTENT_TYPE_HEADER = "Content-Type"
AUTHORIZATION_HEADER = "Authorization"
ORGANIZATION_HEADER = "OpenAI-Organization"
JSON_CONTENT_TYPE = "application/json"

QueryValue = str | int


@dataclass(frozen=True)
class BaseUri:
    """
    Parsed root URL of the API.

    Schemeless input is treated as https. The path never carries a trailing slash,
    so ``to_string()`` of the default is ``https://api.openai.com/v1``. Userinfo,
    query strings and fragments are rejected rather than dropped.
    """

    scheme: str
    host: str
    path: str = ""

    @classmethod
    def from_string(cls, raw: str) -> BaseUri:
        candidate = str(raw or "").strip()
        if not candidate:
            raise InvalidBaseUri(raw, "empty URL")
        if any(ch.isspace() for ch in candidate):
            raise InvalidBaseUri(raw, "URL must not contain whitespace")

        try:
            parts = urlsplit(ensure_scheme(candidate))
            hostname = parts.hostname
            _ = parts.port  # raises ValueError on a malformed port
        except ValueError as exc:
            raise InvalidBaseUri(raw, str(exc)) from exc

        scheme = parts.scheme.lower()
        if scheme not in ALLOWED_SCHEMES:
            raise InvalidBaseUri(raw, f"unsupported scheme {parts.scheme!r}")
        if not hostname:
            raise InvalidBaseUri(raw, "missing host")
        if parts.username is not None or "@" in parts.netloc:
            raise InvalidBaseUri(raw, "credentials are not allowed in the base URL")
        if parts.query or parts.fragment or candidate.endswith(("?", "#")):
            raise InvalidBaseUri(raw, "query and fragment are not allowed in the base URL; use with_query_param()")

        return cls(scheme=scheme, host=parts.netloc, path=strip_trailing_slash(parts.path))

    def to_string(self) -> str:
        return f"{self.scheme}://{self.host}{self.path}"

    def join(self, resource: str) -> str:
        """Return the absolute URL of ``resource`` below this base."""
        return join_url(self.to_string(), resource)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class Headers:
    """Ordered, immutable header set; names match case-insensitively."""

    entries: tuple[tuple[str, str], ...] = ()

    @classmethod
    def create(cls) -> Headers:
        return cls(((CONTENT_TYPE_HEADER, JSON_CONTENT_TYPE),))

    def with_authorization(self, api_key: ApiKey) -> Headers:
        return self.with_custom_header(AUTHORIZATION_HEADER, api_key.to_authorization())

    def with_organization(self, organization: str) -> Headers:
        return self.with_custom_header(ORGANIZATION_HEADER, organization)

    def with_custom_header(self, name: str, value: str) -> Headers:
        return Headers(upsert_header(self.entries, name, value))

    def get(self, name: str, default: str | None = None) -> str | None:
        value = find_header(self.entries, name)
        return default if value is None else value

    def names(self) -> list[str]:
        return [key for key, _ in self.entries]

    def to_dict(self) -> dict[str, str]:
        return dict(self.entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class QueryParams:
    """Ordered, immutable query parameters appended to every request URL."""

    entries: tuple[tuple[str, QueryValue], ...] = ()

    @classmethod
    def create(cls) -> QueryParams:
        return cls()

    @classmethod
    def from_mapping(cls, params: Mapping[str, QueryValue] | None) -> QueryParams:
        result = cls.create()
        for name, value in (params or {}).items():
            result = result.with_param(name, value)
        return result

    def with_param(self, name: str, value: QueryValue) -> QueryParams:
        params = dict(self.entries)
        params[name] = value
        return QueryParams(tuple(params.items()))

    def to_dict(self) -> dict[str, QueryValue]:
        return dict(self.entries)

    def __iter__(self) -> Iterator[tuple[str, QueryValue]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class TransportConfig:
    """
    Everything a transporter needs: the HTTP client handle plus resolved values.

    The client handle is an opaque reference and is left out of equality, so two
    builds of the same configuration compare equal even with separately discovered clients.
    """

    http_client: HttpClient = field(compare=False)
    base_uri: BaseUri
    headers: Headers
    query_params: QueryParams
