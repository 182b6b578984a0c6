# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum
from typing import Any

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class FactoryError(Exception):
    """Base class for failures raised while assembling a client."""


class InvalidCredential(FactoryError):
    """The configured API key is empty or malformed."""


class InvalidBaseUri(FactoryError):
    """The configured base URL does not resolve to an absolute http(s) URI."""

    def __init__(self, base_url: str, reason: str):
        super().__init__(f"Invalid base URL {base_url!r}: {reason}")
        self.base_url = base_url
        self.reason = reason


class NoHttpClientAvailable(FactoryError):
    """No HTTP client was injected and discovery could not provide one."""

    def __init__(self, tried: list[str] | None = None):
        tried = list(tried or [])
        detail = ", ".join(tried) if tried else "no candidates registered"
        super().__init__(f"No HTTP client available (tried: {detail}); pass one with with_http_client()")
        self.tried = tried


class TransporterError(Exception):
    """A request could not be delivered (no HTTP status was received)."""

    def __init__(self, message: str, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR):
        super().__init__(message)
        self.category = category


class ApiError(Exception):
    """The API answered with an error payload."""

    def __init__(
        self,
        message: str,
        *,
        error_type: str | None = None,
        code: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.code = code
        self.status_code = status_code

    @classmethod
    def from_payload(cls, payload: dict[str, Any], status_code: int | None = None) -> ApiError:
        error = payload.get("error")
        if not isinstance(error, dict):
            return cls(str(error or "Unknown API error"), status_code=status_code)
        message = error.get("message")
        if isinstance(message, list):
            message = "\n".join(str(part) for part in message)
        code = error.get("code")
        return cls(
            str(message or "Unknown API error"),
            error_type=error.get("type"),
            code=None if code is None else str(code),
            status_code=status_code,
        )


class UnserializableResponse(Exception):
    """The response body could not be decoded as a JSON object."""


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout while calling the API",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.UNKNOWN_ERROR: "Network error while calling the API",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Request failed due to network error")


__all__ = [
    "ApiError",
    "ErrorCategory",
    "FactoryError",
    "InvalidBaseUri",
    "InvalidCredential",
    "NoHttpClientAvailable",
    "TransporterError",
    "UnserializableResponse",
    "categorize_exception",
    "error_category_to_reason",
]
