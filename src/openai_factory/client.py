# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configured API client produced by the Factory."""

from __future__ import annotations

from contextlib import suppress

from .models.transporter import TransportConfig
from .transporter import HttpTransporter


class Client:
    """
    Read-only wrapper around one TransportConfig.

    Resource collaborators obtain a ready transporter through ``transporter()``.
    When the HTTP client was discovered rather than injected, the Client owns it and
    ``close()`` releases it; injected clients stay under the caller's control.
    """

    __slots__ = ("_config", "_owns_http_client", "_transporter")

    def __init__(self, config: TransportConfig, *, owns_http_client: bool = False):
        object.__setattr__(self, "_config", config)
        object.__setattr__(self, "_owns_http_client", owns_http_client)
        object.__setattr__(self, "_transporter", HttpTransporter.from_config(config))

    def __setattr__(self, name, value) -> None:  # noqa: ANN001
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def config(self) -> TransportConfig:
        return self._config

    @property
    def owns_http_client(self) -> bool:
        return self._owns_http_client

    def transporter(self) -> HttpTransporter:
        return self._transporter

    def close(self) -> None:
        if not self._owns_http_client:
            return
        with suppress(Exception):
            self._config.http_client.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()

    def __repr__(self) -> str:
        return f"Client(base_uri={self._config.base_uri.to_string()!r}, headers={self._config.headers.names()!r})"
