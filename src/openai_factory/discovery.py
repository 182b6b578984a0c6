# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
HTTP client discovery.

A discovery holds an ordered list of named probes. ``find()`` returns the first
client a probe produces and raises NoHttpClientAvailable when none does. There is
no process-wide registry: callers pass a discovery to the Factory when they need
something other than the default httpx probe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .config import HttpSettings, load_http_settings
from .errors import NoHttpClientAvailable
from .http.client import HttpClient
from .http.httpx_client import HttpxClient

logger = logging.getLogger(__name__)

Probe = Callable[[], HttpClient | None]


@dataclass(frozen=True)
class DiscoveryCandidate:
    name: str
    probe: Probe


class HttpClientDiscovery:
    """Ordered set of strategies for obtaining a default HttpClient."""

    def __init__(self, candidates: Iterable[DiscoveryCandidate] | None = None):
        self._candidates: list[DiscoveryCandidate] = list(candidates or [])

    @property
    def names(self) -> list[str]:
        return [candidate.name for candidate in self._candidates]

    def register(self, name: str, probe: Probe, *, prepend: bool = False) -> HttpClientDiscovery:
        """Add a probe; prepended probes are tried before the existing ones."""
        candidate = DiscoveryCandidate(name, probe)
        if prepend:
            self._candidates.insert(0, candidate)
        else:
            self._candidates.append(candidate)
        return self

    def find(self) -> HttpClient:
        tried: list[str] = []
        for candidate in self._candidates:
            try:
                client = candidate.probe()
            except Exception as exc:  # noqa: BLE001
                logger.warning("HTTP client candidate %s failed: %s", candidate.name, exc)
                tried.append(f"{candidate.name} ({type(exc).__name__}: {exc})")
                continue
            if client is not None:
                logger.debug("Discovered HTTP client via %s", candidate.name)
                return client
            tried.append(candidate.name)
        raise NoHttpClientAvailable(tried)


def httpx_probe(settings: HttpSettings | None = None) -> Probe:
    """Probe building an HttpxClient; settings default to the environment at probe time."""

    def probe() -> HttpClient:
        return HttpxClient(settings or load_http_settings())

    return probe


def default_discovery(settings: HttpSettings | None = None) -> HttpClientDiscovery:
    return HttpClientDiscovery([DiscoveryCandidate("httpx", httpx_probe(settings))])


__all__ = ["DiscoveryCandidate", "HttpClientDiscovery", "Probe", "default_discovery", "httpx_probe"]
