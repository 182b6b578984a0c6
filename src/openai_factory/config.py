# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for openai-factory."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_BASE_URL = "api.openai.com/v1"
DEFAULT_USER_AGENT = f"openai-factory/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _str_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value


@dataclass
class HttpSettings:
    """Defaults for the discovered httpx-backed client."""

    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("OPENAI_FACTORY_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            timeout=timeout,
            user_agent=os.getenv("OPENAI_FACTORY_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("OPENAI_FACTORY_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("OPENAI_FACTORY_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


@dataclass
class ClientSettings:
    """Credentials and endpoint overrides read from the standard OpenAI variables."""

    api_key: str | None = None
    organization: str | None = None
    base_url: str | None = None

    @classmethod
    def from_env(cls) -> "ClientSettings":
        return cls(
            api_key=_str_env("OPENAI_API_KEY"),
            organization=_str_env("OPENAI_ORGANIZATION"),
            base_url=_str_env("OPENAI_BASE_URL"),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_client_settings() -> ClientSettings:
    """Load client credentials and overrides from environment."""
    return ClientSettings.from_env()
