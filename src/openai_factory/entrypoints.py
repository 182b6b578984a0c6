# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shortcuts for the common construction paths."""

from __future__ import annotations

from .client import Client
from .factory import Factory


def client(api_key: str, organization: str | None = None) -> Client:
    """Creates a Client with the given credentials and every other setting defaulted."""
    return factory().with_api_key(api_key).with_organization(organization).make()


def factory() -> Factory:
    """Creates a new Factory for a custom Client."""
    return Factory()


__all__ = ["client", "factory"]
