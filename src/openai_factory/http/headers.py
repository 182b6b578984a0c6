# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header utilities.

HTTP header field names are case-insensitive (RFC 9110). Resolved headers keep
the caller's casing for display, so overwrites go through these helpers.
"""

from __future__ import annotations

from collections.abc import Iterable


def find_header(items: Iterable[tuple[str, str]], name: str) -> str | None:
    """Return the value stored under ``name`` (case-insensitive), or None."""
    lower = name.lower()
    for key, value in items:
        if key.lower() == lower:
            return value
    return None


def upsert_header(items: Iterable[tuple[str, str]], name: str, value: str) -> tuple[tuple[str, str], ...]:
    """
    Return header pairs with ``name`` set to ``value``.

    Any existing entry matching ``name`` case-insensitively is replaced in place,
    taking the new casing; otherwise the pair is appended.
    """
    lower = name.lower()
    out: list[tuple[str, str]] = []
    replaced = False
    for key, current in items:
        if key.lower() == lower:
            if not replaced:
                out.append((name, value))
                replaced = True
            continue
        out.append((key, current))
    if not replaced:
        out.append((name, value))
    return tuple(out)


__all__ = ["find_header", "upsert_header"]
