# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Credential value objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import InvalidCredential
from ..log import redact_secret


@dataclass(frozen=True)
class ApiKey:
    """A validated API key. ``str()`` and ``repr()`` only show a redacted prefix."""

    value: str = field(repr=False)

    @classmethod
    def from_string(cls, key: str) -> ApiKey:
        if key is None or not str(key).strip():
            raise InvalidCredential("API key must not be empty")
        if "\r" in key or "\n" in key:
            raise InvalidCredential("API key must not contain line breaks")
        return cls(key)

    def to_authorization(self) -> str:
        return f"Bearer {self.value}"

    def __str__(self) -> str:
        return redact_secret(self.value)
