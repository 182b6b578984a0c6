# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for openai-factory."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("OPENAI_FACTORY_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def redact_secret(value: str | None, *, keep: int = 4) -> str:
    """Mask a credential for display, keeping only a short prefix."""
    if not value:
        return ""
    if len(value) <= keep * 2:
        return "*" * len(value)
    return f"{value[:keep]}...{'*' * 4}"


__all__ = ["redact_secret", "setup_logging"]
