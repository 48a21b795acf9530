"""Printable summaries for Brave Search configuration.

Updates:
  v0.1.2 - 2026-10-19 - Never echo any part of the subscription token.
  v0.1.1 - 2026-10-16 - Inline token masking.
  v0.1.0 - 2026-10-12 - Extract CLI settings summary rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from config import BraveSearchSettings


def describe_token(token: str | None) -> str:
    """Return whether *token* is configured without revealing it."""
    if not token:
        return "not set"
    return "set (hidden)"


def print_settings_summary(settings: BraveSearchSettings) -> None:
    """Emit a readable summary of the resolved client configuration."""
    lines = [
        "Brave Search configuration summary",
        "----------------------------------",
        f"API host: {settings.host}",
        f"Subscription token: {describe_token(settings.api_token)}",
        f"Request timeout: {settings.timeout_seconds:g}s",
        f"Log level: {settings.log_level}",
    ]
    print("\n".join(lines))
