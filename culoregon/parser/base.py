"""Shared helpers for parsing dongle lines."""

from __future__ import annotations

from typing import Optional

from ..exceptions import CulParserError


def extract_payload(line: str) -> Optional[str]:
    """Return the line without surrounding whitespace, or None if nothing is left."""
    if not line:
        return None
    payload = line.strip()
    return payload or None


def ensure_message_type(payload: str, expected: str) -> None:
    if not payload.startswith(expected):
        raise CulParserError(f"expected {expected} message, got {payload[:2]}")
