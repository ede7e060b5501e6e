"""Helpers for safe debug logging.

Launch forms carry personal data (respondent names, user identifiers,
sexual identity) and the finished token is a bearer credential. By
default both are logged in full at DEBUG; when ``LaunchConfig.redact_logs``
is set they go through these helpers first.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SENSITIVE_FORM_KEYS: frozenset[str] = frozenset(
    {
        "user_id",
        "ru_name",
        "trad_as",
        "sexual_identity",
    }
)

_MAX_VALUE = 128


def redact_form(form: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *form* with personal fields masked.

    Nested mappings (e.g. ``variant_flags``) are redacted recursively and
    long values are truncated.
    """
    redacted: dict[str, Any] = {}
    for key, value in form.items():
        if str(key).lower() in _SENSITIVE_FORM_KEYS:
            redacted[key] = "<redacted>"
        elif isinstance(value, Mapping):
            redacted[key] = redact_form(value)
        elif isinstance(value, str) and len(value) > _MAX_VALUE:
            redacted[key] = f"{value[:_MAX_VALUE]}…<truncated>"
        else:
            redacted[key] = value
    return redacted


def redact_token(token: str) -> str:
    """Describe a compact token without exposing it.

    Keeps the first (protected header) segment, which holds only
    algorithm metadata, and summarises the rest.
    """
    segments = token.split(".")
    return f"{segments[0]}.<redacted:{len(segments)} segments, {len(token)} chars>"
