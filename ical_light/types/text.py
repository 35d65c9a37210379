"""Library for decoding TEXT values."""

from __future__ import annotations

# Replacements are applied in this order, the escaped backslash last.
UNESCAPE_CHAR = (
    ("\\,", ","),
    ("\\;", ";"),
    ("\\n", "\n"),
    ("\\N", "\n"),
    ("\\\\", "\\"),
)


def unescape(value: str | None) -> str:
    """Decode a rfc5545 TEXT value into display text."""
    if not value:
        return ""
    for key, vin in UNESCAPE_CHAR:
        if key not in value:
            continue
        value = value.replace(key, vin)
    return value
