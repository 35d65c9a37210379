"""Compatibility layer for reading calendar files like older readers did."""

from .time_compat import enable_legacy_hour_offset

__all__ = [
    "enable_legacy_hour_offset",
]
