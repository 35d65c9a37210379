"""Compatibility layer for reading DATE-TIME values as an hour offset."""

from collections.abc import Generator
import contextlib
import contextvars


_legacy_hour_offset = contextvars.ContextVar("legacy_hour_offset", default=False)


@contextlib.contextmanager
def enable_legacy_hour_offset() -> Generator[None]:
    """Context manager to read DATE-TIME time digits as a number of hours.

    The time of day digits (e.g. "090000") are read as a single integer
    that is added to midnight as hours, rather than split into hour,
    minute and second fields. This matches older readers of this format.
    """
    token = _legacy_hour_offset.set(True)
    try:
        yield
    finally:
        _legacy_hour_offset.reset(token)


def is_legacy_hour_offset_enabled() -> bool:
    """Check if the legacy hour offset is enabled."""
    return _legacy_hour_offset.get()
