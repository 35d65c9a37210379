"""
.. include:: ../README.md
"""

__all__ = [
    "calendar",
    "calendar_stream",
    "component",
    "event",
    "types",
    "exceptions",
    "compat",
]
