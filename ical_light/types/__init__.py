"""Library for decoding rfc5545 property values.

Values are stored on an item exactly as they appear in the content line
and are only decoded when read.
"""

from .date_time import DateTimeValue, parse_date_time
from .text import unescape

__all__ = [
    "DateTimeValue",
    "parse_date_time",
    "unescape",
]
