"""Library for decoding DATE and DATE-TIME values.

A DATE value is a calendar day alone and is read as an all day value,
for example:

  20240615

A DATE-TIME value adds a time of day, optionally followed by the "Z" UTC
designator:

  20240615T090000Z

A TZID property parameter is not interpreted, so a value with a TZID is
read the same way as a floating local time.
"""

from __future__ import annotations

import datetime
import logging
import re

from pydantic import BaseModel, ConfigDict

from ical_light.compat import time_compat

_LOGGER = logging.getLogger(__name__)

DATETIME_REGEX = re.compile(r"^([0-9]{4})([0-9]{2})([0-9]{2})(?:T([0-9]+)(Z)?)?$")
TIME_LEN = 6


class DateTimeValue(BaseModel):
    """A decoded DATE or DATE-TIME value."""

    model_config = ConfigDict(frozen=True)

    value: datetime.datetime
    """The date and time, with all time fields zero for an all day value."""

    timezone: str = ""
    """Name of the timezone, always empty since TZID is not resolved."""

    all_day: bool = False
    """True when the value was a DATE with no time of day."""


def _parse_time(
    date_value: datetime.date, time_value: str, utc: bool
) -> datetime.datetime:
    """Combine the date with the time of day digits."""
    tzinfo = datetime.timezone.utc if utc else None
    if time_compat.is_legacy_hour_offset_enabled():
        midnight = datetime.datetime.combine(date_value, datetime.time(), tzinfo)
        return midnight + datetime.timedelta(hours=int(time_value))
    if len(time_value) != TIME_LEN:
        raise ValueError(f"Expected time of day as HHMMSS: '{time_value}'")
    hour = int(time_value[0:2])
    minute = int(time_value[2:4])
    second = int(time_value[4:6])
    return datetime.datetime.combine(
        date_value, datetime.time(hour, minute, second), tzinfo
    )


def parse_date_time(value: str | None) -> DateTimeValue | None:
    """Decode a rfc5545 DATE or DATE-TIME, or None if it is not a date."""
    if not value or not (match := DATETIME_REGEX.fullmatch(value)):
        _LOGGER.debug("Value does not match DATE or DATE-TIME pattern: %s", value)
        return None
    year, month, day, time_value, utc = match.groups()
    try:
        date_value = datetime.date(int(year), int(month), int(day))
        if time_value is None:
            result = DateTimeValue(
                value=datetime.datetime.combine(date_value, datetime.time()),
                all_day=True,
            )
        else:
            result = DateTimeValue(
                value=_parse_time(date_value, time_value, utc is not None)
            )
    except (ValueError, OverflowError) as err:
        _LOGGER.debug("Value is not a valid date: %s (%s)", value, err)
        return None
    _LOGGER.debug("parse_date_time returned %s", result)
    return result
