"""A grouping of component properties that describe a calendar event.

An event has a summary and description, and a start and end that are
either a date and time or just a day alone. An event that starts on a
day alone is an all day event.

The properties here are computed from the raw property values each time
they are read. Reading them never fails: a missing text property is empty,
and a missing or unreadable start or end is None.
"""

from __future__ import annotations

import datetime

from .component import ITEM_TYPES, CalendarItem
from .types import DateTimeValue

VEVENT = "VEVENT"
SUMMARY = "SUMMARY"
DESCRIPTION = "DESCRIPTION"
DTSTART = "DTSTART"
DTEND = "DTEND"


@ITEM_TYPES.register(VEVENT)
class Event(CalendarItem):
    """A single event on a calendar."""

    type_name: str = VEVENT

    def _text(self, key: str) -> str:
        if key not in self:
            return ""
        return self.get_text(key)

    def _date_time(self, key: str) -> DateTimeValue | None:
        if key not in self:
            return None
        return self.get_date_time(key)

    @property
    def summary(self) -> str:
        """A short summary or subject for the event."""
        return self._text(SUMMARY)

    @property
    def description(self) -> str:
        """A more complete description of the event."""
        return self._text(DESCRIPTION)

    @property
    def start_date(self) -> datetime.datetime | None:
        """The start of the event."""
        if (dtstart := self._date_time(DTSTART)) is None:
            return None
        return dtstart.value

    @property
    def end_date(self) -> datetime.datetime | None:
        """The end of the event."""
        if (dtend := self._date_time(DTEND)) is None:
            return None
        return dtend.value

    @property
    def is_all_day(self) -> bool:
        """Return true if the event starts on a day with no time of day."""
        if (dtstart := self._date_time(DTSTART)) is None:
            return False
        return dtstart.all_day
