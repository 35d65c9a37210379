"""Parse ics content into a calendar.

This is an example of parsing an ics file and reading its events:
```python
from pathlib import Path
from ical_light.calendar_stream import parse

filename = Path("example/calendar.ics")
with filename.open() as ics_file:
    calendar = parse(ics_file.read())
    for event in calendar.events:
        print(event.summary)
```

Parsing is best effort and never fails. Content lines that can't be read
are skipped, and lines outside of any component are ignored.

Components are not closed by an END line. Each BEGIN line starts a new
item that receives every following content line (including any END line,
stored as an ordinary property) until the next BEGIN line. A component
nested inside another (e.g. a VALARM inside a VEVENT) is stored as its own
item, and properties of the outer component that follow the nested block
are added to the nested item.
"""

from __future__ import annotations

import logging

from .calendar import VCALENDAR, Calendar
from .component import CalendarItem
from .parsing.const import ATTR_BEGIN
from .parsing.lines import unfolded_lines
from .parsing.property import parse_contentlines

_LOGGER = logging.getLogger(__name__)


def parse(content: str) -> Calendar:
    """Parse rfc5545 iCalendar content into a Calendar.

    A leading BEGIN:VCALENDAR line opens the calendar itself, and every
    other BEGIN line creates a new item on the calendar. Content without
    an outer VCALENDAR block is read into a new empty calendar.
    """
    calendar: Calendar | None = None
    current: CalendarItem | None = None
    for contentline in parse_contentlines(unfolded_lines(content)):
        if contentline.key == ATTR_BEGIN:
            if not contentline.value:
                _LOGGER.debug("Skipping %s with no component name", ATTR_BEGIN)
                continue
            if calendar is None and contentline.value == VCALENDAR:
                calendar = Calendar()
                current = calendar
            else:
                if calendar is None:
                    calendar = Calendar()
                current = calendar.create_item(contentline.value)
        if current is None:
            _LOGGER.debug("Skipping %s outside of any component", contentline.key)
            continue
        current.push(contentline.key, contentline.parameter, contentline.value)

    if calendar is None:
        _LOGGER.debug("Content had no components, returning an empty calendar")
        return Calendar()
    _LOGGER.debug(
        "Parsed calendar with items %s",
        {name: len(items) for name, items in calendar.items.items()},
    )
    return calendar
