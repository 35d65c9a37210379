"""The root of a calendar and all of the items in it.

A `Calendar` is itself an item holding the properties of the outer block,
and additionally owns every item parsed from the blocks inside it, grouped
by block name in document order.

Events are returned lazily, one at a time as they are consumed. Each read
of `Calendar.events` (or each `iter(calendar)`) starts a new traversal:

```python
from ical_light.calendar_stream import parse

calendar = parse(ics_content)
for event in calendar.events:
    print(event.summary, event.start_date)
```
"""

from __future__ import annotations

from collections.abc import Generator

from pydantic import Field

from .component import CalendarItem, create_item
from .event import VEVENT, Event

VCALENDAR = "VCALENDAR"


class Calendar(CalendarItem):
    """A sequence of calendar properties and calendar components."""

    type_name: str = VCALENDAR

    items: dict[str, list[CalendarItem]] = Field(default_factory=dict)
    """All items in the calendar, by block name, in document order."""

    def create_item(self, type_name: str) -> CalendarItem:
        """Create a new item for the block name and add it to the calendar."""
        item = create_item(type_name)
        self.items.setdefault(type_name, []).append(item)
        return item

    @property
    def events(self) -> Generator[Event, None, None]:
        """Return a new iterator over the events in the calendar."""
        return self._generate_events()

    def _generate_events(self) -> Generator[Event, None, None]:
        for item in self.items.get(VEVENT, []):
            if isinstance(item, Event):
                yield item

    def __iter__(self) -> Generator[Event, None, None]:  # type: ignore[override]
        return self._generate_events()
