"""Tests for the calendar root and its item store."""

from collections.abc import Generator

from ical_light.calendar import Calendar
from ical_light.component import CalendarItem
from ical_light.event import Event


def test_empty_calendar() -> None:
    """Test a calendar with no items."""
    calendar = Calendar()
    assert calendar.type_name == "VCALENDAR"
    assert calendar.items == {}
    assert list(calendar.events) == []
    assert list(calendar) == []


def test_create_item() -> None:
    """Test items are stored by block name in the order created."""
    calendar = Calendar()
    first = calendar.create_item("VEVENT")
    todo = calendar.create_item("VTODO")
    second = calendar.create_item("VEVENT")

    assert isinstance(first, Event)
    assert type(todo) is CalendarItem
    assert calendar.items["VEVENT"][0] is first
    assert calendar.items["VEVENT"][1] is second
    assert calendar.items["VTODO"] == [todo]
    assert list(calendar.events) == [first, second]


def test_events_restart() -> None:
    """Test each request for the events starts a new traversal."""
    calendar = Calendar()
    calendar.create_item("VEVENT").push("SUMMARY", "", "First")
    calendar.create_item("VEVENT").push("SUMMARY", "", "Second")

    events = calendar.events
    assert isinstance(events, Generator)
    assert [event.summary for event in events] == ["First", "Second"]
    # The same iterator is consumed
    assert list(events) == []

    assert [event.summary for event in calendar.events] == ["First", "Second"]
    assert [event.summary for event in calendar] == ["First", "Second"]


def test_independent_iterators() -> None:
    """Test two event iterators keep their own position."""
    calendar = Calendar()
    calendar.create_item("VEVENT").push("SUMMARY", "", "First")
    calendar.create_item("VEVENT").push("SUMMARY", "", "Second")

    events1 = calendar.events
    events2 = iter(calendar)
    assert next(events1).summary == "First"
    assert next(events2).summary == "First"
    assert next(events1).summary == "Second"
    assert next(events2).summary == "Second"


def test_events_are_lazy() -> None:
    """Test events are read from the calendar as they are consumed."""
    calendar = Calendar()
    events = calendar.events
    calendar.create_item("VEVENT").push("SUMMARY", "", "Added later")
    assert [event.summary for event in events] == ["Added later"]
