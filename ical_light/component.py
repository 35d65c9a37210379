"""Library for rfc5545 components as a bag of properties.

A component (e.g. a calendar, an event, a to-do) is a block of content
lines between a BEGIN line and the next BEGIN line. Every content line in
the block is stored on a `CalendarItem` as the raw value and raw property
parameter, keyed by the property name. Values are only decoded when they
are read, so storing never fails.

A property name may only appear once per item, and writing the same name
again replaces the earlier value.

Specialized item types (e.g. `ical_light.event.Event`) are registered by
their block name, and any other block name creates a generic `CalendarItem`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import PropertyNotFoundError
from .types import DateTimeValue, parse_date_time, unescape

_LOGGER = logging.getLogger(__name__)


class PropertyValue(BaseModel):
    """The raw value and property parameter of a single content line."""

    model_config = ConfigDict(frozen=True)

    value: str
    parameter: str = ""


class CalendarItem(BaseModel):
    """A component with a type name and a bag of properties.

    Items compare equal by type and properties, but are not hashable since
    the property bag is filled in while the content is parsed.
    """

    model_config = ConfigDict(frozen=True)

    type_name: str
    """The component block name as written, e.g. VEVENT."""

    properties: dict[str, PropertyValue] = Field(default_factory=dict)

    def push(self, key: str, parameter: str, value: str) -> None:
        """Set the raw value of a property, replacing any earlier value."""
        self.properties[key] = PropertyValue(value=value, parameter=parameter)

    def _get(self, key: str) -> PropertyValue:
        if (prop := self.properties.get(key)) is None:
            raise PropertyNotFoundError(key, self.type_name)
        return prop

    def get_text(self, key: str) -> str:
        """Return the property value as unescaped TEXT."""
        return unescape(self._get(key).value)

    def get_date_time(self, key: str) -> DateTimeValue | None:
        """Return the property value as a DATE or DATE-TIME.

        The result is None when the property is present but is not a date.
        """
        return parse_date_time(self._get(key).value)

    def get_parameter(self, key: str) -> str:
        """Return the raw property parameter, or empty if there was none."""
        return self._get(key).parameter

    def __contains__(self, key: object) -> bool:
        return key in self.properties


T_ITEM = TypeVar("T_ITEM", bound=type[CalendarItem])


class Registry:
    """Registry of specialized item types by block name."""

    def __init__(self) -> None:
        """Initialize Registry."""
        self._items: dict[str, type[CalendarItem]] = {}

    def register(self, name: str) -> Callable[[T_ITEM], T_ITEM]:
        """Return decorator to register an item type for a block name."""

        def decorator(item_type: T_ITEM) -> T_ITEM:
            self._items[name] = item_type
            return item_type

        return decorator

    def get(self, name: str) -> type[CalendarItem]:
        """Return the item type for the block name."""
        return self._items.get(name, CalendarItem)


ITEM_TYPES = Registry()


def create_item(type_name: str) -> CalendarItem:
    """Create an empty item of the type registered for the block name."""
    item_type = ITEM_TYPES.get(type_name)
    _LOGGER.debug("Creating %s for %s", item_type.__name__, type_name)
    return item_type(type_name=type_name)
