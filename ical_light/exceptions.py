"""Exceptions for ical_light library."""


class CalendarError(Exception):
    """Base exception for all ical_light errors."""


class CalendarParseError(CalendarError):
    """Exception raised when parsing an ical string.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the content line that could not be
    tokenized, useful for debugging purposes.

    The top level `parse` function never lets this escape: a content line
    that can't be tokenized is logged and skipped.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the CalendarParseError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class PropertyNotFoundError(CalendarError):
    """Exception raised when reading a property that was never set on an item.

    This is distinct from a property that is present but can't be decoded
    as the requested type, which is reported as a `None` result instead.
    """

    def __init__(self, name: str, type_name: str) -> None:
        """Initialize the PropertyNotFoundError with the missing property name."""
        super().__init__(f"Property '{name}' not found on {type_name}")
        self.name = name
        self.type_name = type_name
