"""Library for splitting rfc5545 content lines into tokens.

A content line is a property name, an optional property parameter and a
value. This is a very simple tokenizer and it does not attempt to interpret
the parameter or the value. For example, given a content line of:

  DTSTART;VALUE=DATE:20070501

This library would create a ContentLine with this structure:

  ContentLine(
    key='DTSTART',
    parameter='VALUE=DATE',
    value='20070501',
  )

Everything after the first ';' up to the first ':' is kept as a single
parameter string, and everything after the first ':' is the value, so
values may themselves contain colons (e.g. a URL or "SUMMARY:A: B").
"""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterable
from dataclasses import dataclass
from functools import cache

from pyparsing import Opt, ParseException, ParserElement, Regex, Suppress

from ical_light.exceptions import CalendarParseError

_LOGGER = logging.getLogger(__name__)


@cache
def create_parser() -> ParserElement:
    """Create the content line parser."""
    name = Regex(r"[^;:]+")
    param = Suppress(";") + Opt(Regex(r"[^:]+"), default="")
    value = Opt(Regex(r".+"), default="")

    # Always produces exactly three tokens: name, parameter, value
    contentline = name + Opt(param, default="") + Suppress(":") + value
    contentline.leave_whitespace()
    contentline.parse_with_tabs()
    return contentline


@dataclass(frozen=True)
class ContentLine:
    """A tokenized rfc5545 content line."""

    key: str
    value: str
    parameter: str = ""

    @classmethod
    def from_ics(cls, contentline: str) -> ContentLine:
        """Decode a ContentLine from an rfc5545 iCalendar content line.

        Will raise a CalendarParseError on failure.
        """
        try:
            result = create_parser().parse_string(contentline, parse_all=True)
        except ParseException as err:
            raise CalendarParseError(
                f"Invalid content line, expected ':' after property name: {err}",
                detailed_error=contentline,
            ) from err
        key, parameter, value = (token.strip() for token in result.as_list())
        if not key:
            raise CalendarParseError(
                "Invalid content line, empty property name",
                detailed_error=contentline,
            )
        return cls(key=key, value=value, parameter=parameter)


def parse_line(contentline: str) -> ContentLine | None:
    """Tokenize a single content line, or None if it is not recognized."""
    try:
        return ContentLine.from_ics(contentline)
    except CalendarParseError as err:
        _LOGGER.debug("Skipping content line: %s (%s)", err.detailed_error, err)
        return None


def parse_contentlines(
    contentlines: Iterable[str],
) -> Generator[ContentLine, None, None]:
    """Tokenize content lines, dropping any line that is not recognized."""
    for contentline in contentlines:
        if not contentline:
            continue
        if (result := parse_line(contentline)) is not None:
            yield result
