"""Library for reading rfc5545 content as logical content lines.

An iCalendar file limits the length of a physical line, so a long content
line is "folded" across multiple physical lines. Each continuation line
starts with a single whitespace character (a space or horizontal tab) that
is not part of the content. For example, the two physical lines:

  SUMMARY:Project XYZ Fin
   al Review

are unfolded into the single content line:

  SUMMARY:Project XYZ Final Review

Only the first whitespace character of a continuation line is removed, any
additional indentation is part of the value.
"""

from __future__ import annotations

import re
from collections.abc import Generator

from .const import LINES, WSP

LINES_RE = re.compile(LINES)


def _is_continuation(physical_line: str) -> bool:
    """Return true if the physical line continues the previous one."""
    return physical_line[:1] in WSP


def unfolded_lines(content: str) -> Generator[str, None, None]:
    """Read content and yield unfolded content lines one at a time."""
    physical_lines = LINES_RE.split(content)
    last = len(physical_lines) - 1
    contentline = ""
    for index, physical_line in enumerate(physical_lines):
        if _is_continuation(physical_line):
            physical_line = physical_line[1:]
        contentline += physical_line
        if index < last and _is_continuation(physical_lines[index + 1]):
            continue
        yield contentline
        contentline = ""
