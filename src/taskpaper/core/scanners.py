"""Range scanners used by the parser.

Each scanner works on a sub-range of the full text and reports ranges in
offsets of the full text, so results can be compared with each other without
translation.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from .model import Range

INDENT_RE = re.compile(r"\t*")
TASK_RE = re.compile(r"[-*+\\] ")
TAG_RE = re.compile(r"@([^\W_]+)(?:\(([^)]*)\))?")
HORIZONTAL_SPACE = " \t"

# Everything str.splitlines() treats as a line boundary
_TERMINATOR_RE = re.compile(
    r"(?:\r\n|[\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029])\Z"
)


@dataclass(frozen=True)
class TagMatch:
    range: Range  # "@" through ")" or the end of the name
    name_range: Range
    value_range: Range | None = None


def _bounds(text: str, start: int, end: int | None) -> tuple[int, int]:
    if end is None:
        end = len(text)
    if not 0 <= start <= end <= len(text):
        raise ValueError(f"Range [{start}, {end}) is outside text of length {len(text)}")
    return start, end


def scan_lines(text: str, start: int = 0, end: int | None = None) -> Iterator[tuple[Range, str]]:
    """
    Yield `(line_range, line_text)` for each line of `text[start:end]`.

    Line terminators stay inside the range. A final line without a
    terminator is still yielded; an empty input yields nothing.
    """
    start, end = _bounds(text, start, end)
    offset = start
    for ln in text[start:end].splitlines(keepends=True):
        yield Range(offset, offset + len(ln)), ln
        offset += len(ln)


def line_terminator_length(text: str, line_range: Range) -> int:
    """Length of the line terminator ending `line_range` (0 if none)."""
    m = _TERMINATOR_RE.search(text, line_range.start, line_range.end)
    return len(m.group(0)) if m else 0


def scan_indent(text: str, line_range: Range) -> Range:
    """Range of the leading run of tab characters (may be empty)."""
    m = INDENT_RE.match(text, line_range.start, line_range.end)
    return Range(m.start(), m.end())


def scan_task(text: str, body_range: Range) -> Range | None:
    """Range of a task marker at the start of the body, if there is one."""
    m = TASK_RE.match(text, body_range.start, body_range.end)
    if not m:
        return None
    return Range(m.start(), m.end())


def scan_project(text: str, body_range: Range) -> Range | None:
    """Range of the project colon if the body ends with one."""
    if body_range.length and text[body_range.end - 1] == ":":
        return Range(body_range.end - 1, body_range.end)
    return None


def scan_tags(text: str, line_range: Range) -> list[TagMatch]:
    """Every tag in the range, left to right, without overlaps."""
    matches = []
    for m in TAG_RE.finditer(text, line_range.start, line_range.end):
        value_range = None
        if m.group(2) is not None:
            value_range = Range(m.start(2), m.end(2))
        matches.append(
            TagMatch(
                range=Range(m.start(), m.end()),
                name_range=Range(m.start(1), m.end(1)),
                value_range=value_range,
            )
        )
    return matches
