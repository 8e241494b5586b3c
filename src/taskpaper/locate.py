"""Utilities for locating items with precise character and line positions."""

import json
import sys
from bisect import bisect_right
from typing import Any

from .core.model import Item
from .core.scanners import line_terminator_length, scan_lines
from .core.slicer import find_item, item_path, parse_item_path, slice_item


def line_starts(text: str) -> list[int]:
    """Offsets where each line begins, using the parser's line boundaries."""
    starts = [0]
    for line_range, _line in scan_lines(text):
        if line_terminator_length(text, line_range):
            starts.append(line_range.end)
    return starts


def char_offset_to_line(text: str, offset: int, starts: list[int] | None = None) -> int:
    """
    Convert character offset to line number (1-based).

    Args:
        text: The full text
        offset: Character offset (0-based)
        starts: Precomputed `line_starts(text)`, when converting many offsets

    Returns:
        Line number (1-based)
    """
    if starts is None:
        starts = line_starts(text)
    return bisect_right(starts, min(offset, len(text)))


def locate_item(
    item: Item,
    roots: list[Item],
    text: str,
    format_type: str = "json",
) -> dict[str, Any] | str:
    """
    Get precise location information for an item and its subtree.

    Args:
        item: The item to locate
        roots: Root items of the tree the item belongs to
        text: The text the item was parsed from
        format_type: Output format ("json" or "tsv")

    Returns:
        Location information as dict (for JSON) or TSV string
    """
    start, end = slice_item(item)
    path = ".".join(str(i) for i in item_path(item, roots))

    starts = line_starts(text)
    start_line = char_offset_to_line(text, start, starts)
    # the last line of the subtree, not the line after its terminator
    end_line = char_offset_to_line(text, max(start, end - 1), starts)

    if format_type == "tsv":
        return f"{path}\t{item.type.value}\t{start}\t{end}\t{start_line}\t{end_line}"

    return {
        "path": path,
        "type": item.type.value,
        "range": {"start": start, "end": end},
        "content_range": {
            "start": item.content_range.start,
            "end": item.content_range.end,
        },
        "lines": {"start": start_line, "end": end_line},
    }


def cmd_locate(args: Any, rt: Any) -> int:
    """
    Locate command handler.

    Args:
        args: Parsed command-line arguments
        rt: Runtime instance

    Returns:
        Exit code
    """
    doc = rt.load(args.file)

    item = find_item(doc.items, parse_item_path(args.path))
    if item is None:
        print(f"Item {args.path} not found in {args.file}", file=sys.stderr)
        return 1

    format_type = getattr(args, "format", "json")
    location = locate_item(item, doc.items, doc.text, format_type)

    if format_type == "json":
        print(json.dumps(location, indent=2))
    else:
        print(location)

    return 0
