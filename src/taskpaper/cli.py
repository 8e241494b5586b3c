"""CLI for taskpaper - inspect TaskPaper outlines."""

import argparse
import logging
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import OUTPUT_FORMATS
from .core.slicer import find_item, parse_item_path, slice_item
from .locate import char_offset_to_line, cmd_locate, line_starts
from .runtime import build_runtime


def cmd_parse(args: argparse.Namespace, rt: Any) -> int:
    """Dump the parsed tree."""
    doc = rt.load(args.file)
    codec = rt.codec(args.format)
    sys.stdout.write(codec.encode(doc.items, doc.text))
    return 0


def cmd_tags(args: argparse.Namespace, rt: Any) -> int:
    """List tags, one per line: line number, name, value."""
    doc = rt.load(args.file)

    starts = line_starts(doc.text)
    rows = []
    for item in doc.walk():
        for tag in item.tags:
            if args.name and tag.name != args.name:
                continue
            line = char_offset_to_line(doc.text, tag.source_range.start, starts)
            rows.append((tag.source_range.start, line, tag.name, tag.value))

    rows.sort()
    for _offset, line, name, value in rows:
        if value is None:
            print(f"{line}\t{name}")
        else:
            print(f"{line}\t{name}\t{value}")

    if not rows and not args.quiet:
        print("No tags found", file=sys.stderr)
    return 0


def cmd_yank(args: argparse.Namespace, rt: Any) -> int:
    """Print the source text of an item, with its children by default."""
    doc = rt.load(args.file)

    item = find_item(doc.items, parse_item_path(args.path))
    if item is None:
        print(f"Item {args.path} not found in {args.file}", file=sys.stderr)
        return 1

    start, end = slice_item(item, include_children=not args.no_children)
    sys.stdout.write(doc.text[start:end])
    return 0


def _version_string() -> str:
    return (
        f"taskpaper {__version__}\n"
        f"python {platform.python_version()}\n"
        f"platform {platform.platform()}"
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="taskpaper",
        description="TaskPaper outline parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=_version_string()
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/taskpaper.toml, then next to FILE)",
    )
    parser.add_argument(
        "--normalize",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Convert \\r\\n and \\r line endings to \\n before parsing (default: from config)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging on stderr"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # parse command
    parser_parse = subparsers.add_parser("parse", help="Dump the parsed tree")
    parser_parse.add_argument("file", help="TaskPaper file ('-' for stdin)")
    parser_parse.add_argument(
        "--format", choices=OUTPUT_FORMATS, default=None,
        help="Output format (default: from config, else outline)"
    )

    # tags command
    parser_tags = subparsers.add_parser("tags", help="List tags")
    parser_tags.add_argument("file", help="TaskPaper file ('-' for stdin)")
    parser_tags.add_argument("--name", help="Only tags with this name")

    # yank command
    parser_yank = subparsers.add_parser("yank", help="Print an item's source text")
    parser_yank.add_argument("file", help="TaskPaper file ('-' for stdin)")
    parser_yank.add_argument("path", help="Item path, e.g. 0.2.1")
    parser_yank.add_argument(
        "--no-children", action="store_true",
        help="Only the item's own line"
    )

    # locate command
    parser_locate = subparsers.add_parser("locate", help="Get precise location of an item")
    parser_locate.add_argument("file", help="TaskPaper file ('-' for stdin)")
    parser_locate.add_argument("path", help="Item path, e.g. 0.2.1")
    parser_locate.add_argument(
        "--format", choices=["json", "tsv"], default="json",
        help="Output format (default: json)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    handlers = {
        "parse": cmd_parse,
        "tags": cmd_tags,
        "yank": cmd_yank,
        "locate": cmd_locate,
    }
    handler = handlers.get(args.cmd)

    if handler:
        try:
            # Build runtime
            document_path = None if args.file == "-" else Path(args.file)
            rt = build_runtime(
                config_path=args.config,
                document_path=document_path,
                normalize=args.normalize,
            )
            exit_code = handler(args, rt)
            sys.exit(exit_code)
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
