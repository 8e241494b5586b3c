"""TaskPaper documents.

A `TaskPaper` parses a string into a tree of `Item` objects:

    doc = TaskPaper("Shopping:\\n\\t- Buy milk @today\\n")
    project = doc.items[0]
    task = project.children[0]
    task.tag("today")

Every item keeps the ranges it was parsed from, and those ranges refer to
`doc.text`. With `ParseOptions(normalize=True)` the line endings are turned
into `\\n` first, so the ranges then point into the normalized text rather
than the caller's original string.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .adapters.taskpaper_parser import TaskPaperParser
from .core.model import Item
from .core.ports import ParserStrategy
from .format.text import normalize_text

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseOptions:
    """Options applied before parsing."""
    normalize: bool = False  # convert \r\n and \r line endings to \n


class TaskPaper:
    def __init__(
        self,
        text: str,
        options: ParseOptions | None = None,
        parser: ParserStrategy | None = None,
    ):
        self.options = options or ParseOptions()

        if self.options.normalize:
            normalized = normalize_text(text)
            if normalized != text:
                log.debug("Normalized line endings (%d -> %d chars)", len(text), len(normalized))
            text = normalized

        self.text = text
        self.items: list[Item] = (parser or TaskPaperParser()).parse(text)

    @classmethod
    def from_file(
        cls,
        path: Path,
        options: ParseOptions | None = None,
        parser: ParserStrategy | None = None,
    ) -> "TaskPaper":
        # newline="" keeps \r\n intact so offsets match the file contents
        with open(path, encoding="utf-8", newline="") as f:
            return cls(f.read(), options, parser)

    def walk(self) -> Iterator[Item]:
        """All items in document order."""
        for root in self.items:
            yield from root.walk()

    def find_items_with_tag(self, name: str) -> list[Item]:
        return [item for item in self.walk() if item.has_tag(name)]

    def __repr__(self) -> str:
        return f"TaskPaper(items={len(self.items)}, options={self.options})"


def parse(text: str, normalize: bool = False) -> TaskPaper:
    """Parse `text` into a `TaskPaper` document."""
    return TaskPaper(text, ParseOptions(normalize=normalize))
