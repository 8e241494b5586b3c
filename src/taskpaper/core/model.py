from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Range:
    start: int  # character offsets in the parsed text, half-open
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid range [{self.start}, {self.end})")

    @classmethod
    def from_span(cls, location: int, length: int) -> Range:
        return cls(location, location + length)

    @property
    def location(self) -> int:
        return self.start

    @property
    def length(self) -> int:
        return self.end - self.start

    def contains(self, other: Range) -> bool:
        return self.start <= other.start and other.end <= self.end

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


class ItemType(str, Enum):
    NOTE = "note"  # plain text line
    PROJECT = "project"  # line ending with ":"
    TASK = "task"  # line starting with "- ", "* ", "+ " or "\ "


@dataclass(eq=False)
class Tag:
    """
    An `@name` or `@name(value)` annotation.

    Tags compare and hash by name only, so a set of tags holds at most one
    tag per name.
    """

    name: str
    value: str | None = None
    source_range: Range = field(default_factory=lambda: Range(0, 0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        if self.value is None:
            return f"@{self.name}"
        return f"@{self.name}({self.value})"


@dataclass(eq=False)
class Item:
    """
    A single line of a TaskPaper document and its position in the tree.

    `source_range` covers the whole line, indentation and line terminator
    included. `content_range` covers only the meaningful text: indentation,
    the task marker or project colon, and trailing tags are left out.

    Items are owned by their parent's `children` list; `parent` is a plain
    back-reference used for upward navigation and is `None` for roots.
    """

    type: ItemType
    source_range: Range
    content_range: Range
    children: list[Item] = field(default_factory=list)
    tags: set[Tag] = field(default_factory=set)
    parent: Item | None = field(default=None, repr=False)

    def add_child(self, child: Item) -> None:
        child.parent = self
        self.children.append(child)

    def add_tags(self, new_tags: Iterable[Tag]) -> None:
        # Later tags replace earlier ones with the same name
        for tag in new_tags:
            self.tags.discard(tag)
            self.tags.add(tag)

    def tag(self, name: str) -> Tag | None:
        """Look up a tag by name (without the `@`)."""
        for tag in self.tags:
            if tag.name == name:
                return tag
        return None

    def has_tag(self, name: str) -> bool:
        return self.tag(name) is not None

    def enumerate(self, handler: Callable[[Item], None]) -> None:
        """
        Call `handler` for this item and then for every descendant.

        Traversal is depth-first pre-order with children visited in source
        order.
        """
        handler(self)
        for child in self.children:
            child.enumerate(handler)

    def walk(self) -> Iterator[Item]:
        """Yield this item and its descendants in the same order as `enumerate`."""
        yield self
        for child in self.children:
            yield from child.walk()

    @property
    def source_range_including_children(self) -> Range:
        """
        Range from the start of this line to the end of the last line in the
        subtree.
        """
        if not self.children:
            return self.source_range
        last = self.children[-1].source_range_including_children
        return Range(self.source_range.start, last.end)

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def content(self, text: str) -> str:
        return self.content_range.slice(text)
