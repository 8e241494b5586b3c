import logging

from ..core.model import Item, ItemType, Range, Tag
from ..core.ports import ParserStrategy
from ..core.scanners import (
    HORIZONTAL_SPACE,
    line_terminator_length,
    scan_indent,
    scan_lines,
    scan_project,
    scan_tags,
    scan_task,
)

log = logging.getLogger(__name__)


class TaskPaperParser(ParserStrategy):
    def parse(self, text: str) -> list[Item]:
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        items: list[Item] = []
        line_count = 0

        for line_range, _line in scan_lines(text):
            line_count += 1
            indent_range = scan_indent(text, line_range)

            # body excludes indentation and the line terminator
            body_end = line_range.end - line_terminator_length(text, line_range)
            body_range = Range(indent_range.end, body_end)

            # tags come first, since the body excludes trailing tags
            tags = self.tags_for_line(text, line_range)

            trailing_range = self.trailing_range_for_line(text, body_range, tags)
            if trailing_range is not None:
                body_range = Range(body_range.start, trailing_range.start)

            item = self.item_for_line(text, line_range, body_range)
            item.add_tags(tags)

            self.attach_item(items, item, indent_range.length)

        log.debug("Parsed %d lines into %d root items", line_count, len(items))
        return items

    def tags_for_line(self, text: str, line_range: Range) -> list[Tag]:
        tags = []
        for result in scan_tags(text, line_range):
            value = None
            if result.value_range is not None:
                value = result.value_range.slice(text)
            tags.append(
                Tag(
                    name=result.name_range.slice(text),
                    value=value,
                    source_range=result.range,
                )
            )
        return tags

    def trailing_range_for_line(
        self, text: str, body_range: Range, tags: list[Tag]
    ) -> Range | None:
        """
        Range of the run of tags that ends the body, or None.

        Tags in the run may be separated by spaces or tabs but by nothing
        else. Whitespace before the first tag of the run is not part of it.
        """
        if not tags:
            return None

        last = tags[-1].source_range
        if last.end != body_range.end:
            return None

        start = last.start
        for tag in reversed(tags[:-1]):
            gap = text[tag.source_range.end : start]
            if tag.source_range.start < body_range.start or gap.strip(HORIZONTAL_SPACE):
                break
            start = tag.source_range.start

        return Range(start, body_range.end)

    def item_for_line(self, text: str, line_range: Range, body_range: Range) -> Item:
        task_range = scan_task(text, body_range)
        if task_range is not None:
            content_range = Range(task_range.end, body_range.end)
            return Item(ItemType.TASK, line_range, content_range)

        colon_range = scan_project(text, body_range)
        if colon_range is not None:
            content_range = Range(body_range.start, colon_range.start)
            return Item(ItemType.PROJECT, line_range, content_range)

        return Item(ItemType.NOTE, line_range, body_range)

    def attach_item(self, items: list[Item], item: Item, level: int) -> None:
        """
        Attach `item` at indentation `level` into the tree rooted at `items`.

        The parent is found by walking "last child of last child" down from the
        most recent root, at most `level` steps. A line indented deeper than
        the current tree ends up under the deepest item available.
        """
        container = None

        if items and level > 0:
            container = items[-1]
            container_level = 1
            while container.children and container_level < level:
                container = container.children[-1]
                container_level += 1

        if container is not None:
            container.add_child(item)
        else:
            items.append(item)
