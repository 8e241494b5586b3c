import io
import json
from typing import Any

import yaml

from ..core.model import Item, Range, Tag
from ..core.ports import TreeCodec


def _range(rng: Range) -> dict[str, int]:
    return {"start": rng.start, "end": rng.end}


def _sorted_tags(item: Item) -> list[Tag]:
    return sorted(item.tags, key=lambda t: t.source_range.start)


def tag_to_dict(tag: Tag) -> dict[str, Any]:
    return {"name": tag.name, "value": tag.value, "range": _range(tag.source_range)}


def item_to_dict(item: Item, text: str) -> dict[str, Any]:
    return {
        "type": item.type.value,
        "content": item.content(text),
        "source_range": _range(item.source_range),
        "content_range": _range(item.content_range),
        "tags": [tag_to_dict(t) for t in _sorted_tags(item)],
        "children": [item_to_dict(c, text) for c in item.children],
    }


class JsonTreeCodec(TreeCodec):
    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def encode(self, items: list[Item], text: str) -> str:
        data = [item_to_dict(i, text) for i in items]
        return json.dumps(data, indent=self.indent, ensure_ascii=False) + "\n"


class YamlTreeCodec(TreeCodec):
    def encode(self, items: list[Item], text: str) -> str:
        buf = io.StringIO()
        yaml.safe_dump(
            [item_to_dict(i, text) for i in items],
            buf,
            sort_keys=False,
            allow_unicode=True,
        )
        return buf.getvalue()


class OutlineRenderer(TreeCodec):
    """One line per item: tab indentation, type, content, tags."""

    def encode(self, items: list[Item], text: str) -> str:
        lines = []
        for root in items:
            for item in root.walk():
                parts = [f"[{item.type.value}]"]
                content = item.content(text).strip()
                if content:
                    parts.append(content)
                # tags inside the content are already shown there
                parts.extend(
                    str(t)
                    for t in _sorted_tags(item)
                    if not item.content_range.contains(t.source_range)
                )
                lines.append("\t" * item.depth + " ".join(parts))
        return "".join(f"{ln}\n" for ln in lines)


CODECS: dict[str, type[TreeCodec]] = {
    "outline": OutlineRenderer,
    "json": JsonTreeCodec,
    "yaml": YamlTreeCodec,
}
