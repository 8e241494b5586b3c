"""Parse TaskPaper outlines into a tree of items with exact source ranges."""

__version__ = "0.3.0"

from .core.model import Item, ItemType, Range, Tag  # noqa: E402
from .document import ParseOptions, TaskPaper, parse  # noqa: E402

__all__ = [
    "Item",
    "ItemType",
    "ParseOptions",
    "Range",
    "Tag",
    "TaskPaper",
    "parse",
]
