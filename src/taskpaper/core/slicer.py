"""Addressing items by position and slicing their text."""

from .model import Item


def parse_item_path(spec: str) -> list[int]:
    """
    Parse a dotted item path.

    "0" is the first root item, "0.2" its third child, and so on.

    Raises:
        ValueError: if any component is not a non-negative integer
    """
    parts = spec.strip().split(".")
    path = []
    for part in parts:
        if not part.isdigit():
            raise ValueError(f"Invalid item path: {spec!r}")
        path.append(int(part))
    return path


def find_item(items: list[Item], path: list[int]) -> Item | None:
    """Follow `path` from the root items; None if it leads nowhere."""
    if not path:
        return None

    siblings = items
    item = None
    for index in path:
        if index >= len(siblings):
            return None
        item = siblings[index]
        siblings = item.children
    return item


def item_path(item: Item, roots: list[Item]) -> list[int]:
    """Inverse of `find_item`."""
    path = []
    node = item
    while node.parent is not None:
        path.append(_index_of(node, node.parent.children))
        node = node.parent
    path.append(_index_of(node, roots))
    path.reverse()
    return path


def _index_of(item: Item, siblings: list[Item]) -> int:
    for i, sibling in enumerate(siblings):
        if sibling is item:
            return i
    raise ValueError("Item is not attached to the given tree")


def slice_item(item: Item, include_children: bool = True) -> tuple[int, int]:
    """
    Get the range to slice for an item.

    - include_children: the item line plus every line of its subtree
    - otherwise: just the item's own line

    Returns (start, end) character offsets.
    """
    if include_children:
        rng = item.source_range_including_children
    else:
        rng = item.source_range
    return (rng.start, rng.end)
