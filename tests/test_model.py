"""Tests for the Item, Tag and Range data model."""

import pytest

from taskpaper.adapters.taskpaper_parser import TaskPaperParser
from taskpaper.core.model import Item, ItemType, Range, Tag


def test_range_span_helpers():
    """Test location/length aliases."""
    rng = Range.from_span(4, 3)

    assert rng == Range(4, 7)
    assert rng.location == 4
    assert rng.length == 3
    assert rng.slice("0123456789") == "456"


def test_range_contains():
    """Test range containment."""
    outer = Range(2, 10)

    assert outer.contains(Range(2, 10))
    assert outer.contains(Range(5, 5))
    assert not outer.contains(Range(1, 4))
    assert not outer.contains(Range(9, 11))


@pytest.mark.parametrize("start,end", [(-1, 2), (5, 4)])
def test_range_rejects_invalid_bounds(start, end):
    """Test that an inverted or negative range fails immediately."""
    with pytest.raises(ValueError):
        Range(start, end)


def test_tag_equality_by_name():
    """Test that tags with the same name are the same set member."""
    a = Tag("due", "mon", Range(0, 9))
    b = Tag("due", "fri", Range(20, 29))

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Tag("done")


def test_tag_str():
    """Test the source-like string form of a tag."""
    assert str(Tag("done")) == "@done"
    assert str(Tag("due", "2024-12-31")) == "@due(2024-12-31)"


def test_add_tags_last_wins():
    """Test that a later tag replaces an earlier one with the same name."""
    item = Item(ItemType.TASK, Range(0, 10), Range(2, 5))
    item.add_tags([Tag("p", "1"), Tag("p", "2")])
    item.add_tags([Tag("x")])

    assert len(item.tags) == 2
    assert item.tag("p").value == "2"


def test_add_child_sets_parent():
    """Test that add_child links both ways."""
    parent = Item(ItemType.PROJECT, Range(0, 4), Range(0, 2))
    child = Item(ItemType.TASK, Range(4, 9), Range(7, 8))
    parent.add_child(child)

    assert parent.children == [child]
    assert child.parent is parent
    assert child.depth == 1


def test_items_compare_by_identity():
    """Test that two equal-looking items are distinct."""
    a = Item(ItemType.NOTE, Range(0, 1), Range(0, 0))
    b = Item(ItemType.NOTE, Range(0, 1), Range(0, 0))

    assert a != b
    assert a == a


def test_repr_does_not_recurse_into_parent():
    """Test that repr of a child does not include its parent."""
    parent = Item(ItemType.PROJECT, Range(0, 4), Range(0, 2))
    child = Item(ItemType.TASK, Range(4, 9), Range(7, 8))
    parent.add_child(child)

    assert "parent" not in repr(child)
    assert "TASK" in repr(parent)


def test_enumerate_flat_structure():
    """Test enumerate over roots without children."""
    items = TaskPaperParser().parse("First\nSecond\nThird")
    count = 0

    def visit(_item):
        nonlocal count
        count += 1

    for item in items:
        item.enumerate(visit)
    assert count == 3


def test_enumerate_nested_structure():
    """Test that enumerate visits the whole subtree."""
    text = "Project:\n\t- Task 1\n\t- Task 2\n\t\tNote under task 2\n"
    items = TaskPaperParser().parse(text)
    visited = []

    items[0].enumerate(visited.append)
    assert len(visited) == 4


def test_enumerate_order_is_depth_first():
    """Test pre-order, children in source order."""
    text = "A:\n\tB\n\t\tC\n\tD"
    items = TaskPaperParser().parse(text)
    visited = []

    items[0].enumerate(lambda item: visited.append(item.content(text).strip()[0]))
    assert visited == ["A", "B", "C", "D"]


def test_walk_matches_enumerate_and_restarts():
    """Test that walk() yields the enumerate order every time it is called."""
    text = "A:\n\tB\n\t\tC\n\tD\nE"
    root = TaskPaperParser().parse(text)[0]
    visited = []
    root.enumerate(visited.append)

    assert list(root.walk()) == visited
    assert list(root.walk()) == visited


def test_source_range_including_children():
    """Test that the subtree range stops before the next root."""
    text = "Project:\n\tChild 1\n\tChild 2\nNext item\n"
    items = TaskPaperParser().parse(text)
    rng = items[0].source_range_including_children

    assert rng == Range(0, 27)
    extracted = rng.slice(text)
    assert "Project:" in extracted
    assert "Child 2" in extracted
    assert "Next item" not in extracted


def test_source_range_including_children_nested_last():
    """Test that the range follows the deepest last descendant."""
    text = "A\n\tB\n\t\tC\nD\n"
    a = TaskPaperParser().parse(text)[0]

    assert a.source_range_including_children == Range(0, 9)
    assert a.children[0].source_range_including_children == Range(2, 9)


def test_source_range_including_children_leaf():
    """Test that a leaf's subtree range is its own line."""
    item = TaskPaperParser().parse("- Task\n")[0]
    assert item.source_range_including_children == item.source_range
