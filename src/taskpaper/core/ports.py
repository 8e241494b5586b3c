from typing import Protocol

from .model import Item


class ParserStrategy(Protocol):
    """
    Turn a text buffer into a tree of items. Every line becomes exactly one
    item; parsing MUST NOT fail on any string input.
    """

    def parse(self, text: str) -> list[Item]:
        pass


class TreeCodec(Protocol):
    """
    Dump a parsed tree for inspection. One-way: nothing reads it back.
    """

    def encode(self, items: list[Item], text: str) -> str:
        pass
