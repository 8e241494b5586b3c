"""Formatting utilities for TaskPaper text."""

from .text import normalize_text

__all__ = [
    "normalize_text",
]
