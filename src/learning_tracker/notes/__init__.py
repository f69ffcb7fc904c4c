"""Entry-note helpers for the learning tracker."""

from .manager import NoteManager
from .editor import MarkdownRenderer

__all__ = ["NoteManager", "MarkdownRenderer"]
