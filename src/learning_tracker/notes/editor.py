"""HTML rendering of entry notes."""

from __future__ import annotations

import html
from functools import cached_property
from typing import Iterable

import markdown2

from ..manager.models import DayCell

ENTRY_EXTRAS = ("fenced-code-blocks", "strike", "task_list", "tables")


class MarkdownRenderer:
    """Turns free-text entry notes into HTML.

    HTML typed into a note is escaped, never passed through.
    """

    def __init__(self, extras: Iterable[str] = ENTRY_EXTRAS) -> None:
        self.extras = list(extras)

    @cached_property
    def _converter(self) -> markdown2.Markdown:
        return markdown2.Markdown(extras=self.extras, safe_mode="escape")

    def render(self, text: str) -> str:
        if not text or not text.strip():
            return ""
        return str(self._converter.convert(text.strip()))

    def render_cell(self, cell: DayCell) -> str:
        """One grid day as a ``<section>`` headed by its date label."""
        if cell.entry is None:
            return ""
        return (
            f'<section class="day day-{cell.status.value}">'
            f"<h3>{html.escape(cell.label)}</h3>\n{self.render(cell.entry)}</section>"
        )
