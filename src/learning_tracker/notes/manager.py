"""Entry-note access and markdown journal export."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from ..dates import date_for_day, format_full_date
from ..logger import configure_logging
from ..manager.challenge_manager import ChallengeManager
from ..manager.progress import progress_grid
from .editor import MarkdownRenderer

_LOG = configure_logging()


class NoteManager:
    """Wraps challenge entries with rendering and journal export."""

    def __init__(self, challenges: ChallengeManager, renderer: Optional[MarkdownRenderer] = None) -> None:
        self._challenges = challenges
        self._renderer = renderer or MarkdownRenderer()

    def load_entry(self, challenge_id: int, day_number: int) -> str:
        return self._challenges.get_challenge(challenge_id).entries.get(day_number, "")

    def save_entry(self, challenge_id: int, day_number: int, text: str) -> None:
        self._challenges.add_entry(challenge_id, day_number, text)
        _LOG.info("Saved entry for challenge %s day %s", challenge_id, day_number)

    def delete_entry(self, challenge_id: int, day_number: int) -> None:
        self._challenges.delete_entry(challenge_id, day_number)

    def render_entry(self, challenge_id: int, day_number: int) -> str:
        return self._renderer.render(self.load_entry(challenge_id, day_number))

    def render_day(self, challenge_id: int, day_number: int) -> str:
        """HTML for one day of the grid, or an empty string when it has no entry."""
        challenge = self._challenges.get_challenge(challenge_id)
        for cell in progress_grid(challenge, self._challenges.today()):
            if cell.day == day_number:
                return self._renderer.render_cell(cell)
        return ""

    def journal_markdown(self, challenge_id: int) -> str:
        challenge = self._challenges.get_challenge(challenge_id)
        lines: List[str] = [f"# {challenge.title}", ""]
        if challenge.description:
            lines.extend([challenge.description, ""])
        lines.extend([f"Started: {format_full_date(challenge.start_date)}", ""])
        for day in challenge.sorted_days():
            day_date = date_for_day(challenge.start_date, day)
            lines.append(f"## Day {day} - {format_full_date(day_date)}")
            lines.append("")
            lines.append(challenge.entries[day])
            lines.append("")
        return "\n".join(lines).rstrip() + "\n"

    def export_journal(self, challenge_id: int, destination: Path) -> Path:
        target = Path(destination)
        if target.is_dir():
            target = target / f"challenge-{challenge_id}-journal.md"
        target.write_text(self.journal_markdown(challenge_id), encoding="utf-8")
        _LOG.info("Exported journal for challenge %s to %s", challenge_id, target)
        return target
