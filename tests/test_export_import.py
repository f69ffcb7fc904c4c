from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftest import MutableClock, make_challenge
from learning_tracker.db import Database
from learning_tracker.errors import ImportFormatError
from learning_tracker.manager.challenge_manager import ChallengeManager
from learning_tracker.manager.export_import import ExportImportManager, backup_file_name
from learning_tracker.manager.models import Snapshot
from learning_tracker.manager.storage import SnapshotStorage


@pytest.fixture
def wired(db_file: Path, clock: MutableClock):
    storage = SnapshotStorage(Database(db_file))
    manager = ChallengeManager(storage=storage, clock=clock)
    return manager, storage, ExportImportManager(manager)


def test_backup_file_name(manager: ChallengeManager) -> None:
    assert backup_file_name(manager) == "learning-tracker-backup-2024-03-10.json"


def test_export_into_directory(wired, tmp_path: Path) -> None:
    manager, _, exporter = wired
    challenge = manager.create_challenge("Daily Practice", 7, start_date="2024-03-01")
    manager.add_entry(challenge.id, 1, "Scales")

    path = exporter.export_to_path(tmp_path)

    assert path == tmp_path / "learning-tracker-backup-2024-03-10.json"
    text = path.read_text(encoding="utf-8")
    assert text.startswith("{\n  ")
    payload = json.loads(text)
    assert payload["version"] == "1.0"
    assert payload["challenges"][0]["entries"] == {"1": "Scales"}


def test_export_defaults_to_exports_dir(wired) -> None:
    manager, _, exporter = wired
    manager.create_challenge("A", 7)
    path = exporter.export_to_path()
    assert path.name == "learning-tracker-backup-2024-03-10.json"
    assert path.parent.name == "exports"


def test_import_selects_incomplete_challenge(wired, tmp_path: Path) -> None:
    manager, storage, exporter = wired
    manager.create_challenge("Old", 7)
    for order in ([1, 2], [2, 1]):
        records = {
            1: make_challenge(1, title="Done", completed=True),
            2: make_challenge(2, title="Ongoing", days=[1, 2]),
        }
        source = tmp_path / f"backup-{order[0]}.json"
        source.write_text(Snapshot(challenges=[records[i] for i in order]).to_json(indent=2), encoding="utf-8")

        snapshot = exporter.import_from_path(source)

        assert len(snapshot.challenges) == 2
        assert manager.active_id == 2
        assert {c.title for c in manager.list_challenges()} == {"Done", "Ongoing"}
        assert {c.id for c in storage.load().challenges} == {1, 2}


def test_import_accepts_browser_backup_format(wired, tmp_path: Path) -> None:
    manager, _, exporter = wired
    source = tmp_path / "learning-tracker-backup-2024-02-01.json"
    source.write_text(
        json.dumps(
            {
                "challenges": [
                    {
                        "id": 1706745600000,
                        "title": "30 days of SQL",
                        "totalDays": 30,
                        "description": "",
                        "startDate": "2024-02-01",
                        "entries": {"1": "joins", "2": "window functions"},
                        "completed": False,
                        "createdAt": "2024-02-01T08:00:00.000Z",
                    }
                ],
                "lastUpdated": "2024-02-02T21:00:00.000Z",
                "version": "1.0",
            }
        ),
        encoding="utf-8",
    )

    exporter.import_from_path(source)

    active = manager.active_challenge
    assert active is not None
    assert active.id == 1706745600000
    assert active.entries == {1: "joins", 2: "window functions"}
    created = manager.create_challenge("Next", 7)
    assert created.id == 1706745600001



def test_import_stores_backup_metadata_unchanged(wired, tmp_path: Path) -> None:
    manager, storage, exporter = wired
    manager.create_challenge("Old", 7)
    source = tmp_path / "backup.json"
    source.write_text(
        Snapshot(
            challenges=[make_challenge(4, days=[1])],
            last_updated="2024-02-02T21:00:00.000Z",
            version="0.9",
        ).to_json(indent=2),
        encoding="utf-8",
    )

    exporter.import_from_path(source)

    stored = storage.load()
    assert stored.last_updated == "2024-02-02T21:00:00.000Z"
    assert stored.version == "0.9"
    assert [c.id for c in stored.challenges] == [4]

@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        "[1, 2, 3]",
        json.dumps({"lastUpdated": "x"}),
        json.dumps({"challenges": {"id": 1}}),
        json.dumps({"challenges": [{"id": 1, "title": "x", "totalDays": 3, "startDate": "soon"}]}),
        json.dumps({"challenges": [{"id": 1, "title": "x", "totalDays": 3, "startDate": "2024-01-01", "entries": {"one": "x"}}]}),
        json.dumps({"challenges": [{"id": 1, "title": "x", "totalDays": 0, "startDate": "2024-01-01"}]}),
        json.dumps({"challenges": [{"id": 1, "title": "x", "totalDays": -5, "startDate": "2024-01-01"}]}),
        json.dumps({"challenges": [{"id": 1, "title": "x", "totalDays": 3, "startDate": "2024-01-01", "completed": "false"}]}),
        json.dumps({"challenges": [{"id": 1, "title": None, "totalDays": 3, "startDate": "2024-01-01"}]}),
        json.dumps({"challenges": [{"id": 1, "title": "x", "totalDays": 3, "startDate": "2024-01-01", "entries": {"1": 42}}]}),
    ],
)
def test_invalid_import_leaves_state_unchanged(wired, tmp_path: Path, content: str) -> None:
    manager, storage, exporter = wired
    kept = manager.create_challenge("Keep me", 7)
    source = tmp_path / "broken.json"
    source.write_text(content, encoding="utf-8")

    with pytest.raises(ImportFormatError):
        exporter.import_from_path(source)

    assert [c.id for c in manager.list_challenges()] == [kept.id]
    assert [c.title for c in storage.load().challenges] == ["Keep me"]


def test_missing_import_file(wired, tmp_path: Path) -> None:
    _, _, exporter = wired
    with pytest.raises(ImportFormatError):
        exporter.import_from_path(tmp_path / "nope.json")
