import json
from datetime import date

import pytest

from habitcheck.services import (
    HabitSnapshot,
    JsonHabitRepository,
    RepositoryCorruptionError
)


def test_creates_empty_files(tmp_path):
    repository = JsonHabitRepository(tmp_path / "data")

    snapshot = repository.load()

    assert snapshot == HabitSnapshot()
    assert json.loads(repository.habits_file.read_text(encoding="utf-8")) == []
    assert repository.entries_file.exists()
    assert repository.day_tasks_file.exists()


def test_save_and_load(tmp_path, two_schedule_habits, two_schedule_entries):
    repository = JsonHabitRepository(tmp_path)
    repository.save(HabitSnapshot(habits=tuple(two_schedule_habits), entries=tuple(two_schedule_entries)))

    stored = json.loads(repository.habits_file.read_text(encoding="utf-8"))
    assert stored[0]["targetDays"] == [1, 3, 5]
    assert stored[0]["createdAt"] == "2026-01-05T12:00:00"

    snapshot = repository.load()
    assert [h.id for h in snapshot.habits] == ["h1", "h2"]
    assert snapshot.get_habit("h2").target_days == frozenset({2, 4, 6})
    assert [e.completion_day for e in snapshot.entries_for("h1")] == [date(2026, 1, 5), date(2026, 1, 9)]


def test_invalid_json_is_rejected(tmp_path):
    repository = JsonHabitRepository(tmp_path)
    repository.entries_file.write_text("{broken", encoding="utf-8")

    with pytest.raises(RepositoryCorruptionError):
        repository.load()


def test_invalid_record_is_rejected(tmp_path):
    repository = JsonHabitRepository(tmp_path)
    repository.habits_file.write_text(
        json.dumps([{"id": "h1", "title": "Bad", "targetDays": [1], "createdAt": "yesterday"}]),
        encoding="utf-8",
    )

    with pytest.raises(RepositoryCorruptionError):
        repository.load()


def test_non_list_file_is_rejected(tmp_path):
    repository = JsonHabitRepository(tmp_path)
    repository.day_tasks_file.write_text(json.dumps({"id": "t1"}), encoding="utf-8")

    with pytest.raises(RepositoryCorruptionError):
        repository.load()
