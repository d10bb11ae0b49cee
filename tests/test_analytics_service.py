from datetime import date

import pytest
from conftest import day

from habitcheck.models import DayTask, StreakStatus, TimelineDayStatus
from habitcheck.services import (
    HabitAnalyticsService,
    HabitNotFoundError,
    HabitSnapshot,
    InMemoryHabitRepository,
    JsonHabitRepository
)


@pytest.fixture
def service(memory_repository):
    return HabitAnalyticsService(memory_repository)


def test_dashboard_for_reference_date(service):
    summary = service.get_dashboard(day("2026-01-11"))

    assert summary.consistency == 0.5
    assert summary.dominant_skip_day == 3


def test_dashboard_defaults_to_today(service):
    summary = service.get_dashboard()

    assert summary.total_habits == 2


def test_habit_level_queries(service):
    streak = service.get_habit_streak("h1", day("2026-01-11"))
    behavior = service.get_behavioral_summary("h2", day("2026-01-11"))
    history = service.get_habit_history("h1", day("2026-01-11"))

    assert streak.status == StreakStatus.FRACTURED
    assert streak.value == 1.5
    assert behavior.fragility_score == 1
    assert behavior.dominant_skip_days == (4, 6)
    assert history.total_completions == 2


def test_unknown_habit(service):
    with pytest.raises(HabitNotFoundError):
        service.get_habit_streak("missing", day("2026-01-11"))


def test_add_entry_invokes_callback_after_save(service, memory_repository):
    seen = []

    entry = service.add_entry("h1", day("2026-01-07"), on_change=seen.append)

    assert entry.habit_id == "h1"
    assert len(seen) == 1
    assert seen[0] is memory_repository.load()
    assert len(memory_repository.load().entries_for("h1")) == 3
    assert service.get_habit_streak("h1", day("2026-01-11")).status == StreakStatus.CLEAN


def test_add_entry_for_unknown_habit_does_not_save(service, memory_repository):
    before = memory_repository.load()

    with pytest.raises(HabitNotFoundError):
        service.add_entry("missing", day("2026-01-07"))

    assert memory_repository.load() is before


def test_remove_entries_for_day(service, memory_repository):
    seen = []
    service.add_entry("h1", day("2026-01-09").replace(hour=20))

    removed = service.remove_entries_for_day("h1", date(2026, 1, 9), on_change=seen.append)

    assert removed == 2
    assert len(seen) == 1
    assert [e.completion_day for e in memory_repository.load().entries_for("h1")] == [date(2026, 1, 5)]


def test_remove_nothing_skips_callback(service):
    seen = []
    assert service.remove_entries_for_day("h1", date(2026, 1, 7), on_change=seen.append) == 0
    assert seen == []


def test_timeline_for_month():
    repository = InMemoryHabitRepository(HabitSnapshot(day_tasks=(
        DayTask(id="t1", title="Plan", date=date(2024, 5, 1), completed=True),
        DayTask(id="t2", title="Ship", date=date(2024, 5, 2)),
    )))

    timeline = HabitAnalyticsService(repository).get_timeline(2024, 5)

    assert len(timeline) == 30
    assert timeline[0].status == TimelineDayStatus.COMPLETED
    assert timeline[1].status == TimelineDayStatus.IN_PROGRESS
    assert timeline[2].status == TimelineDayStatus.EMPTY


def test_service_over_json_repository(tmp_path, two_schedule_habits, two_schedule_entries):
    repository = JsonHabitRepository(tmp_path)
    repository.save(HabitSnapshot(habits=tuple(two_schedule_habits), entries=tuple(two_schedule_entries)))
    service = HabitAnalyticsService(repository)

    service.add_entry("h2", day("2026-01-08"))

    reloaded = JsonHabitRepository(tmp_path).load()
    assert len(reloaded.entries) == 4
    assert HabitAnalyticsService(JsonHabitRepository(tmp_path)).get_dashboard(day("2026-01-11")).consistency == 0.67
