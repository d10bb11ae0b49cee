"""Shared pytest fixtures for HabitCheck tests."""
from datetime import date, datetime, timedelta

import pytest

from habitcheck.models import CompletionEntry, Habit
from habitcheck.services import HabitSnapshot, InMemoryHabitRepository

EVERY_DAY = frozenset(range(7))


def day(ymd: str) -> datetime:
    """Полдень указанного дня, как в фикстурах исходных данных"""
    return datetime.fromisoformat(f"{ymd}T12:00:00")


def entries_for(habit_id: str, *ymds: str):
    return [
        CompletionEntry(id=f"{habit_id}-{i}", habit_id=habit_id, completed_at=day(ymd))
        for i, ymd in enumerate(ymds)
    ]


@pytest.fixture
def daily_habit():
    return Habit(id="h1", title="Daily Habit", target_days=EVERY_DAY, created_at=day("2023-01-01"))


@pytest.fixture
def two_schedule_habits():
    return [
        Habit(id="h1", title="Workout", target_days=[1, 3, 5], created_at=day("2026-01-05")),
        Habit(id="h2", title="Read", target_days=[2, 4, 6], created_at=day("2026-01-05")),
    ]


@pytest.fixture
def two_schedule_entries():
    return entries_for("h1", "2026-01-05", "2026-01-09") + entries_for("h2", "2026-01-06")


@pytest.fixture
def memory_repository(two_schedule_habits, two_schedule_entries):
    return InMemoryHabitRepository(HabitSnapshot(
        habits=tuple(two_schedule_habits),
        entries=tuple(two_schedule_entries),
    ))


@pytest.fixture
def every_day_between():
    def _build(habit_id: str, start: date, count: int, skip=lambda d: False):
        result = []
        for offset in range(count):
            current = start + timedelta(days=offset)
            if not skip(current):
                result.append(CompletionEntry(id=f"e{offset}", habit_id=habit_id, completed_at=current))
        return result
    return _build
