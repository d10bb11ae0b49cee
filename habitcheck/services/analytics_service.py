# services/analytics_service.py

import logging
import uuid
from dataclasses import replace
from typing import Callable, List, Optional

from ..config import HabitCheckSettings, settings as default_settings
from ..core.behavior import analyze_behavioral_patterns
from ..core.dashboard import build_dashboard_summary
from ..core.history import generate_habit_history
from ..core.streak import calculate_current_streak
from ..core.timeline import build_month_day_views, build_thirty_day_timeline
from ..models.analytics import (
    BehavioralSummary,
    DashboardSummary,
    HabitHistory,
    StreakResult,
    TimelineDayItem
)
from ..models.habit import CompletionEntry, Habit
from ..utils.datetime_utils import DateLike, start_of_day, today_local
from .repository import HabitRepository, HabitSnapshot

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[HabitSnapshot], None]


class HabitNotFoundError(LookupError):
    """Привычка не найдена"""
    pass


class HabitAnalyticsService:
    """
    Связывает хранилище с чистым ядром вычислений.

    Возможности:
    - Сводка дашборда по всем привычкам
    - Текущая серия, поведенческий профиль и история по привычке
    - Таймлайн разовых задач за месяц
    - Добавление и удаление выполнений с обратным вызовом после сохранения
    """

    def __init__(self, repository: HabitRepository, settings: Optional[HabitCheckSettings] = None):
        self.repository = repository
        self.settings = settings or default_settings

    def _reference(self, reference_date: Optional[DateLike]):
        return start_of_day(reference_date) if reference_date is not None else today_local()

    def _require_habit(self, snapshot: HabitSnapshot, habit_id: str) -> Habit:
        habit = snapshot.get_habit(habit_id)
        if habit is None:
            logger.warning(f"⚠️ Привычка {habit_id} не найдена")
            raise HabitNotFoundError(f"Привычка {habit_id} не найдена")
        return habit

    # === АНАЛИТИКА ===

    def get_dashboard(self, reference_date: Optional[DateLike] = None) -> DashboardSummary:
        """Сводка дашборда на дату (по умолчанию сегодня)"""
        snapshot = self.repository.load()
        summary = build_dashboard_summary(
            snapshot.habits,
            snapshot.entries,
            self._reference(reference_date),
            weekly_window_days=self.settings.WEEKLY_WINDOW_DAYS,
        )
        logger.info(
            f"📊 Дашборд: {summary.total_habits} привычек, "
            f"выполнение {summary.completion_rate}%"
        )
        return summary

    def get_habit_streak(self, habit_id: str, reference_date: Optional[DateLike] = None) -> StreakResult:
        snapshot = self.repository.load()
        habit = self._require_habit(snapshot, habit_id)
        return calculate_current_streak(
            snapshot.entries_for(habit_id), habit.target_days, self._reference(reference_date)
        )

    def get_behavioral_summary(self, habit_id: str,
                               reference_date: Optional[DateLike] = None) -> BehavioralSummary:
        snapshot = self.repository.load()
        habit = self._require_habit(snapshot, habit_id)
        return analyze_behavioral_patterns(habit, snapshot.entries_for(habit_id), self._reference(reference_date))

    def get_habit_history(self, habit_id: str, reference_date: Optional[DateLike] = None) -> HabitHistory:
        snapshot = self.repository.load()
        habit = self._require_habit(snapshot, habit_id)
        return generate_habit_history(habit, snapshot.entries, self._reference(reference_date))

    def get_timeline(self, year: int, month: int) -> List[TimelineDayItem]:
        """Таймлайн челленджа для месяца"""
        snapshot = self.repository.load()
        day_views = build_month_day_views(year, month, snapshot.day_tasks, days=self.settings.TIMELINE_DAYS)
        return build_thirty_day_timeline(day_views)

    # === ИЗМЕНЕНИЯ ===

    def add_entry(self, habit_id: str, completed_at: DateLike,
                  on_change: Optional[ChangeCallback] = None) -> CompletionEntry:
        """Отметить выполнение привычки"""
        snapshot = self.repository.load()
        self._require_habit(snapshot, habit_id)

        entry = CompletionEntry(id=str(uuid.uuid4()), habit_id=habit_id, completed_at=completed_at)
        updated = replace(snapshot, entries=snapshot.entries + (entry,))
        self._commit(updated, on_change)

        logger.info(f"✅ Выполнение {habit_id} отмечено на {entry.completion_day}")
        return entry

    def remove_entries_for_day(self, habit_id: str, day: DateLike,
                               on_change: Optional[ChangeCallback] = None) -> int:
        """Удалить все выполнения привычки за календарный день"""
        snapshot = self.repository.load()
        self._require_habit(snapshot, habit_id)

        target_day = start_of_day(day)
        kept = tuple(
            entry for entry in snapshot.entries
            if not (entry.habit_id == habit_id and entry.completion_day == target_day)
        )
        removed = len(snapshot.entries) - len(kept)
        if removed:
            self._commit(replace(snapshot, entries=kept), on_change)
            logger.info(f"🗑️ Удалено выполнений {habit_id} за {target_day}: {removed}")

        return removed

    def _commit(self, snapshot: HabitSnapshot, on_change: Optional[ChangeCallback]) -> None:
        self.repository.save(snapshot)
        if on_change is not None:
            on_change(snapshot)
