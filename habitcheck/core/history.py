# core/history.py

from typing import Sequence

from ..models.analytics import HabitHistory
from ..models.habit import CompletionEntry, Habit
from ..utils.datetime_utils import DateLike, start_of_day
from ..utils.numbers import round_half_up, safe_ratio
from .simulation import completion_days, count_opportunities
from .streak import calculate_current_streak, calculate_longest_streak


def calculate_completion_rate(
    habit: Habit,
    entries: Sequence[CompletionEntry],
    reference_date: DateLike,
) -> float:
    """Процент выполнения (0-100) относительно запланированных дней с даты старта"""
    start = habit.effective_start
    end = start_of_day(reference_date)
    if start > end:
        return 0.0

    scheduled_days, _ = count_opportunities(habit.target_days, set(), start, end)
    if scheduled_days == 0:
        return 0.0

    # Выполнения в незапланированные дни тоже засчитываются, поэтому результат ограничен 100
    unique_days = {day for day in completion_days(entries, until=end) if day >= start}
    rate = safe_ratio(len(unique_days), scheduled_days) * 100
    return min(100.0, round_half_up(rate, 1))


def generate_habit_history(
    habit: Habit,
    entries: Sequence[CompletionEntry],
    reference_date: DateLike,
) -> HabitHistory:
    habit_entries = [entry for entry in entries if entry.habit_id == habit.id]
    streak = calculate_current_streak(habit_entries, habit.target_days, reference_date)

    return HabitHistory(
        habit_id=habit.id,
        streak_value=streak.value,
        streak_status=streak.status,
        current_streak=streak.display_count,
        longest_streak=calculate_longest_streak(habit_entries),
        total_completions=len(completion_days(habit_entries)),
        completion_rate=calculate_completion_rate(habit, habit_entries, reference_date),
    )
