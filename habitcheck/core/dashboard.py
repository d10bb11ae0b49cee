# core/dashboard.py

import logging
from typing import Dict, List, Sequence

from ..models.analytics import DashboardSummary, WeeklyPerformance
from ..models.habit import CompletionEntry, Habit
from ..utils.datetime_utils import DateLike, add_days, start_of_day
from ..utils.numbers import round_half_up, safe_ratio
from .behavior import analyze_behavioral_patterns
from .simulation import completion_days, count_opportunities
from .streak import calculate_current_streak, calculate_longest_streak

logger = logging.getLogger(__name__)

WEEKLY_WINDOW_DAYS = 7


def _entries_by_habit(entries: Sequence[CompletionEntry], until) -> Dict[str, List[CompletionEntry]]:
    grouped: Dict[str, List[CompletionEntry]] = {}
    for entry in entries:
        if entry.completion_day <= until:
            grouped.setdefault(entry.habit_id, []).append(entry)
    return grouped


def _mean(values: Sequence[float]) -> float:
    return safe_ratio(sum(values), len(values))


def build_dashboard_summary(
    habits: Sequence[Habit],
    entries: Sequence[CompletionEntry],
    reference_date: DateLike,
    weekly_window_days: int = WEEKLY_WINDOW_DAYS,
) -> DashboardSummary:
    """
    Сводка по всем привычкам на дату reference_date.

    current_streak - сумма текущих серий, longest_streak - максимум,
    fragility и recovery_speed - средние по привычкам (нулевое время
    восстановления в среднее не входит), dominant_skip_day - день недели
    с наибольшим числом пропусков среди всех привычек.
    """
    today = start_of_day(reference_date)
    weekly_start = add_days(today, -(weekly_window_days - 1))
    grouped = _entries_by_habit(entries, today)

    skip_day_counts = [0] * 7
    opportunities_total = 0
    completed_total = 0
    current_streak = 0
    longest_streak = 0
    weekly_opportunities = 0
    weekly_completed = 0

    fragility_scores: List[float] = []
    recovery_speeds: List[float] = []

    for habit in habits:
        habit_start = habit.effective_start
        if habit_start > today:
            continue

        habit_entries = grouped.get(habit.id, [])
        completed = completion_days(habit_entries)

        opportunities, done = count_opportunities(
            habit.target_days, completed, habit_start, today, skip_day_counts
        )
        opportunities_total += opportunities
        completed_total += done

        streak = calculate_current_streak(habit_entries, habit.target_days, today)
        current_streak += streak.display_count
        longest_streak = max(longest_streak, calculate_longest_streak(habit_entries))

        behavior = analyze_behavioral_patterns(habit, habit_entries, today)
        fragility_scores.append(behavior.fragility_score)
        if behavior.average_recovery_time > 0:
            recovery_speeds.append(behavior.average_recovery_time)

        window_start = max(habit_start, weekly_start)
        weekly = count_opportunities(habit.target_days, completed, window_start, today)
        weekly_opportunities += weekly[0]
        weekly_completed += weekly[1]

    max_skips = max(skip_day_counts)
    dominant_skip_day = skip_day_counts.index(max_skips) if max_skips > 0 else None

    consistency = safe_ratio(completed_total, opportunities_total)
    weekly_rate = safe_ratio(weekly_completed, weekly_opportunities) * 100

    logger.debug(
        f"Дашборд на {today}: {len(habits)} привычек, "
        f"{completed_total}/{opportunities_total} возможностей выполнено"
    )

    return DashboardSummary(
        consistency=round_half_up(consistency, 2),
        fragility=round_half_up(_mean(fragility_scores), 2),
        dominant_skip_day=dominant_skip_day,
        recovery_speed=round_half_up(_mean(recovery_speeds), 1),
        current_streak=current_streak,
        longest_streak=longest_streak,
        total_habits=len(habits),
        completion_rate=round_half_up(consistency * 100, 1),
        weekly_performance=WeeklyPerformance(
            completed=weekly_completed,
            opportunities=weekly_opportunities,
            completion_rate=round_half_up(weekly_rate, 1),
        ),
    )
