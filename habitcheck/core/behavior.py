# core/behavior.py

import logging
from typing import Sequence

from ..models.analytics import BehavioralSummary
from ..models.enums import TransitionKind
from ..models.habit import CompletionEntry, Habit
from ..utils.datetime_utils import DateLike, start_of_day
from ..utils.numbers import round_half_up, safe_ratio
from .simulation import completion_days, simulate_schedule

logger = logging.getLogger(__name__)


def dominant_weekdays(skip_day_counts: Sequence[int]) -> tuple:
    """Все дни недели с максимальным числом пропусков (пусто, если пропусков нет)"""
    max_skips = max(skip_day_counts) if skip_day_counts else 0
    if max_skips <= 0:
        return ()
    return tuple(day for day, count in enumerate(skip_day_counts) if count == max_skips)


def analyze_behavioral_patterns(
    habit: Habit,
    entries: Sequence[CompletionEntry],
    today: DateLike,
) -> BehavioralSummary:
    """
    Поведенческий профиль привычки за период [start_date, today].

    consistency - доля выполненных запланированных дней,
    fragility - отношение надломов чистой серии к выполнениям (не выше 1),
    dominant_skip_days - дни недели с максимумом пропусков,
    average_recovery_time - среднее число выполнений до возврата в CLEAN.
    """
    normalized_today = start_of_day(today)
    completed = completion_days(entries)

    total_scheduled_days = 0
    total_completions = 0
    streak_interruptions = 0
    recovery_total_steps = 0
    recovery_events = 0
    awaiting_recovery = False
    skip_day_counts = [0] * 7

    for transition in simulate_schedule(habit.target_days, completed, habit.effective_start, normalized_today):
        total_scheduled_days += 1

        if transition.completed:
            total_completions += 1
            if transition.kind in (TransitionKind.RESTART, TransitionKind.RECOVERED) and awaiting_recovery:
                recovery_total_steps += transition.recovery_steps
                recovery_events += 1
                awaiting_recovery = False
        else:
            skip_day_counts[transition.weekday] += 1
            if transition.kind == TransitionKind.FRACTURE:
                streak_interruptions += 1
                awaiting_recovery = True

    consistency_score = safe_ratio(total_completions, total_scheduled_days)
    fragility_score = min(1.0, safe_ratio(streak_interruptions, total_completions))
    average_recovery_time = safe_ratio(recovery_total_steps, recovery_events)

    logger.debug(
        f"Анализ {habit.id}: {total_completions}/{total_scheduled_days} выполнений, "
        f"{streak_interruptions} надломов, {recovery_events} восстановлений"
    )

    return BehavioralSummary(
        habit_id=habit.id,
        consistency_score=round_half_up(consistency_score, 2),
        fragility_score=round_half_up(fragility_score, 2),
        dominant_skip_days=dominant_weekdays(skip_day_counts),
        average_recovery_time=round_half_up(average_recovery_time, 1),
    )
