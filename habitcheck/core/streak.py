# core/streak.py

import logging
import math
from datetime import timedelta
from typing import AbstractSet, Iterable, Sequence

from ..models.analytics import StreakResult
from ..models.enums import TransitionKind
from ..models.habit import CompletionEntry
from ..utils.datetime_utils import DateLike, start_of_day
from ..utils.numbers import round_half_up
from .simulation import completion_days, simulate_schedule

logger = logging.getLogger(__name__)


def calculate_current_streak(
    entries: Sequence[CompletionEntry],
    target_days: AbstractSet[int],
    today: DateLike,
) -> StreakResult:
    """
    Текущая серия с логикой надлома и восстановления.

    Дни от первого выполнения до вчерашнего дня проходят автомат полностью,
    сегодняшний день - льготный: выполнение засчитывается, а пропуск еще нет.
    """
    if not entries or not target_days:
        return StreakResult.empty()

    normalized_today = start_of_day(today)
    completed = completion_days(entries, until=normalized_today)
    if not completed:
        return StreakResult.empty()

    value = 0
    status = None
    for transition in simulate_schedule(target_days, completed, min(completed), normalized_today,
                                        grace_day=normalized_today):
        kind = transition.kind
        if kind == TransitionKind.EXTEND:
            value += 1
        elif kind == TransitionKind.RESTART:
            value = 1
        elif kind == TransitionKind.RECOVERY_STEP:
            value += 0.5
        elif kind == TransitionKind.RECOVERED:
            value = int(round_half_up(value + 0.5))
        elif kind == TransitionKind.COLLAPSE:
            value = 0
        status = transition.status

    if status is None:
        return StreakResult.empty()

    logger.debug(f"Серия на {normalized_today}: {value} ({status.value})")
    return StreakResult(value=value, display_count=math.floor(value), status=status)


def calculate_longest_streak(entries: Iterable[CompletionEntry]) -> int:
    """
    Самая длинная серия подряд идущих календарных дней.

    Расписание здесь не учитывается, в отличие от текущей серии.
    """
    days = sorted(completion_days(entries))
    if not days:
        return 0

    max_streak = 1
    current_streak = 1

    for i in range(1, len(days)):
        if days[i] == days[i - 1] + timedelta(days=1):
            current_streak += 1
            max_streak = max(max_streak, current_streak)
        else:
            current_streak = 1

    return max_streak
