# core/simulation.py
"""
Посуточная симуляция автомата серии CLEAN / FRACTURED / RESET.

Обход запланированных дней выдает поток переходов; движок серий и
поведенческий анализатор сворачивают один и тот же поток в свои счетчики.
"""

from dataclasses import dataclass
from datetime import date
from typing import AbstractSet, Iterable, Iterator, Optional, Set

from ..models.enums import StreakStatus, TransitionKind
from ..models.habit import CompletionEntry
from ..utils.datetime_utils import DateLike, iter_days, start_of_day, weekday_index

# Сколько выполнений подряд нужно, чтобы из FRACTURED вернуться в CLEAN
RECOVERY_STEPS_REQUIRED = 2


@dataclass(frozen=True)
class Transition:
    """Переход автомата за один запланированный день"""
    day: date
    weekday: int
    completed: bool
    previous: StreakStatus
    status: StreakStatus
    kind: TransitionKind
    recovery_steps: int = 0  # шагов потрачено на возврат в CLEAN (для RESTART/RECOVERED)


class StreakStateMachine:
    """Автомат состояния серии. Начальное состояние RESET."""

    def __init__(self):
        self.status = StreakStatus.RESET
        self.recovery_step = 0

    def step(self, day: date, completed: bool) -> Transition:
        previous = self.status
        recovery_steps = 0

        if completed:
            if previous == StreakStatus.CLEAN:
                kind = TransitionKind.EXTEND
            else:
                self.recovery_step += 1
                if previous == StreakStatus.RESET or self.recovery_step >= RECOVERY_STEPS_REQUIRED:
                    kind = TransitionKind.RESTART if previous == StreakStatus.RESET else TransitionKind.RECOVERED
                    recovery_steps = self.recovery_step
                    self.status = StreakStatus.CLEAN
                    self.recovery_step = 0
                else:
                    kind = TransitionKind.RECOVERY_STEP
        else:
            if previous == StreakStatus.CLEAN:
                kind = TransitionKind.FRACTURE
                self.status = StreakStatus.FRACTURED
            elif previous == StreakStatus.FRACTURED:
                kind = TransitionKind.COLLAPSE
                self.status = StreakStatus.RESET
            else:
                kind = TransitionKind.IDLE
            self.recovery_step = 0

        return Transition(
            day=day,
            weekday=weekday_index(day),
            completed=completed,
            previous=previous,
            status=self.status,
            kind=kind,
            recovery_steps=recovery_steps,
        )


def completion_days(entries: Iterable[CompletionEntry], until: Optional[date] = None) -> Set[date]:
    """Уникальные дни выполнения (несколько записей за день = один день)"""
    days = {entry.completion_day for entry in entries}
    if until is not None:
        days = {day for day in days if day <= until}
    return days


def simulate_schedule(
    target_days: AbstractSet[int],
    completed_days: AbstractSet[date],
    start: DateLike,
    end: DateLike,
    grace_day: Optional[date] = None,
) -> Iterator[Transition]:
    """Обход [start, end] по запланированным дням.

    Незапланированные дни пропускаются. Если grace_day запланирован, но
    еще не выполнен, за него переход не выдается: день не окончен.
    """
    machine = StreakStateMachine()
    for day in iter_days(start, end):
        if weekday_index(day) not in target_days:
            continue
        completed = day in completed_days
        if day == grace_day and not completed:
            continue
        yield machine.step(day, completed)


def count_opportunities(
    target_days: AbstractSet[int],
    completed_days: AbstractSet[date],
    start: DateLike,
    end: DateLike,
    skip_day_counts: Optional[list] = None,
) -> tuple:
    """Подсчет (возможностей, выполнений) за [start, end].

    Пропущенные запланированные дни добавляются в skip_day_counts по дню недели.
    """
    opportunities = 0
    completed = 0
    for day in iter_days(start_of_day(start), start_of_day(end)):
        weekday = weekday_index(day)
        if weekday not in target_days:
            continue
        opportunities += 1
        if day in completed_days:
            completed += 1
        elif skip_day_counts is not None:
            skip_day_counts[weekday] += 1
    return opportunities, completed
