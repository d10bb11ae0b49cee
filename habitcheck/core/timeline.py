# core/timeline.py

from datetime import date, timedelta
from typing import Iterable, List, Sequence

from ..models.analytics import DayTaskView, TimelineDayItem
from ..models.enums import TimelineDayStatus
from ..models.habit import DayTask
from ..utils.datetime_utils import DateLike, date_key

TIMELINE_DAYS = 30


def resolve_timeline_day_status(tasks_for_selected_day: Sequence) -> TimelineDayStatus:
    """
    Статус дня по его задачам.

    Нет задач - EMPTY, все выполнены - COMPLETED, иначе IN_PROGRESS
    (в том числе когда не выполнено ни одной).
    """
    if not tasks_for_selected_day:
        return TimelineDayStatus.EMPTY

    if all(task.completed for task in tasks_for_selected_day):
        return TimelineDayStatus.COMPLETED

    return TimelineDayStatus.IN_PROGRESS


def build_thirty_day_timeline(day_views: Iterable[DayTaskView]) -> List[TimelineDayItem]:
    return [
        TimelineDayItem(
            day_number=int(view.selected_date.split("-")[2]),
            status=resolve_timeline_day_status(view.tasks_for_selected_day),
        )
        for view in day_views
    ]


def derive_day_task_view(selected_date: DateLike, day_tasks: Iterable[DayTask]) -> DayTaskView:
    """Задачи, относящиеся к выбранному дню"""
    selected_key = date_key(selected_date)
    return DayTaskView(
        selected_date=selected_key,
        tasks_for_selected_day=tuple(task for task in day_tasks if task.date_key == selected_key),
    )


def build_month_day_views(
    year: int,
    month: int,
    day_tasks: Sequence[DayTask],
    days: int = TIMELINE_DAYS,
) -> List[DayTaskView]:
    """Представления дней 1..days месяца.

    Если в месяце меньше дней, окно продолжается в следующий месяц.
    """
    first_day = date(year, month, 1)
    return [
        derive_day_task_view(first_day + timedelta(days=offset), day_tasks)
        for offset in range(days)
    ]
