# models/habit.py

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any, Dict, FrozenSet, Iterable, Optional, Union

from ..utils.datetime_utils import DateLike, date_key, start_of_day

WEEKDAYS = frozenset(range(7))


class ValidationError(Exception):
    """Ошибка валидации данных"""
    pass


def validate_identifier(value: str, field_name: str = "id") -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} должен быть непустой строкой")
    return value


def validate_target_days(days: Iterable[int]) -> FrozenSet[int]:
    """Валидация дней недели (0 = воскресенье ... 6 = суббота)"""
    result = frozenset(days)
    invalid = sorted(d for d in result if not isinstance(d, int) or d not in WEEKDAYS)
    if invalid:
        raise ValidationError(f"target_days содержит недопустимые дни недели: {invalid}")
    return result


def _serialize_date(value: Optional[DateLike]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()


@dataclass(frozen=True)
class Habit:
    """Привычка с недельным расписанием"""
    id: str
    title: str
    target_days: FrozenSet[int]
    created_at: DateLike
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None
    description: Optional[str] = None

    def __post_init__(self):
        validate_identifier(self.id, "id")
        object.__setattr__(self, "target_days", validate_target_days(self.target_days))

    @property
    def effective_start(self) -> date:
        """Первый запланированный день: start_date или дата создания"""
        return start_of_day(self.start_date or self.created_at)

    def is_scheduled(self, weekday: int) -> bool:
        return weekday in self.target_days

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "target_days": sorted(self.target_days),
            "created_at": _serialize_date(self.created_at),
            "start_date": _serialize_date(self.start_date),
            "end_date": _serialize_date(self.end_date),
            "description": self.description,
        }


@dataclass(frozen=True)
class CompletionEntry:
    """Запись о выполнении привычки"""
    id: str
    habit_id: str
    completed_at: DateLike
    notes: Optional[str] = None

    def __post_init__(self):
        validate_identifier(self.habit_id, "habit_id")

    @property
    def completion_day(self) -> date:
        return start_of_day(self.completed_at)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "habit_id": self.habit_id,
            "completed_at": _serialize_date(self.completed_at),
            "notes": self.notes,
        }


@dataclass(frozen=True)
class DayTask:
    """Разовая задача на конкретный день"""
    id: str
    title: str
    date: date
    completed: bool = False

    def __post_init__(self):
        validate_identifier(self.id, "id")
        if isinstance(self.date, datetime):
            object.__setattr__(self, "date", start_of_day(self.date))

    @property
    def date_key(self) -> str:
        return date_key(self.date)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["date"] = self.date_key
        return data


TrackedItem = Union[Habit, DayTask]
