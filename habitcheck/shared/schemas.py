import datetime as dt
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.habit import CompletionEntry, DayTask, Habit

# Даты в хранилище: либо YYYY-MM-DD, либо ISO datetime
DateValue = Union[dt.date, dt.datetime]


def parse_date_value(value: Any) -> Any:
    """Строки ISO в date/datetime, остальное отдаем pydantic как есть"""
    if isinstance(value, str):
        value = value.strip()
        if len(value) == 10:
            return dt.date.fromisoformat(value)
        return dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
    return value


class HabitRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    target_days: List[int] = Field(default_factory=list, alias="targetDays")
    created_at: DateValue = Field(..., alias="createdAt")
    start_date: Optional[DateValue] = Field(None, alias="startDate")
    end_date: Optional[DateValue] = Field(None, alias="endDate")

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Название привычки не может быть пустым')
        return v.strip()

    @field_validator('created_at', 'start_date', 'end_date', mode='before')
    @classmethod
    def validate_dates(cls, v):
        return parse_date_value(v)

    @field_validator('target_days')
    @classmethod
    def validate_target_days(cls, v):
        for day in v:
            if not 0 <= day <= 6:
                raise ValueError(f'День недели должен быть от 0 до 6, получено {day}')
        return sorted(set(v))

    def to_domain(self) -> Habit:
        return Habit(
            id=self.id,
            title=self.title,
            description=self.description,
            target_days=frozenset(self.target_days),
            created_at=self.created_at,
            start_date=self.start_date,
            end_date=self.end_date,
        )

    @classmethod
    def from_domain(cls, habit: Habit) -> "HabitRecord":
        return cls(
            id=habit.id,
            title=habit.title,
            description=habit.description,
            target_days=sorted(habit.target_days),
            created_at=habit.created_at,
            start_date=habit.start_date,
            end_date=habit.end_date,
        )


class EntryRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    habit_id: str = Field(..., min_length=1, alias="habitId")
    completed_at: DateValue = Field(..., alias="completedAt")
    notes: Optional[str] = Field(None, max_length=500)

    @field_validator('completed_at', mode='before')
    @classmethod
    def validate_completed_at(cls, v):
        return parse_date_value(v)

    def to_domain(self) -> CompletionEntry:
        return CompletionEntry(
            id=self.id,
            habit_id=self.habit_id,
            completed_at=self.completed_at,
            notes=self.notes,
        )

    @classmethod
    def from_domain(cls, entry: CompletionEntry) -> "EntryRecord":
        return cls(
            id=entry.id,
            habit_id=entry.habit_id,
            completed_at=entry.completed_at,
            notes=entry.notes,
        )


class DayTaskRecord(BaseModel):
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    date: dt.date
    completed: bool = False

    def to_domain(self) -> DayTask:
        return DayTask(id=self.id, title=self.title, date=self.date, completed=self.completed)

    @classmethod
    def from_domain(cls, task: DayTask) -> "DayTaskRecord":
        return cls(id=task.id, title=task.title, date=task.date, completed=task.completed)
