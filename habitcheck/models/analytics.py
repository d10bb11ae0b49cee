# models/analytics.py

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

from .enums import StreakStatus, TimelineDayStatus
from .habit import DayTask


@dataclass(frozen=True)
class StreakResult:
    value: float
    display_count: int
    status: StreakStatus

    @classmethod
    def empty(cls) -> "StreakResult":
        return cls(value=0, display_count=0, status=StreakStatus.RESET)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "display_count": self.display_count,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class BehavioralSummary:
    habit_id: str
    consistency_score: float
    fragility_score: float
    dominant_skip_days: Tuple[int, ...] = ()
    average_recovery_time: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["dominant_skip_days"] = list(self.dominant_skip_days)
        return data


@dataclass(frozen=True)
class WeeklyPerformance:
    completed: int = 0
    opportunities: int = 0
    completion_rate: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DashboardSummary:
    """Сводка по всем привычкам для дашборда"""
    consistency: float
    fragility: float
    dominant_skip_day: Optional[int]
    recovery_speed: float
    current_streak: int
    longest_streak: int
    total_habits: int
    completion_rate: float
    weekly_performance: WeeklyPerformance = field(default_factory=WeeklyPerformance)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class HabitHistory:
    """Производная статистика привычки"""
    habit_id: str
    streak_value: float
    streak_status: StreakStatus
    current_streak: int
    longest_streak: int
    total_completions: int
    completion_rate: float

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["streak_status"] = self.streak_status.value
        return data


@dataclass(frozen=True)
class DayTaskView:
    selected_date: str
    tasks_for_selected_day: Tuple[DayTask, ...] = ()


@dataclass(frozen=True)
class TimelineDayItem:
    day_number: int
    status: TimelineDayStatus

    def to_dict(self) -> Dict[str, Any]:
        return {"day_number": self.day_number, "status": self.status.value}
