# models/enums.py

from enum import Enum


class StreakStatus(str, Enum):
    """Состояние серии"""
    CLEAN = "CLEAN"
    FRACTURED = "FRACTURED"
    RESET = "RESET"


class TransitionKind(str, Enum):
    """Тип перехода автомата серии за один запланированный день"""
    EXTEND = "extend"                # CLEAN -> CLEAN, выполнено
    RESTART = "restart"              # RESET -> CLEAN, выполнено
    RECOVERY_STEP = "recovery_step"  # FRACTURED -> FRACTURED, выполнено
    RECOVERED = "recovered"          # FRACTURED -> CLEAN, выполнено
    FRACTURE = "fracture"            # CLEAN -> FRACTURED, пропуск
    COLLAPSE = "collapse"            # FRACTURED -> RESET, пропуск
    IDLE = "idle"                    # RESET -> RESET, пропуск


class TimelineDayStatus(str, Enum):
    """Статус дня на таймлайне"""
    COMPLETED = "Completed"
    IN_PROGRESS = "In Progress"
    EMPTY = "Empty"
