#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitCheck - Models Package
Data records and enums consumed and produced by the habit analytics core
"""

from .enums import (
    StreakStatus,
    TimelineDayStatus,
    TransitionKind
)

from .habit import (
    CompletionEntry,
    DayTask,
    Habit,
    TrackedItem,
    ValidationError
)

from .analytics import (
    BehavioralSummary,
    DashboardSummary,
    DayTaskView,
    HabitHistory,
    StreakResult,
    TimelineDayItem,
    WeeklyPerformance
)

__all__ = [
    # Enums
    'StreakStatus',
    'TimelineDayStatus',
    'TransitionKind',

    # Records
    'CompletionEntry',
    'DayTask',
    'Habit',
    'TrackedItem',
    'ValidationError',

    # Derived results
    'BehavioralSummary',
    'DashboardSummary',
    'DayTaskView',
    'HabitHistory',
    'StreakResult',
    'TimelineDayItem',
    'WeeklyPerformance'
]
