#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitCheck - Core
Чистые вычисления: серии, поведенческие паттерны, сводка дашборда, таймлайн.
Модуль не выполняет ввода-вывода и не изменяет входные данные.
"""

from .behavior import analyze_behavioral_patterns, dominant_weekdays
from .dashboard import build_dashboard_summary
from .history import calculate_completion_rate, generate_habit_history
from .simulation import (
    StreakStateMachine,
    Transition,
    completion_days,
    count_opportunities,
    simulate_schedule
)
from .streak import calculate_current_streak, calculate_longest_streak
from .timeline import (
    build_month_day_views,
    build_thirty_day_timeline,
    derive_day_task_view,
    resolve_timeline_day_status
)

__all__ = [
    'analyze_behavioral_patterns',
    'dominant_weekdays',
    'build_dashboard_summary',
    'calculate_completion_rate',
    'generate_habit_history',
    'StreakStateMachine',
    'Transition',
    'completion_days',
    'count_opportunities',
    'simulate_schedule',
    'calculate_current_streak',
    'calculate_longest_streak',
    'build_month_day_views',
    'build_thirty_day_timeline',
    'derive_day_task_view',
    'resolve_timeline_day_status'
]
