#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitCheck - Services Package
Хранилище привычек и сервис аналитики поверх чистого ядра
"""

from .analytics_service import ChangeCallback, HabitAnalyticsService, HabitNotFoundError
from .repository import (
    HabitRepository,
    HabitSnapshot,
    InMemoryHabitRepository,
    JsonHabitRepository,
    RepositoryCorruptionError,
    RepositoryError
)

__all__ = [
    'ChangeCallback',
    'HabitAnalyticsService',
    'HabitNotFoundError',
    'HabitRepository',
    'HabitSnapshot',
    'InMemoryHabitRepository',
    'JsonHabitRepository',
    'RepositoryCorruptionError',
    'RepositoryError'
]
