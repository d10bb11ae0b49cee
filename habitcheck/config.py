#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HabitCheck - Configuration
Централизованная конфигурация с валидацией (переменные окружения и .env)

Версия: 1.0.0
"""

import sys
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import pytz
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HabitCheckSettings(BaseSettings):
    """Настройки HabitCheck"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===== ОСНОВНЫЕ НАСТРОЙКИ =====

    APP_NAME: str = Field(
        default="HabitCheck",
        description="Название приложения"
    )

    VERSION: str = Field(
        default="1.0.0",
        description="Версия"
    )

    ENVIRONMENT: str = Field(
        default="development",
        description="Среда выполнения (development/production/testing/staging)"
    )

    DEBUG: bool = Field(
        default=False,
        description="Режим отладки"
    )

    # ===== ПУТИ И ФАЙЛЫ =====

    DATA_DIR: Path = Field(
        default=Path("data"),
        description="Директория с данными привычек"
    )

    LOGS_DIR: Path = Field(
        default=Path("logs"),
        description="Директория логов"
    )

    DATA_FILES: Dict[str, str] = Field(
        default={
            "habits": "habits.json",
            "entries": "entries.json",
            "day_tasks": "day_tasks.json",
        },
        description="Имена файлов данных"
    )

    # ===== ЛОГИРОВАНИЕ =====

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Уровень логирования (DEBUG/INFO/WARNING/ERROR/CRITICAL)"
    )

    LOG_FORMAT: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="Формат логов"
    )

    LOG_DATE_FORMAT: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Формат даты в логах"
    )

    LOG_TO_FILE: bool = Field(
        default=False,
        description="Писать логи в файл"
    )

    LOG_MAX_BYTES: int = Field(
        default=10_000_000,
        description="Максимальный размер файла лога"
    )

    LOG_BACKUP_COUNT: int = Field(
        default=5,
        description="Количество архивных файлов лога"
    )

    # ===== КАЛЕНДАРЬ =====

    TIMEZONE: str = Field(
        default="UTC",
        description="Часовой пояс для определения календарного дня"
    )

    WEEKLY_WINDOW_DAYS: int = Field(
        default=7,
        description="Длина окна недельной статистики в днях"
    )

    TIMELINE_DAYS: int = Field(
        default=30,
        description="Длина таймлайна челленджа в днях"
    )

    # ===== ВАЛИДАТОРЫ =====

    @field_validator('ENVIRONMENT')
    @classmethod
    def validate_environment(cls, v):
        """Валидация среды выполнения"""
        allowed_envs = ['development', 'production', 'testing', 'staging']
        if v.lower() not in allowed_envs:
            raise ValueError(f"ENVIRONMENT must be one of {allowed_envs}")
        return v.lower()

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v):
        """Валидация уровня логирования"""
        allowed_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in allowed_levels:
            raise ValueError(f"LOG_LEVEL must be one of {allowed_levels}")
        return v.upper()

    @field_validator('TIMEZONE')
    @classmethod
    def validate_timezone(cls, v):
        """Валидация часового пояса"""
        try:
            pytz.timezone(v)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown TIMEZONE: {v}")
        return v

    @field_validator('WEEKLY_WINDOW_DAYS', 'TIMELINE_DAYS')
    @classmethod
    def validate_window(cls, v):
        if v < 1:
            raise ValueError("window length must be positive")
        return v

    # ===== МЕТОДЫ КОНФИГУРАЦИИ =====

    @property
    def is_production(self) -> bool:
        """Проверка продакшен среды"""
        return self.ENVIRONMENT == "production"

    @property
    def is_development(self) -> bool:
        """Проверка среды разработки"""
        return self.ENVIRONMENT == "development"

    @property
    def is_testing(self) -> bool:
        """Проверка тестовой среды"""
        return self.ENVIRONMENT == "testing"

    @property
    def local_timezone(self):
        """Часовой пояс pytz, в котором считаются календарные дни"""
        return pytz.timezone(self.TIMEZONE)

    def get_data_file_path(self, file_type: str) -> Path:
        """Получить полный путь к файлу данных"""
        if file_type not in self.DATA_FILES:
            raise ValueError(f"Unknown data file type: {file_type}. Available: {list(self.DATA_FILES.keys())}")

        return self.DATA_DIR / self.DATA_FILES[file_type]

    def get_logging_config(self) -> Dict[str, Any]:
        """Получение конфигурации логирования для dictConfig"""
        handlers = ['console']
        config: Dict[str, Any] = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.LOG_FORMAT,
                    'datefmt': self.LOG_DATE_FORMAT
                }
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'level': self.LOG_LEVEL,
                    'formatter': 'default',
                    'stream': sys.stdout
                }
            },
            'loggers': {
                'habitcheck': {
                    'level': 'DEBUG' if self.DEBUG else self.LOG_LEVEL,
                    'handlers': handlers,
                    'propagate': False
                }
            }
        }

        if self.LOG_TO_FILE:
            config['handlers']['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': self.LOG_LEVEL,
                'formatter': 'default',
                'filename': str(self.LOGS_DIR / f"habitcheck_{self.ENVIRONMENT}.log"),
                'maxBytes': self.LOG_MAX_BYTES,
                'backupCount': self.LOG_BACKUP_COUNT,
                'encoding': 'utf-8'
            }
            handlers.append('file')

        return config


@lru_cache()
def get_settings() -> HabitCheckSettings:
    """Глобальный экземпляр настроек"""
    return HabitCheckSettings()


settings = get_settings()

__all__ = [
    'HabitCheckSettings',
    'get_settings',
    'settings'
]
