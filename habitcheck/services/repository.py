# services/repository.py

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from ..config import HabitCheckSettings, settings as default_settings
from ..models.habit import CompletionEntry, DayTask, Habit, ValidationError
from ..shared.schemas import DayTaskRecord, EntryRecord, HabitRecord

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Ошибка хранилища привычек"""
    pass


class RepositoryCorruptionError(RepositoryError):
    """Файл данных поврежден или содержит невалидные записи"""
    pass


@dataclass(frozen=True)
class HabitSnapshot:
    """Полный срез данных: привычки, выполнения и разовые задачи"""
    habits: Tuple[Habit, ...] = ()
    entries: Tuple[CompletionEntry, ...] = ()
    day_tasks: Tuple[DayTask, ...] = ()

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        return next((habit for habit in self.habits if habit.id == habit_id), None)

    def entries_for(self, habit_id: str) -> List[CompletionEntry]:
        return [entry for entry in self.entries if entry.habit_id == habit_id]


class HabitRepository(ABC):
    """Интерфейс хранилища, которое передается слою, вызывающему ядро"""

    @abstractmethod
    def load(self) -> HabitSnapshot:
        ...

    @abstractmethod
    def save(self, snapshot: HabitSnapshot) -> None:
        ...


class InMemoryHabitRepository(HabitRepository):

    def __init__(self, snapshot: Optional[HabitSnapshot] = None):
        self._snapshot = snapshot or HabitSnapshot()

    def load(self) -> HabitSnapshot:
        return self._snapshot

    def save(self, snapshot: HabitSnapshot) -> None:
        self._snapshot = snapshot


class JsonHabitRepository(HabitRepository):
    """Хранилище в JSON файлах (habits / entries / day_tasks)"""

    def __init__(self, data_dir: Optional[Path] = None, settings: Optional[HabitCheckSettings] = None):
        self.settings = settings or default_settings
        self.data_dir = Path(data_dir) if data_dir is not None else Path(self.settings.DATA_DIR)
        self.habits_file = self.data_dir / self.settings.DATA_FILES["habits"]
        self.entries_file = self.data_dir / self.settings.DATA_FILES["entries"]
        self.day_tasks_file = self.data_dir / self.settings.DATA_FILES["day_tasks"]

        # Создаем директорию если её нет
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._init_files()

    def _init_files(self):
        """Инициализация JSON файлов если они не существуют"""
        for file_path in (self.habits_file, self.entries_file, self.day_tasks_file):
            if not file_path.exists():
                self._save_json(file_path, [])
                logger.debug(f"Файл данных создан: {file_path}")

    def _load_json(self, file_path: Path) -> List[Dict[str, Any]]:
        """Загрузка списка записей из JSON файла"""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except json.JSONDecodeError as e:
            logger.error(f"❌ Ошибка парсинга JSON {file_path}: {e}")
            raise RepositoryCorruptionError(f"Не удалось прочитать {file_path}: {e}") from e

        if not isinstance(data, list):
            raise RepositoryCorruptionError(f"Неверный формат файла данных {file_path}: ожидается список")
        return data

    def _save_json(self, file_path: Path, data: List[Dict[str, Any]]):
        """Сохранение данных в JSON файл"""
        tmp_path = file_path.with_suffix(file_path.suffix + ".tmp")
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp_path.replace(file_path)

    def _parse_records(self, file_path: Path, schema: Type[BaseModel]) -> list:
        records = []
        for index, raw in enumerate(self._load_json(file_path)):
            try:
                records.append(schema.model_validate(raw).to_domain())
            except (SchemaValidationError, ValidationError) as e:
                logger.error(f"❌ Невалидная запись #{index} в {file_path.name}: {e}")
                raise RepositoryCorruptionError(f"Невалидная запись #{index} в {file_path.name}") from e
        return records

    def load(self) -> HabitSnapshot:
        snapshot = HabitSnapshot(
            habits=tuple(self._parse_records(self.habits_file, HabitRecord)),
            entries=tuple(self._parse_records(self.entries_file, EntryRecord)),
            day_tasks=tuple(self._parse_records(self.day_tasks_file, DayTaskRecord)),
        )
        logger.info(
            f"📂 Загружено привычек: {len(snapshot.habits)}, "
            f"выполнений: {len(snapshot.entries)}, задач: {len(snapshot.day_tasks)}"
        )
        return snapshot

    def save(self, snapshot: HabitSnapshot) -> None:
        try:
            self._save_json(self.habits_file, [
                HabitRecord.from_domain(h).model_dump(mode="json", by_alias=True) for h in snapshot.habits
            ])
            self._save_json(self.entries_file, [
                EntryRecord.from_domain(e).model_dump(mode="json", by_alias=True) for e in snapshot.entries
            ])
            self._save_json(self.day_tasks_file, [
                DayTaskRecord.from_domain(t).model_dump(mode="json") for t in snapshot.day_tasks
            ])
        except OSError as e:
            logger.error(f"❌ Ошибка сохранения данных в {self.data_dir}: {e}")
            raise RepositoryError(f"Не удалось сохранить данные: {e}") from e

        logger.info(f"💾 Данные сохранены в {self.data_dir}")
