from .schemas import DayTaskRecord, EntryRecord, HabitRecord, parse_date_value

__all__ = ['DayTaskRecord', 'EntryRecord', 'HabitRecord', 'parse_date_value']
