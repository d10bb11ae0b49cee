from datetime import date, datetime, timedelta
from typing import Iterator, Union

from ..config import settings

DateLike = Union[date, datetime]


def now_local() -> datetime:
    return datetime.now(settings.local_timezone)


def today_local() -> date:
    return now_local().date()


def start_of_day(value: DateLike) -> date:
    """Календарный день значения в локальном часовом поясе.

    Aware datetime сначала переводится в settings.TIMEZONE,
    naive datetime считается уже локальным.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(settings.local_timezone)
        return value.date()
    return value


def date_key(value: DateLike) -> str:
    return start_of_day(value).strftime("%Y-%m-%d")


def parse_date_key(key: str, fmt: str = "%Y-%m-%d") -> date:
    return datetime.strptime(key, fmt).date()


def add_days(value: DateLike, days: int) -> date:
    return start_of_day(value) + timedelta(days=days)


def weekday_index(value: DateLike) -> int:
    """Индекс дня недели: 0 = воскресенье ... 6 = суббота"""
    return start_of_day(value).isoweekday() % 7


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Перебор календарных дней [start, end] включительно"""
    current = start_of_day(start)
    last = start_of_day(end)
    while current <= last:
        yield current
        current += timedelta(days=1)
