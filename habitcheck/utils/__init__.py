from .datetime_utils import (
    add_days,
    date_key,
    iter_days,
    now_local,
    parse_date_key,
    start_of_day,
    today_local,
    weekday_index,
)
from .logger import setup_logger
from .numbers import round_half_up, safe_ratio

__all__ = [
    'add_days',
    'date_key',
    'iter_days',
    'now_local',
    'parse_date_key',
    'start_of_day',
    'today_local',
    'weekday_index',
    'setup_logger',
    'round_half_up',
    'safe_ratio',
]
