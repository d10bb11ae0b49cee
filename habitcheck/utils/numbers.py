import math


def round_half_up(value: float, decimals: int = 0) -> float:
    """Округление с половиной вверх (round() в Python округляет к четному)"""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def safe_ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0
