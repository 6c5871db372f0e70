# graph/formatting.py
# Человекочитаемое форматирование метрик (проценты, время, байты, rate)

import math
from enum import Enum


class ValueType(str, Enum):
    """Единица измерения метрики."""
    PERCENT = "percent"
    SECONDS = "seconds"
    BYTES = "bytes"
    BYTES_PER_SECOND = "bytesPerSecond"
    RATE = "rate"
    NUMBER = "number"


_KB = 1024
_MB = 1024 * 1024
_GB = 1024 * 1024 * 1024
_TB = 1024 * 1024 * 1024 * 1024


def _plain(value: float) -> str:
    """512.0 -> "512", 512.5 -> "512.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_bytes(value: float) -> str:
    """Размер в B/KB/MB/GB/TB (основание 1024)."""
    if value < _KB:
        return f"{_plain(value)}B"
    if value < _MB:
        return f"{value / _KB:.2f}KB"
    if value < _GB:
        return f"{value / _MB:.2f}MB"
    if value < _TB:
        return f"{value / _GB:.2f}GB"
    return f"{value / _TB:.2f}TB"


def format_seconds(value: float) -> str:
    """Длительность в секундах -> "1.5d" / "2.0h" / "3.0m" / "1.2s" / "45ms" / "120µs"."""
    if math.isnan(value):
        return "NaN"
    if value >= 60 * 60 * 24:
        return f"{value / 60 / 60 / 24:.1f}d"
    if value >= 60 * 60:
        return f"{value / 60 / 60:.1f}h"
    if value >= 60:
        return f"{value / 60:.1f}m"
    if value >= 1:
        return f"{value:.1f}s"
    if value >= 0.001:
        return f"{value * 1000:.0f}ms"
    return f"{value * 1000000:.0f}µs"


def format_value(value: float, value_type: ValueType) -> str:
    """Форматирует значение согласно его типу."""
    value_type = ValueType(value_type)
    if value_type is ValueType.PERCENT:
        return f"{value * 100:.2f}%"
    if value_type is ValueType.SECONDS:
        return format_seconds(value)
    if value_type is ValueType.BYTES:
        return format_bytes(value)
    if value_type is ValueType.BYTES_PER_SECOND:
        return format_bytes(value) + "/s"
    if value_type is ValueType.RATE:
        return f"{value:.2f}/s"
    return f"{value:.2f}"


def format_change(value: float, value_type: ValueType) -> str:
    """Изменение со знаком: +12.00% / -45ms."""
    sign = "+"
    if value < 0:
        sign = "-"
        value = -value
    return f"{sign}{format_value(value, value_type)}"
