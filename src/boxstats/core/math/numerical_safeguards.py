"""
Numerical Safeguards — примитивы для интерполяции квартилей

Модуль содержит минимальный набор численных примитивов, на которых
построен калькулятор квартилей:
- Epsilon-константа для граничного перцентиля
- Проверка конечности значений (NaN и ±inf отклоняются)
- Epsilon-сравнение с границей диапазона
- Clamp и линейная интерполяция
- Валидация параметров алгоритма

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все вычисления выполняются в double precision (Python float)
2. Валидация параметров никогда не подменяет значение fallback-ом,
   невалидный параметр всегда приводит к исключению
3. Все операции детерминированы и воспроизводимы
"""

import math
import sys
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для распознавания граничного перцентиля (pct == 100)
# Равен машинному epsilon для double
EPS_PERCENTILE: Final[float] = sys.float_info.epsilon


# =============================================================================
# ПРОВЕРКА КОНЕЧНОСТИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    NaN несравним ни с одним значением, а ±inf превращает IQR в
    inf - inf = NaN, поэтому оба недопустимы в выборке.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_at_boundary(value: float, boundary: float, eps: float = EPS_PERCENTILE) -> bool:
    """
    Проверка совпадения значения с границей диапазона в пределах eps.

    Используется для детекции pct == 100, где интерполяция
    обратилась бы к несуществующему следующему элементу.

    Examples:
        >>> is_at_boundary(100.0, 100.0)
        True
        >>> is_at_boundary(99.9, 100.0)
        False
    """
    return abs(value - boundary) < eps


# =============================================================================
# CLAMP И ИНТЕРПОЛЯЦИЯ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Любая из границ может быть опущена (односторонний clamp).

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, min_value=0.0)
        0.0
        >>> clamp(15.0, max_value=10.0)
        10.0
    """
    if min_value is not None and value < min_value:
        value = min_value
    if max_value is not None and value > max_value:
        value = max_value
    return value


def lerp(lo: float, hi: float, weight: float) -> float:
    """
    Линейная интерполяция между двумя соседними значениями.

    Формула: lo + (hi - lo) * weight

    Порядок операций фиксирован: результаты квартилей должны
    совпадать бит-в-бит с эталонными примерами.

    Args:
        lo: Нижнее значение (weight = 0)
        hi: Верхнее значение (weight = 1)
        weight: Доля пути от lo к hi, обычно в [0, 1)

    Examples:
        >>> lerp(10.0, 20.0, 0.25)
        12.5
        >>> lerp(36.0, 39.0, 0.5)
        37.5
    """
    return lo + (hi - lo) * weight


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
