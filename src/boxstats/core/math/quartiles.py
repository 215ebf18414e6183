"""
Quartiles — калькулятор пятичисловой сводки для box-and-whisker графиков

Модуль вычисляет сводку [lower_fence, lower, median, upper, upper_fence]
по одной из трёх политик интерполяции:
- TUKEY (compute_quartiles): линейный перцентиль по рангу (n-1),
  fences по правилу Тьюки, могут выходить за пределы данных
- REAL (compute_quartiles_real): квартили по рангу (n+1),
  fences — реальные минимум и максимум выборки
- FAIR (compute_quartiles_fair): квартили REAL, fences Тьюки,
  ограниченные реальными экстремумами

Все политики используют общий шаг предобработки (prepare_sorted_sample)
и различаются только формулой ранга и способом расчёта fences.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая выборка / NaN / ±inf → исключение, default-сводка не возвращается
2. Исходная выборка вызывающей стороны не изменяется
3. Все вычисления в double precision, результат детерминирован
4. Выборка из одного значения v → [v, v, v, v, v] для всех политик

ФОРМУЛЫ:
    TUKEY:  rank = pct / 100 × (n - 1)
            P(pct) = s[⌊rank⌋] + (s[⌊rank⌋ + 1] - s[⌊rank⌋]) × (rank - ⌊rank⌋)
    REAL:   alpha = q × (n + 1) / 4,  k = ⌊alpha⌋
            Q(q) = s[0]                      если k == 0
                 = s[n - 1]                  если k - 1 ≥ n - 1
                 = s[k-1] + (s[k] - s[k-1]) × (alpha - k)   иначе
    fences: Q1 - m × IQR, Q3 + m × IQR,  IQR = Q3 - Q1,  m = 1.5
"""

import math
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Final

from boxstats.core.domain.quartile_summary import QuartilePolicy, QuartileSummary
from boxstats.core.math.numerical_safeguards import (
    clamp,
    is_at_boundary,
    lerp,
    validate_in_range,
)
from boxstats.core.math.sample import EmptySampleError, prepare_sorted_sample
from boxstats.utils.logging import get_logger

logger = get_logger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Множитель IQR для fences по правилу Тьюки
TUKEY_FENCE_MULTIPLIER: Final[float] = 1.5

# Допустимый диапазон перцентиля
PERCENTILE_MIN: Final[float] = 0.0
PERCENTILE_MAX: Final[float] = 100.0

# Целевые перцентили квартилей
LOWER_PERCENTILE: Final[float] = 25.0
MEDIAN_PERCENTILE: Final[float] = 50.0
UPPER_PERCENTILE: Final[float] = 75.0

# Индексы квартилей для ранга (n+1): 0 = минимум, 4 = максимум
QUARTILE_INDEX_MIN: Final[float] = 0.0
QUARTILE_INDEX_MAX: Final[float] = 4.0


# =============================================================================
# INTERPOLATION HELPERS
# =============================================================================


def percentile_of_sorted(sorted_values: Sequence[float], pct: float) -> float:
    """
    Значение перцентиля pct отсортированной выборки (линейная интерполяция).

    Args:
        sorted_values: Выборка, отсортированная по возрастанию
        pct: Перцентиль в диапазоне [0, 100]

    Returns:
        Интерполированное значение перцентиля

    Raises:
        EmptySampleError: если sorted_values пустая
        ValueError: если pct вне [0, 100] или NaN/Inf

    Examples:
        >>> percentile_of_sorted([10.0, 20.0], 25.0)
        12.5
        >>> percentile_of_sorted([7.0, 15.0, 36.0, 39.0, 40.0, 41.0], 50.0)
        37.5
        >>> percentile_of_sorted([1.0, 2.0, 3.0], 100.0)
        3.0
    """
    if not sorted_values:
        raise EmptySampleError("Cannot take a percentile of an empty sample")

    validate_in_range(pct, "pct", min_value=PERCENTILE_MIN, max_value=PERCENTILE_MAX)

    if len(sorted_values) == 1:
        return float(sorted_values[0])

    # pct == 100: следующего элемента для интерполяции нет
    if is_at_boundary(pct, PERCENTILE_MAX):
        return float(sorted_values[-1])

    rank = (pct / PERCENTILE_MAX) * (len(sorted_values) - 1)
    lower_rank = math.floor(rank)
    weight = rank - lower_rank

    lo = float(sorted_values[lower_rank])
    hi = float(sorted_values[lower_rank + 1])
    return lerp(lo, hi, weight)


def real_quartile_of_sorted(sorted_values: Sequence[float], q: float) -> float:
    """
    Квартиль с индексом q по рангу (n+1) отсортированной выборки.

    q = 0 и q = 4 дают минимум и максимум выборки, q = 1..3 —
    нижний квартиль, медиану и верхний квартиль.

    Args:
        sorted_values: Выборка, отсортированная по возрастанию
        q: Индекс квартиля в диапазоне [0, 4]

    Returns:
        Значение квартиля

    Raises:
        EmptySampleError: если sorted_values пустая
        ValueError: если q вне [0, 4] или NaN/Inf

    Examples:
        >>> real_quartile_of_sorted([10.0, 20.0, 30.0, 40.0], 1)
        12.5
        >>> real_quartile_of_sorted([10.0, 20.0, 30.0, 40.0], 4)
        40.0
    """
    if not sorted_values:
        raise EmptySampleError("Cannot take a quartile of an empty sample")

    validate_in_range(q, "q", min_value=QUARTILE_INDEX_MIN, max_value=QUARTILE_INDEX_MAX)

    n = len(sorted_values)
    alpha = q * (n + 1) / 4.0
    k = math.floor(alpha)
    weight = alpha - k

    if k == 0:
        return float(sorted_values[0])

    index = k - 1
    if index >= n - 1:
        return float(sorted_values[-1])

    return lerp(float(sorted_values[index]), float(sorted_values[index + 1]), weight)


def _validate_fence_multiplier(fence_multiplier: float) -> None:
    validate_in_range(fence_multiplier, "fence_multiplier", min_value=0.0)


# =============================================================================
# POLICIES
# =============================================================================


def compute_quartiles(
    sample: Iterable[Any],
    *,
    fence_multiplier: float = TUKEY_FENCE_MULTIPLIER,
) -> QuartileSummary:
    """
    Сводка квартилей по линейному перцентилю с fences Тьюки.

    Квартили — перцентили 25/50/75. Fences:
        lower_fence = Q1 - fence_multiplier × IQR
        upper_fence = Q3 + fence_multiplier × IQR
    и могут выходить за пределы диапазона данных.

    Args:
        sample: Непустая выборка числовых значений (в любом порядке)
        fence_multiplier: Множитель IQR для fences (default: 1.5)

    Returns:
        QuartileSummary с policy=TUKEY

    Raises:
        EmptySampleError: если выборка пустая
        IncomparableValueError: если выборка содержит NaN, ±inf или нечисловое значение
        ValueError: если fence_multiplier < 0 или NaN/Inf

    Examples:
        >>> compute_quartiles([7, 15, 36, 39, 40, 41]).median()
        37.5
        >>> compute_quartiles([7, 15, 36, 39, 40, 41]).values().tolist()
        [-9.0, 20.25, 37.5, 39.75, 69.0]
    """
    _validate_fence_multiplier(fence_multiplier)
    s = prepare_sorted_sample(sample)

    lower = percentile_of_sorted(s, LOWER_PERCENTILE)
    median = percentile_of_sorted(s, MEDIAN_PERCENTILE)
    upper = percentile_of_sorted(s, UPPER_PERCENTILE)
    iqr = upper - lower

    logger.debug("Tukey quartiles computed: n=%d, median=%r, iqr=%r", len(s), median, iqr)

    return QuartileSummary(
        lower_fence=lower - fence_multiplier * iqr,
        lower_quartile=lower,
        median_value=median,
        upper_quartile=upper,
        upper_fence=upper + fence_multiplier * iqr,
        policy=QuartilePolicy.TUKEY,
        sample_size=len(s),
    )


def compute_quartiles_real(sample: Iterable[Any]) -> QuartileSummary:
    """
    Сводка квартилей по рангу (n+1), fences — экстремумы выборки.

    Args:
        sample: Непустая выборка числовых значений (в любом порядке)

    Returns:
        QuartileSummary с policy=REAL

    Raises:
        EmptySampleError: если выборка пустая
        IncomparableValueError: если выборка содержит NaN, ±inf или нечисловое значение

    Examples:
        >>> compute_quartiles_real([7, 15, 36, 39, 40, 41]).values().tolist()
        [7.0, 13.0, 37.5, 40.25, 41.0]
    """
    s = prepare_sorted_sample(sample)

    lower_fence, lower, median, upper, upper_fence = (
        real_quartile_of_sorted(s, q) for q in range(5)
    )

    logger.debug("Real quartiles computed: n=%d, median=%r", len(s), median)

    return QuartileSummary(
        lower_fence=lower_fence,
        lower_quartile=lower,
        median_value=median,
        upper_quartile=upper,
        upper_fence=upper_fence,
        policy=QuartilePolicy.REAL,
        sample_size=len(s),
    )


def compute_quartiles_fair(
    sample: Iterable[Any],
    *,
    fence_multiplier: float = TUKEY_FENCE_MULTIPLIER,
) -> QuartileSummary:
    """
    Сводка квартилей: квартили REAL, fences Тьюки в пределах данных.

    lower_fence = max(Q1 - fence_multiplier × IQR, min(sample))
    upper_fence = min(Q3 + fence_multiplier × IQR, max(sample))

    Усы никогда не выходят за реальные экстремумы, но стягиваются
    правилом Тьюки внутрь при плотном распределении.

    Args:
        sample: Непустая выборка числовых значений (в любом порядке)
        fence_multiplier: Множитель IQR для fences (default: 1.5)

    Returns:
        QuartileSummary с policy=FAIR

    Raises:
        EmptySampleError: если выборка пустая
        IncomparableValueError: если выборка содержит NaN, ±inf или нечисловое значение
        ValueError: если fence_multiplier < 0 или NaN/Inf

    Examples:
        >>> compute_quartiles_fair([1, 2, 3, 4, 5, 6, 7, 8, 9, 100]).values().tolist()
        [1.0, 2.75, 5.5, 8.25, 16.5]
    """
    _validate_fence_multiplier(fence_multiplier)
    s = prepare_sorted_sample(sample)

    lower = real_quartile_of_sorted(s, 1)
    median = real_quartile_of_sorted(s, 2)
    upper = real_quartile_of_sorted(s, 3)
    iqr = upper - lower

    lower_fence = clamp(
        lower - fence_multiplier * iqr,
        min_value=real_quartile_of_sorted(s, QUARTILE_INDEX_MIN),
    )
    upper_fence = clamp(
        upper + fence_multiplier * iqr,
        max_value=real_quartile_of_sorted(s, QUARTILE_INDEX_MAX),
    )

    logger.debug("Fair quartiles computed: n=%d, median=%r, iqr=%r", len(s), median, iqr)

    return QuartileSummary(
        lower_fence=lower_fence,
        lower_quartile=lower,
        median_value=median,
        upper_quartile=upper,
        upper_fence=upper_fence,
        policy=QuartilePolicy.FAIR,
        sample_size=len(s),
    )


# =============================================================================
# DISPATCH
# =============================================================================


QUARTILE_CALCULATORS: Final[dict[QuartilePolicy, Callable[[Iterable[Any]], QuartileSummary]]] = {
    QuartilePolicy.TUKEY: compute_quartiles,
    QuartilePolicy.REAL: compute_quartiles_real,
    QuartilePolicy.FAIR: compute_quartiles_fair,
}


def compute_quartiles_with_policy(
    sample: Iterable[Any],
    policy: QuartilePolicy | str = QuartilePolicy.TUKEY,
) -> QuartileSummary:
    """
    Сводка квартилей по политике, выбранной во время выполнения.

    Args:
        sample: Непустая выборка числовых значений
        policy: QuartilePolicy или её строковое значение ("tukey"/"real"/"fair")

    Returns:
        QuartileSummary по выбранной политике

    Raises:
        ValueError: если policy неизвестна
        EmptySampleError, IncomparableValueError: см. compute_quartiles

    Examples:
        >>> compute_quartiles_with_policy([10, 20], "real").values().tolist()
        [10.0, 10.0, 15.0, 20.0, 20.0]
    """
    try:
        resolved = QuartilePolicy(policy)
    except ValueError:
        known = ", ".join(p.value for p in QuartilePolicy)
        raise ValueError(f"Unknown quartile policy {policy!r}, expected one of: {known}") from None

    return QUARTILE_CALCULATORS[resolved](sample)
