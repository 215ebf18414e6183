"""
Sample — подготовка выборки для калькулятора квартилей

Общий шаг предобработки для всех политик расчёта квартилей:
- Копирование значений (исходный объект вызывающей стороны не изменяется)
- Конверсия каждого значения в double precision через float()
- Проверка сравнимости (NaN, ±inf и нечисловые значения отклоняются)
- Проверка непустоты
- Сортировка по возрастанию

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая выборка → EmptySampleError (никогда не возвращается default)
2. NaN / ±inf / нечисловое значение → IncomparableValueError
3. Результат — новый отсортированный list[float], независимый от входа
"""

from collections.abc import Iterable
from typing import Any

from boxstats.core.math.numerical_safeguards import is_valid_float
from boxstats.utils.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class QuartileContractViolation(ValueError):
    """
    Нарушение предусловия калькулятора квартилей.

    Вызывающая сторона обязана валидировать/фильтровать выборку
    до вызова. Статистическая сводка по некорректной выборке
    не имеет смысла, поэтому расчёт прерывается.
    """


class EmptySampleError(QuartileContractViolation):
    """Выборка не содержит ни одного значения."""


class IncomparableValueError(QuartileContractViolation):
    """
    Выборка содержит значение без полного порядка.

    NaN, ±inf, строки и объекты без конверсии в float (включая
    int вне диапазона double) не дают осмысленной сводки.
    """


# =============================================================================
# SAMPLE PREPROCESSING
# =============================================================================


def _to_float(raw: Any, position: int) -> float:
    # str/bytes конвертируются через float(), но числами не являются
    if isinstance(raw, (str, bytes)):
        raise IncomparableValueError(
            f"Sample value at position {position} is not numeric: {raw!r}"
        )
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError) as exc:
        raise IncomparableValueError(
            f"Sample value at position {position} is not convertible to float: {raw!r}"
        ) from exc

    if not is_valid_float(value):
        raise IncomparableValueError(
            f"Sample value at position {position} is not finite: {value}"
        )
    return value


def prepare_sorted_sample(sample: Iterable[Any]) -> list[float]:
    """
    Копирование, конверсия в float и сортировка выборки.

    Args:
        sample: Итерируемая коллекция числовых значений
                (list, tuple, generator, numpy.ndarray, pandas.Series, ...)

    Returns:
        Новый список float, отсортированный по возрастанию

    Raises:
        EmptySampleError: если выборка пустая
        IncomparableValueError: если значение NaN, ±inf или не конвертируется в float

    Examples:
        >>> prepare_sorted_sample([3, 1, 2])
        [1.0, 2.0, 3.0]
        >>> prepare_sorted_sample((0.5,))
        [0.5]
    """
    try:
        values = [_to_float(raw, position) for position, raw in enumerate(sample)]
    except IncomparableValueError as exc:
        logger.warning("Rejected sample: %s", exc)
        raise

    if not values:
        logger.warning("Rejected sample: no values")
        raise EmptySampleError("Sample must contain at least one value")

    values.sort()
    return values
