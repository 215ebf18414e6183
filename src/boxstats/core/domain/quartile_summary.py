"""
QuartileSummary — пятичисловая сводка для box-and-whisker графика

Immutable Pydantic модель, представляющая результат калькулятора квартилей.
Слой отрисовки графика получает пять значений через values().
"""

from enum import Enum

import numpy as np
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class QuartilePolicy(str, Enum):
    """
    Политика интерполяции квартилей и расчёта fences.

    - TUKEY: линейный перцентиль, fences по правилу Тьюки (±1.5 × IQR)
    - REAL: квартили по рангу (n+1), fences — экстремумы выборки
    - FAIR: квартили REAL, fences Тьюки, ограниченные экстремумами
    """

    TUKEY = "tukey"
    REAL = "real"
    FAIR = "fair"


# =============================================================================
# QUARTILE SUMMARY MODEL
# =============================================================================


class QuartileSummary(BaseModel):
    """
    Сводка квартилей выборки.

    Immutable модель (frozen=True). Порядок пяти значений фиксирован:
    [lower_fence, lower_quartile, median_value, upper_quartile, upper_fence].

    Монотонность lower_fence ≤ lower ≤ median ≤ upper ≤ upper_fence
    следует из формул расчёта и в runtime не проверяется.
    """

    # Пять значений сводки
    lower_fence: float = Field(..., description="Нижний ус (fence)")
    lower_quartile: float = Field(..., description="Нижний квартиль (Q1)")
    median_value: float = Field(..., description="Медиана (Q2)")
    upper_quartile: float = Field(..., description="Верхний квартиль (Q3)")
    upper_fence: float = Field(..., description="Верхний ус (fence)")

    # Происхождение
    policy: QuartilePolicy = Field(..., description="Политика расчёта (tukey/real/fair)")
    sample_size: int = Field(..., ge=1, description="Размер выборки")

    model_config = {"frozen": True}

    def values(self) -> np.ndarray:
        """
        Пять значений сводки в single precision.

        Returns:
            Новый массив float32 формы (5,):
            [lower_fence, lower_quartile, median_value, upper_quartile, upper_fence]
        """
        return np.array(
            [
                self.lower_fence,
                self.lower_quartile,
                self.median_value,
                self.upper_quartile,
                self.upper_fence,
            ],
            dtype=np.float32,
        )

    def median(self) -> float:
        """Медиана в double precision."""
        return self.median_value

    def iqr(self) -> float:
        """Межквартильный размах: upper_quartile - lower_quartile."""
        return self.upper_quartile - self.lower_quartile
