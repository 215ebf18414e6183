"""
Core math modules для boxstats

Численные примитивы и калькулятор квартилей для box-and-whisker графиков.
"""

# Numerical Safeguards
from boxstats.core.math.numerical_safeguards import (
    EPS_PERCENTILE,
    clamp,
    is_at_boundary,
    is_valid_float,
    lerp,
    validate_in_range,
)

# Sample preprocessing
from boxstats.core.math.sample import (
    EmptySampleError,
    IncomparableValueError,
    QuartileContractViolation,
    prepare_sorted_sample,
)

# Quartiles
from boxstats.core.math.quartiles import (
    LOWER_PERCENTILE,
    MEDIAN_PERCENTILE,
    PERCENTILE_MAX,
    PERCENTILE_MIN,
    QUARTILE_CALCULATORS,
    QUARTILE_INDEX_MAX,
    QUARTILE_INDEX_MIN,
    TUKEY_FENCE_MULTIPLIER,
    UPPER_PERCENTILE,
    compute_quartiles,
    compute_quartiles_fair,
    compute_quartiles_real,
    compute_quartiles_with_policy,
    percentile_of_sorted,
    real_quartile_of_sorted,
)

__all__ = [
    # Numerical Safeguards
    "EPS_PERCENTILE",
    "clamp",
    "is_at_boundary",
    "is_valid_float",
    "lerp",
    "validate_in_range",
    # Sample — Exceptions
    "EmptySampleError",
    "IncomparableValueError",
    "QuartileContractViolation",
    # Sample — Functions
    "prepare_sorted_sample",
    # Quartiles — Constants
    "LOWER_PERCENTILE",
    "MEDIAN_PERCENTILE",
    "PERCENTILE_MAX",
    "PERCENTILE_MIN",
    "QUARTILE_CALCULATORS",
    "QUARTILE_INDEX_MAX",
    "QUARTILE_INDEX_MIN",
    "TUKEY_FENCE_MULTIPLIER",
    "UPPER_PERCENTILE",
    # Quartiles — Functions
    "compute_quartiles",
    "compute_quartiles_fair",
    "compute_quartiles_real",
    "compute_quartiles_with_policy",
    "percentile_of_sorted",
    "real_quartile_of_sorted",
]
