"""
boxstats: five-number summaries for box-and-whisker plots.

Public API:
- compute_quartiles / compute_quartiles_real / compute_quartiles_fair
- compute_quartiles_with_policy
- QuartileSummary, QuartilePolicy
- EmptySampleError, IncomparableValueError

Logging: the package logger has a NullHandler by default. Scripts may call
boxstats.utils.logging.configure_logging(level="DEBUG") to see output.
"""

import logging

from boxstats.core.domain import QuartilePolicy, QuartileSummary
from boxstats.core.math import (
    EmptySampleError,
    IncomparableValueError,
    QuartileContractViolation,
    compute_quartiles,
    compute_quartiles_fair,
    compute_quartiles_real,
    compute_quartiles_with_policy,
)

_logger = logging.getLogger("boxstats")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "EmptySampleError",
    "IncomparableValueError",
    "QuartileContractViolation",
    "QuartilePolicy",
    "QuartileSummary",
    "compute_quartiles",
    "compute_quartiles_fair",
    "compute_quartiles_real",
    "compute_quartiles_with_policy",
]

__version__ = "0.1.0"
