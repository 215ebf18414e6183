"""
Domain models and value objects.

Contains the QuartileSummary value object and the QuartilePolicy enum.
"""

from boxstats.core.domain.quartile_summary import QuartilePolicy, QuartileSummary

__all__ = [
    "QuartilePolicy",
    "QuartileSummary",
]
