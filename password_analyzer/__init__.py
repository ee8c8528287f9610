"""
Deterministic password strength analysis.
"""

__version__ = "1.0.0"

from .analyzer import (  # noqa: E402
    FeedbackItem,
    FeedbackType,
    PasswordAnalysis,
    PasswordAnalyzer,
    analyze,
    strength_label,
)
from .entropy import calculate_entropy  # noqa: E402
from .patterns import has_repeated_characters, has_sequential_pattern  # noqa: E402

__all__ = [
    "FeedbackItem",
    "FeedbackType",
    "PasswordAnalysis",
    "PasswordAnalyzer",
    "analyze",
    "calculate_entropy",
    "has_repeated_characters",
    "has_sequential_pattern",
    "strength_label",
]
