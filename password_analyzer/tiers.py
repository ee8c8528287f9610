"""
Visual strength tiers for meters and colour coding.
"""

from enum import Enum

from .analyzer import strength_label


class StrengthTier(Enum):
    """Five display buckets, sharing boundaries with the strength labels"""
    VERY_WEAK = ("Very Weak", "#ef4444", "very-weak")
    WEAK = ("Weak", "#f97316", "weak")
    MODERATE = ("Moderate", "#eab308", "moderate")
    STRONG = ("Strong", "#22c55e", "strong")
    VERY_STRONG = ("Very Strong", "#10b981", "very-strong")

    def __init__(self, label: str, color: str, css_class: str):
        self.label = label
        self.color = color
        self.css_class = css_class


_TIERS_BY_LABEL = {tier.label: tier for tier in StrengthTier}


def tier_for_score(score: int) -> StrengthTier:
    return _TIERS_BY_LABEL[strength_label(score)]
