import pytest

from password_analyzer.analyzer import strength_label
from password_analyzer.tiers import StrengthTier, tier_for_score


@pytest.mark.parametrize("score, tier", [
    (0, StrengthTier.VERY_WEAK),
    (19, StrengthTier.VERY_WEAK),
    (20, StrengthTier.WEAK),
    (40, StrengthTier.MODERATE),
    (60, StrengthTier.STRONG),
    (79, StrengthTier.STRONG),
    (80, StrengthTier.VERY_STRONG),
    (100, StrengthTier.VERY_STRONG),
])
def test_tier_boundaries(score, tier):
    assert tier_for_score(score) is tier


def test_tiers_follow_strength_labels():
    for score in range(101):
        assert tier_for_score(score).label == strength_label(score)


def test_tier_colors():
    assert StrengthTier.VERY_WEAK.color == "#ef4444"
    assert StrengthTier.VERY_STRONG.css_class == "very-strong"
