"""
Password strength analysis.

`analyze()` runs five checks in a fixed order (length, common password,
character variety, sequential patterns, repeated characters), then combines
length, variety and entropy into a 0-100 score with penalties for the
weaknesses found. The function is pure: no I/O, no shared mutable state.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from .common_passwords import COMMON_PASSWORDS, is_common_password
from .entropy import CharacterClasses, calculate_entropy
from .patterns import has_repeated_characters, has_sequential_pattern

logger = logging.getLogger(__name__)

MIN_LENGTH = 8
RECOMMENDED_LENGTH = 12

LENGTH_POINTS_PER_CHAR = 2.5
VARIETY_POINTS_PER_CLASS = 7.5
ENTROPY_BITS_PER_POINT = 4
MAX_COMPONENT_POINTS = 30

COMMON_PASSWORD_PENALTY = 30
SEQUENTIAL_PATTERN_PENALTY = 15
REPEATED_CHARACTERS_PENALTY = 15

NO_PASSWORD_LABEL = "None"

# Upper bound (exclusive) of each label; scores from 80 up are "Very Strong".
LABEL_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (20, "Very Weak"),
    (40, "Weak"),
    (60, "Moderate"),
    (80, "Strong"),
)
TOP_LABEL = "Very Strong"


class FeedbackType(Enum):
    WARNING = "warning"
    SUCCESS = "success"


@dataclass(frozen=True)
class FeedbackItem:
    type: FeedbackType
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type.value, "message": self.message}


@dataclass(frozen=True)
class PasswordAnalysis:
    """Result of analyzing one password"""
    score: int = 0
    strength_label: str = NO_PASSWORD_LABEL
    entropy: float = 0.0
    feedback: Tuple[FeedbackItem, ...] = field(default_factory=tuple)
    suggestions: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape used by the HTTP API and the --json CLI output"""
        return {
            "score": self.score,
            "strengthLabel": self.strength_label,
            "entropy": self.entropy,
            "feedback": [item.to_dict() for item in self.feedback],
            "suggestions": list(self.suggestions),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PasswordAnalysis":
        """
        Build an analysis from its wire shape.

        Raises:
            KeyError, TypeError, ValueError: If the payload is not a valid analysis.
        """
        feedback = tuple(
            FeedbackItem(FeedbackType(item["type"]), str(item["message"]))
            for item in data["feedback"]
        )
        return cls(
            score=int(data["score"]),
            strength_label=str(data["strengthLabel"]),
            entropy=float(data["entropy"]),
            feedback=feedback,
            suggestions=tuple(str(s) for s in data["suggestions"]),
        )


def strength_label(score: int) -> str:
    """Map a 0-100 score to its strength label."""
    for upper_bound, label in LABEL_THRESHOLDS:
        if score < upper_bound:
            return label
    return TOP_LABEL


class PasswordAnalyzer:
    """
    Scores passwords against a fixed denylist.

    The denylist is frozen at construction, so one analyzer can be shared
    freely between threads.
    """

    def __init__(self, common_passwords: Optional[Iterable[str]] = None):
        if common_passwords is None:
            self.common_passwords: FrozenSet[str] = COMMON_PASSWORDS
        else:
            self.common_passwords = frozenset(p.lower() for p in common_passwords)

    def analyze(self, password: str) -> PasswordAnalysis:
        if not password:
            return PasswordAnalysis()

        feedback: List[FeedbackItem] = []
        suggestions: List[str] = []

        def warn(message: str) -> None:
            feedback.append(FeedbackItem(FeedbackType.WARNING, message))

        def ok(message: str) -> None:
            feedback.append(FeedbackItem(FeedbackType.SUCCESS, message))

        # 1. Length
        length = len(password)
        if length < MIN_LENGTH:
            warn("Password is too short (minimum 8 characters recommended)")
            suggestions.append("Use at least 8 characters")
        elif length >= RECOMMENDED_LENGTH:
            ok("Good password length")
        else:
            warn("Password could be longer for better security")
            suggestions.append("Consider using 12+ characters for better security")

        # 2. Common password
        is_common = is_common_password(password, self.common_passwords)
        if is_common:
            warn("This is a commonly used password")
            suggestions.append("Avoid using common passwords that are easy to guess")

        # 3. Character variety
        classes = CharacterClasses.detect(password)
        if classes.count < 3:
            warn("Password lacks variety in character types")
            if not classes.lowercase:
                suggestions.append("Add lowercase letters")
            if not classes.uppercase:
                suggestions.append("Add uppercase letters")
            if not classes.digits:
                suggestions.append("Add numbers")
            if not classes.symbols:
                suggestions.append("Add special characters (!@#$%^&*)")
        else:
            ok("Good mix of character types")

        # 4. Sequential patterns
        is_sequential = has_sequential_pattern(password)
        if is_sequential:
            warn("Contains sequential patterns (like '123' or 'abc')")
            suggestions.append("Avoid sequential patterns like '123', 'abc', or keyboard rows")

        # 5. Repeated characters
        is_repeated = has_repeated_characters(password)
        if is_repeated:
            warn("Contains repeated characters")
            suggestions.append("Avoid repeating the same character multiple times")

        entropy = calculate_entropy(password)

        raw_score = (
            min(MAX_COMPONENT_POINTS, length * LENGTH_POINTS_PER_CHAR)
            + classes.count * VARIETY_POINTS_PER_CLASS
            + min(MAX_COMPONENT_POINTS, entropy / ENTROPY_BITS_PER_POINT)
        )
        if is_common:
            raw_score -= COMMON_PASSWORD_PENALTY
        if is_sequential:
            raw_score -= SEQUENTIAL_PATTERN_PENALTY
        if is_repeated:
            raw_score -= REPEATED_CHARACTERS_PENALTY

        score = max(0, min(100, _round_half_up(raw_score)))
        label = strength_label(score)

        logger.debug(f"Analyzed password: length={length}, score={score}, label={label}")

        return PasswordAnalysis(
            score=score,
            strength_label=label,
            entropy=entropy,
            feedback=tuple(feedback),
            suggestions=tuple(suggestions),
        )


def _round_half_up(value: float) -> int:
    # round() would send 42.5 to 42; halves always go up here.
    return math.floor(value + 0.5)


_default_analyzer = PasswordAnalyzer()


def analyze(password: str) -> PasswordAnalysis:
    """Analyze a password with the built-in common password list."""
    return _default_analyzer.analyze(password)
