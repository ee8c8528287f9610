"""
Entropy estimate from character-class pool size and length.
"""

import math
import re
from dataclasses import dataclass

LOWERCASE_POOL = 26
UPPERCASE_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = 33  # printable ASCII punctuation plus space

_LOWERCASE_RE = re.compile(r"[a-z]")
_UPPERCASE_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^A-Za-z0-9]")


@dataclass(frozen=True)
class CharacterClasses:
    """Which of the four ASCII character classes occur in a password"""
    lowercase: bool = False
    uppercase: bool = False
    digits: bool = False
    symbols: bool = False

    @classmethod
    def detect(cls, password: str) -> "CharacterClasses":
        return cls(
            lowercase=bool(_LOWERCASE_RE.search(password)),
            uppercase=bool(_UPPERCASE_RE.search(password)),
            digits=bool(_DIGIT_RE.search(password)),
            symbols=bool(_SYMBOL_RE.search(password)),
        )

    @property
    def count(self) -> int:
        return sum((self.lowercase, self.uppercase, self.digits, self.symbols))


def character_pool_size(classes: CharacterClasses) -> int:
    """Sum of the pool sizes of the classes present, floored at 1."""
    pool = 0
    if classes.lowercase:
        pool += LOWERCASE_POOL
    if classes.uppercase:
        pool += UPPERCASE_POOL
    if classes.digits:
        pool += DIGIT_POOL
    if classes.symbols:
        pool += SYMBOL_POOL
    return pool or 1


def calculate_entropy(password: str) -> float:
    """
    Estimate bits of entropy as length * log2(pool size).

    An empty password has exactly 0 bits.
    """
    if not password:
        return 0.0
    pool = character_pool_size(CharacterClasses.detect(password))
    return len(password) * math.log2(pool)
