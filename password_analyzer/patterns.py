"""
Structural weaknesses: ordered sequences and runs of one character.
"""

import re
from typing import Tuple

# Alphabet, digits and the three letter rows of a QWERTY keyboard.
SEQUENCES: Tuple[str, ...] = (
    "abcdefghijklmnopqrstuvwxyz",
    "0123456789",
    "qwertyuiop",
    "asdfghjkl",
    "zxcvbnm",
)

SEQUENCE_WINDOW = 3

_REPEATED_RE = re.compile(r"(.)\1{2,}", re.DOTALL)


def has_sequential_pattern(password: str) -> bool:
    """
    True if any 3-character slice of a reference sequence occurs in the
    lowercased password. Sequences do not wrap around.
    """
    lowered = password.lower()
    for sequence in SEQUENCES:
        for i in range(len(sequence) - SEQUENCE_WINDOW + 1):
            if sequence[i:i + SEQUENCE_WINDOW] in lowered:
                return True
    return False


def has_repeated_characters(password: str) -> bool:
    """True if the same character appears 3 or more times in a row."""
    return _REPEATED_RE.search(password) is not None
