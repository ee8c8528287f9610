"""
Known weak passwords.

The built-in list is a small subset of the most frequently leaked passwords
from public breach corpora. All entries are lowercase; callers lowercase the
candidate before testing membership.
"""

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Union

logger = logging.getLogger(__name__)

COMMON_PASSWORDS: FrozenSet[str] = frozenset({
    # Numeric
    "123456", "123456789", "12345678", "12345", "1234567", "1234567890",
    "1234", "123123", "111111", "000000", "654321", "666666", "121212",
    "112233", "123321", "159753", "987654321", "11111111", "88888888",
    "7777777", "55555", "131313", "696969", "123654",
    # Words and names
    "password", "password1", "password123", "passw0rd", "p@ssw0rd",
    "iloveyou", "princess", "sunshine", "monkey", "dragon", "shadow",
    "master", "letmein", "welcome", "welcome1", "football", "baseball",
    "superman", "batman", "trustno1", "michael", "jennifer", "jordan",
    "hunter", "hunter2", "charlie", "freedom", "whatever", "starwars",
    "computer", "secret", "summer", "flower", "cheese", "pokemon",
    "liverpool", "chelsea", "soccer", "hockey", "killer", "ginger",
    "buster", "tigger", "pepper", "mustang", "harley", "ranger",
    "thomas", "robert", "daniel", "andrew", "jessica", "ashley",
    "nicole", "hello", "love", "lovely", "angel", "solo", "access",
    "login", "admin", "administrator", "root", "guest", "test",
    "changeme", "default", "letmein1", "iloveyou1",
    # Keyboard and letter runs
    "qwerty", "qwerty123", "qwertyuiop", "1qaz2wsx", "qazwsx", "zaq12wsx",
    "1q2w3e4r", "1q2w3e", "asdfgh", "asdfghjkl", "zxcvbnm", "q1w2e3r4",
    "abc123", "abcdef", "abcd1234", "a1b2c3", "aaaaaa", "aaaaaaaa",
    "qqqqqq", "azerty", "password!", "123qwe", "qwe123",
})


def is_common_password(password: str, denylist: Optional[Iterable[str]] = None) -> bool:
    """Exact membership test against the denylist (built-in list by default)."""
    if denylist is None:
        denylist = COMMON_PASSWORDS
    return password.lower() in denylist


def load_common_passwords(path: Union[str, Path]) -> FrozenSet[str]:
    """
    Read an additional denylist file and merge it with the built-in list.

    One password per line; blank lines and lines starting with '#' are
    skipped. Entries are lowercased.

    Raises:
        OSError: If the file cannot be read.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            extra = {
                line.strip().lower()
                for line in f
                if line.strip() and not line.lstrip().startswith("#")
            }
    except OSError as e:
        logger.error(f"Could not read common password list {path}: {e}")
        raise

    logger.info(f"Loaded {len(extra)} common passwords from {path}")
    return COMMON_PASSWORDS | frozenset(extra)
