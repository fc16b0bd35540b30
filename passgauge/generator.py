"""
passgauge.generator
Random strong-password generator built on Python's secrets module.
"""

from secrets import choice, SystemRandom
import string
from typing import List, Optional


DEFAULT_SPECIALS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
DEFAULT_LENGTH = 16
_sysrand = SystemRandom()


def character_pools(specials: Optional[str] = None) -> List[str]:
    return [
        string.ascii_lowercase,
        string.ascii_uppercase,
        string.digits,
        specials or DEFAULT_SPECIALS,
    ]


def generate_password(length: int = DEFAULT_LENGTH, specials: Optional[str] = None) -> str:
    """
    Generate a password holding at least one lowercase letter, uppercase
    letter, digit and special character; the rest is drawn uniformly from
    the combined alphabet and the whole thing is shuffled.
    """
    pools = character_pools(specials)
    if length < len(pools):
        raise ValueError(f"length must be at least {len(pools)} to include every character class")

    chars = [choice(pool) for pool in pools]
    alphabet = "".join(pools)
    chars.extend(choice(alphabet) for _ in range(length - len(pools)))

    _sysrand.shuffle(chars)
    return "".join(chars)
