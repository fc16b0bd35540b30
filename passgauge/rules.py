"""
passgauge.rules

Rule evaluators. Each takes the raw password and returns an integer
contribution (a bonus or a penalty):
- check_length(password): 0 / 5 / 10 / 20 / 30
- check_lowercase / check_uppercase / check_numbers: 0 or 10
- check_special_chars(password): 0 or 15
- check_repeating_chars(password): penalty 0..15
- check_weak_password(password): penalty 0, 15 or 20
- check_sequential_chars(password): penalty 0..15
- check_character_variety(password): bonus 0 / 2 / 5 / 10
- run_all_rules(password): RuleResults with every contribution

None of these raise, the empty string included.
"""

import re
import string
from dataclasses import dataclass
from typing import List

# small static sample of common passwords (offline, not a breach corpus)
WEAK_PASSWORDS = (
    "password", "123456", "12345678", "123456789", "qwerty",
    "abc123", "password1", "admin", "letmein", "welcome",
    "monkey", "football", "iloveyou", "123123", "1234",
    "12345", "1234567", "sunshine", "master", "hello",
    "charlie", "aa123456", "donald", "password123", "qwerty123",
    "admin123", "pass", "test", "guest", "temp", "user",
)
_WEAK_SET = frozenset(WEAK_PASSWORDS)
WEAK_SUBSTRING_MIN_LEN = 4

# digit runs of five plus every six-letter window of the alphabet
SEQUENTIAL_PATTERNS = (
    "12345", "23456", "34567", "45678", "56789", "67890",
) + tuple(string.ascii_lowercase[i:i + 6] for i in range(len(string.ascii_lowercase) - 5))

REPEAT_STEP = 5
REPEAT_CAP = 15
SEQUENTIAL_PATTERN_STEP = 10
SEQUENTIAL_RUN_PENALTY = 5
SEQUENTIAL_CAP = 15

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile(r"[^a-zA-Z0-9]")


@dataclass(frozen=True)
class RuleResults:
    """Raw output of every rule for one password."""

    length: int = 0
    lowercase: int = 0
    uppercase: int = 0
    numbers: int = 0
    special_chars: int = 0
    repeating_penalty: int = 0
    weak_penalty: int = 0
    sequential_penalty: int = 0
    variety_bonus: int = 0

    @property
    def bonus(self) -> int:
        return (
            self.length
            + self.lowercase
            + self.uppercase
            + self.numbers
            + self.special_chars
            + self.variety_bonus
        )

    @property
    def penalty(self) -> int:
        return self.repeating_penalty + self.weak_penalty + self.sequential_penalty


def check_length(password: str) -> int:
    n = len(password)
    if n == 0:
        return 0
    if n < 6:
        return 5
    if n < 8:
        return 10
    if n < 12:
        return 20
    return 30


def check_lowercase(password: str) -> int:
    return 10 if _LOWER_RE.search(password) else 0


def check_uppercase(password: str) -> int:
    return 10 if _UPPER_RE.search(password) else 0


def check_numbers(password: str) -> int:
    return 10 if _DIGIT_RE.search(password) else 0


def check_special_chars(password: str) -> int:
    """Anything outside [A-Za-z0-9] counts, including spaces and non-ASCII."""
    return 15 if _SPECIAL_RE.search(password) else 0


def check_repeating_chars(password: str) -> int:
    """
    Penalise runs of identical adjacent characters.

    Every position at which the current run reaches length 3 or more adds
    REPEAT_STEP, so 'aaa' costs 5, 'aaaa' 10 and anything longer hits the cap.
    """
    if len(password) < 3:
        return 0

    penalty = 0
    run = 1
    for prev, cur in zip(password, password[1:]):
        if cur == prev:
            run += 1
            if run >= 3:
                penalty += REPEAT_STEP
        else:
            run = 1
    return min(penalty, REPEAT_CAP)


def check_weak_password(password: str) -> int:
    """
    Exact (case-insensitive) match against WEAK_PASSWORDS costs 20.
    Containing a listed entry of at least four characters costs 15.
    """
    lower = password.lower()
    if lower in _WEAK_SET:
        return 20
    for weak in WEAK_PASSWORDS:
        if len(weak) >= WEAK_SUBSTRING_MIN_LEN and weak in lower:
            return 15
    return 0


def _has_code_point_run(password: str) -> bool:
    """True if any three consecutive characters step by +1 or -1 in code point."""
    codes: List[int] = [ord(c) for c in password]
    for a, b, c in zip(codes, codes[1:], codes[2:]):
        if (b == a + 1 and c == b + 1) or (b == a - 1 and c == b - 1):
            return True
    return False


def check_sequential_chars(password: str) -> int:
    """
    Every SEQUENTIAL_PATTERNS entry found (case-insensitive) adds 10; a
    three-character code point run anywhere adds a flat 5. Capped at 15.
    """
    lower = password.lower()
    penalty = SEQUENTIAL_PATTERN_STEP * sum(1 for p in SEQUENTIAL_PATTERNS if p in lower)
    if _has_code_point_run(password):
        penalty += SEQUENTIAL_RUN_PENALTY
    return min(penalty, SEQUENTIAL_CAP)


def count_character_classes(password: str) -> int:
    return sum(
        1
        for pattern in (_LOWER_RE, _UPPER_RE, _DIGIT_RE, _SPECIAL_RE)
        if pattern.search(password)
    )


def check_character_variety(password: str) -> int:
    classes = count_character_classes(password)
    if classes == 4:
        return 10
    if classes == 3:
        return 5
    if classes == 2:
        return 2
    return 0


def run_all_rules(password: str) -> RuleResults:
    """Evaluate every rule exactly once."""
    return RuleResults(
        length=check_length(password),
        lowercase=check_lowercase(password),
        uppercase=check_uppercase(password),
        numbers=check_numbers(password),
        special_chars=check_special_chars(password),
        repeating_penalty=check_repeating_chars(password),
        weak_penalty=check_weak_password(password),
        sequential_penalty=check_sequential_chars(password),
        variety_bonus=check_character_variety(password),
    )
