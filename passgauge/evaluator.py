"""
passgauge.evaluator

Password strength aggregator:
- analyze(password): run every rule once, combine bonuses and penalties into
  a clamped 0-100 score, derive the level, the eight criteria, feedback and
  suggestions. Returns an immutable AnalysisResult.
- level_for_score(score): fixed score bands -> StrengthLevel

Criteria come from the raw rule outputs, not from the final score, so a
high-scoring password can still fail an individual criterion.
"""

import logging
from dataclasses import asdict, dataclass, fields
from enum import Enum
from functools import total_ordering
from typing import Any, Dict, Tuple

from .feedback import build_feedback, build_suggestions
from .rules import RuleResults, run_all_rules

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100
TOP_LENGTH_CONTRIBUTION = 30


@total_ordering
class StrengthLevel(Enum):
    """Ordered by declaration: EMPTY is the lowest, VERY_STRONG the highest."""

    EMPTY = "empty"
    VERY_WEAK = "very weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very strong"

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self)

    @property
    def label(self) -> str:
        return self.value.title()

    def __lt__(self, other):
        if not isinstance(other, StrengthLevel):
            return NotImplemented
        return self.rank < other.rank


_LEVEL_ORDER = tuple(StrengthLevel)

# (lower bound inclusive, level), checked from the top down
LEVEL_THRESHOLDS = (
    (80, StrengthLevel.VERY_STRONG),
    (60, StrengthLevel.STRONG),
    (40, StrengthLevel.MEDIUM),
    (20, StrengthLevel.WEAK),
    (1, StrengthLevel.VERY_WEAK),
)


@dataclass(frozen=True)
class Criteria:
    length: bool = False
    has_lowercase: bool = False
    has_uppercase: bool = False
    has_numbers: bool = False
    has_special_chars: bool = False
    no_repeating_chars: bool = False
    not_weak_password: bool = False
    no_sequential_chars: bool = False

    @classmethod
    def from_rules(cls, results: RuleResults) -> "Criteria":
        return cls(
            length=results.length >= TOP_LENGTH_CONTRIBUTION,
            has_lowercase=results.lowercase > 0,
            has_uppercase=results.uppercase > 0,
            has_numbers=results.numbers > 0,
            has_special_chars=results.special_chars > 0,
            no_repeating_chars=results.repeating_penalty == 0,
            not_weak_password=results.weak_penalty == 0,
            no_sequential_chars=results.sequential_penalty == 0,
        )

    def __iter__(self):
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    def passed_count(self) -> int:
        return sum(1 for _, met in self if met)

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


# display text per Criteria field, in field order
CRITERIA_LABELS = {
    "length": "At least 12 characters",
    "has_lowercase": "Contains lowercase letters",
    "has_uppercase": "Contains uppercase letters",
    "has_numbers": "Contains numbers",
    "has_special_chars": "Contains special characters",
    "no_repeating_chars": "No repeating characters",
    "not_weak_password": "Not a common password",
    "no_sequential_chars": "No sequential characters",
}


@dataclass(frozen=True)
class AnalysisResult:
    score: int
    level: StrengthLevel
    criteria: Criteria
    feedback: Tuple[str, ...]
    suggestions: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "level": self.level.value,
            "criteria": self.criteria.to_dict(),
            "feedback": list(self.feedback),
            "suggestions": list(self.suggestions),
        }


EMPTY_RESULT = AnalysisResult(
    score=0,
    level=StrengthLevel.EMPTY,
    criteria=Criteria(),
    feedback=("Please enter a password to analyze",),
    suggestions=("Password should be at least 12 characters long",),
)


def level_for_score(score: int) -> StrengthLevel:
    """Map a score to its band; out-of-range scores are clamped first."""
    score = max(MIN_SCORE, min(score, MAX_SCORE))
    for lower_bound, level in LEVEL_THRESHOLDS:
        if score >= lower_bound:
            return level
    return StrengthLevel.EMPTY


def analyze(password: str) -> AnalysisResult:
    """
    Score a password.

    The empty string short-circuits to EMPTY_RESULT without running the rules.
    """
    if not password:
        return EMPTY_RESULT

    results = run_all_rules(password)
    score = max(MIN_SCORE, min(results.bonus - results.penalty, MAX_SCORE))
    level = level_for_score(score)
    criteria = Criteria.from_rules(results)

    logger.debug("analyzed password: score=%d level=%s", score, level.value)

    return AnalysisResult(
        score=score,
        level=level,
        criteria=criteria,
        feedback=build_feedback(len(password), criteria),
        suggestions=build_suggestions(criteria, score),
    )
