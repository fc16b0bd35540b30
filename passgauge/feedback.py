"""
passgauge.feedback

Turn criteria into human-readable feedback and actionable suggestions.
Both lists depend only on (length, criteria, score) and keep a fixed order
so results are reproducible.
"""

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from .evaluator import Criteria

SUGGESTION_HEADER = "To strengthen your password:"
SUGGESTION_HEADER_BELOW = 50
GOOD_JOB_AT = 70
EXCELLENT_AT = 85

# (criterion attribute, feedback message) in display order
_FEEDBACK_MESSAGES = (
    ("has_lowercase", "Missing lowercase letters. Add some lowercase letters (a-z)."),
    ("has_uppercase", "Missing uppercase letters. Add some uppercase letters (A-Z)."),
    ("has_numbers", "Missing numbers. Add some numbers (0-9)."),
    ("has_special_chars", "Missing special characters. Add some special characters (!@#$%^&* etc.)."),
    ("no_repeating_chars", "Contains repeating characters. Try to avoid character repetitions."),
    ("not_weak_password", "Password contains common words or patterns."),
    ("no_sequential_chars", "Contains sequential characters (like abc, 123)."),
)

_SUGGESTION_BULLETS = (
    ("length", "• Increase length to at least 12 characters"),
    ("has_lowercase", "• Add lowercase letters (a-z)"),
    ("has_uppercase", "• Add uppercase letters (A-Z)"),
    ("has_numbers", "• Add numbers (0-9)"),
    ("has_special_chars", "• Add special characters (!@#$%^&* etc.)"),
    ("no_repeating_chars", "• Avoid repeating the same character multiple times"),
    ("not_weak_password", "• Avoid common words and predictable patterns"),
    ("no_sequential_chars", "• Avoid sequential characters (abc, 123, etc.)"),
)


def _length_message(length: int) -> str:
    if length < 8:
        return f"Password is too short ({length} characters). Minimum 8 characters recommended."
    if length < 12:
        return f"Password is medium length ({length} characters). 12+ characters is more secure."
    return f"Good password length ({length} characters)."


def build_feedback(length: int, criteria: "Criteria") -> Tuple[str, ...]:
    """
    One length message, one message per unmet criterion, then a closing
    message picked by how many of the eight criteria pass.
    """
    feedback: List[str] = [_length_message(length)]

    for attr, message in _FEEDBACK_MESSAGES:
        if not getattr(criteria, attr):
            feedback.append(message)

    passed = criteria.passed_count()
    if passed >= 6:
        feedback.append("Excellent! Your password meets most security criteria.")
    elif passed >= 4:
        feedback.append("Good start! Your password could be stronger with more variety.")

    return tuple(feedback)


def build_suggestions(criteria: "Criteria", score: int) -> Tuple[str, ...]:
    suggestions: List[str] = []
    if score < SUGGESTION_HEADER_BELOW:
        suggestions.append(SUGGESTION_HEADER)

    for attr, bullet in _SUGGESTION_BULLETS:
        if not getattr(criteria, attr):
            suggestions.append(bullet)

    if score >= GOOD_JOB_AT:
        suggestions.append("Good job! Your password has decent security.")
    if score >= EXCELLENT_AT:
        suggestions.append("Excellent! Your password is very secure.")

    return tuple(suggestions)
