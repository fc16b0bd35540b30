from passgauge.evaluator import Criteria
from passgauge.feedback import SUGGESTION_HEADER, build_feedback, build_suggestions

ALL_MET = Criteria(*([True] * 8))

def test_feedback_for_nothing_met():
    fb = build_feedback(5, Criteria())
    assert fb[0] == "Password is too short (5 characters). Minimum 8 characters recommended."
    # one message per unmet criterion except length, no closing message
    assert len(fb) == 8
    assert fb[1].startswith("Missing lowercase")
    assert fb[-1].startswith("Contains sequential")

def test_feedback_length_bands_cite_count():
    assert "medium length (10 characters)" in build_feedback(10, Criteria())[0]
    assert build_feedback(12, Criteria())[0] == "Good password length (12 characters)."

def test_feedback_closing_tiers():
    fb = build_feedback(20, ALL_MET)
    assert fb == (
        "Good password length (20 characters).",
        "Excellent! Your password meets most security criteria.",
    )

    four = Criteria(has_lowercase=True, no_repeating_chars=True, not_weak_password=True, no_sequential_chars=True)
    fb = build_feedback(9, four)
    assert fb[-1] == "Good start! Your password could be stronger with more variety."

    three = Criteria(has_lowercase=True, not_weak_password=True, no_sequential_chars=True)
    fb = build_feedback(9, three)
    assert not fb[-1].startswith(("Good start", "Excellent"))

def test_suggestions_header_and_order():
    sugg = build_suggestions(Criteria(), 0)
    assert sugg[0] == SUGGESTION_HEADER
    assert len(sugg) == 9
    assert sugg[1] == "• Increase length to at least 12 characters"
    assert sugg[-1] == "• Avoid sequential characters (abc, 123, etc.)"

    # no header from 50 upward
    sugg = build_suggestions(Criteria(has_lowercase=True), 50)
    assert SUGGESTION_HEADER not in sugg
    assert "• Add lowercase letters (a-z)" not in sugg

def test_suggestions_encouragement_gates():
    # eight characters with every class present scores 75 but misses the length band
    short = Criteria(*([False] + [True] * 7))
    assert build_suggestions(short, 69) == ("• Increase length to at least 12 characters",)
    assert build_suggestions(short, 75) == (
        "• Increase length to at least 12 characters",
        "Good job! Your password has decent security.",
    )
    assert build_suggestions(ALL_MET, 85) == (
        "Good job! Your password has decent security.",
        "Excellent! Your password is very secure.",
    )
