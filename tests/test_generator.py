import pytest

from passgauge.evaluator import analyze
from passgauge.generator import DEFAULT_SPECIALS, generate_password

def test_length_and_classes():
    pw = generate_password(length=12)
    assert len(pw) == 12
    assert any(c.isupper() for c in pw)
    assert any(c.islower() for c in pw)
    assert any(c.isdigit() for c in pw)
    assert any(c in DEFAULT_SPECIALS for c in pw)

def test_minimum_length_holds_one_of_each():
    pw = generate_password(length=4)
    assert len(pw) == 4
    assert sum(1 for c in pw if c.islower()) == 1
    assert sum(1 for c in pw if c.isupper()) == 1
    assert sum(1 for c in pw if c.isdigit()) == 1
    assert sum(1 for c in pw if c in DEFAULT_SPECIALS) == 1

def test_custom_specials():
    pw = generate_password(length=30, specials="~")
    assert "~" in pw
    assert not any(c in DEFAULT_SPECIALS for c in pw)

def test_too_short_raises():
    with pytest.raises(ValueError):
        generate_password(length=3)

def test_generated_passwords_differ_and_score_well():
    seen = {generate_password() for _ in range(5)}
    assert len(seen) > 1
    for pw in seen:
        assert analyze(pw).criteria.has_special_chars
