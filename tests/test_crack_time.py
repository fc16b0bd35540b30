from passgauge.crack_time import NO_PASSWORD, estimate_time_to_crack

def test_blank_password_sentinel():
    for score in (0, 50, 100):
        assert estimate_time_to_crack("", score) == NO_PASSWORD
    assert estimate_time_to_crack("   ", 90) == NO_PASSWORD

def test_short_or_low_scoring_is_instant():
    assert estimate_time_to_crack("Ab1!x", 95) == "Instantly"
    assert estimate_time_to_crack("abcdefgh", 19) == "Instantly"

def test_score_bands():
    pw = "abcdefgh"
    expected = {
        20: "Seconds", 29: "Seconds",
        30: "Minutes", 40: "Hours", 50: "Days",
        60: "Weeks", 70: "Months", 80: "Years", 89: "Years",
    }
    for score, label in expected.items():
        assert estimate_time_to_crack(pw, score) == label

def test_top_band_refined_by_length():
    assert estimate_time_to_crack("a" * 10, 90) == "Years"
    assert estimate_time_to_crack("a" * 12, 95) == "Years to decades"
    assert estimate_time_to_crack("a" * 16, 100) == "Decades"
