"""
passgauge.crack_time

Coarse time-to-crack label derived from the analysis score and the password
length. This is a display heuristic, not an attack model.
"""

NO_PASSWORD = "No password entered"
INSTANT_BELOW_LENGTH = 6

# (score upper bound exclusive, label)
SCORE_BANDS = (
    (20, "Instantly"),
    (30, "Seconds"),
    (40, "Minutes"),
    (50, "Hours"),
    (60, "Days"),
    (70, "Weeks"),
    (80, "Months"),
    (90, "Years"),
)


def estimate_time_to_crack(password: str, score: int) -> str:
    """
    Return a human-readable duration label.

    Blank input (empty or whitespace only) gets the NO_PASSWORD sentinel.
    Passwords shorter than six characters are always "Instantly". The top
    band (score >= 90) is refined by length.
    """
    if not password or not password.strip():
        return NO_PASSWORD

    length = len(password)
    if length < INSTANT_BELOW_LENGTH:
        return "Instantly"

    for upper, label in SCORE_BANDS:
        if score < upper:
            return label

    if length >= 16:
        return "Decades"
    if length >= 12:
        return "Years to decades"
    return "Years"
