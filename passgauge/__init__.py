"""PassGauge: heuristic password strength scoring."""

from .crack_time import estimate_time_to_crack
from .evaluator import AnalysisResult, Criteria, StrengthLevel, analyze, level_for_score
from .generator import generate_password

__all__ = [
    "AnalysisResult",
    "Criteria",
    "StrengthLevel",
    "analyze",
    "estimate_time_to_crack",
    "generate_password",
    "level_for_score",
]

__version__ = "0.1.0"
