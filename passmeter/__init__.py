"""passmeter: rule-based password strength scoring."""

from .compare import compare_passwords
from .crack_time import calculate_crack_time
from .evaluator import compute_score, score_breakdown
from .models import (
    ComparisonError,
    CrackTimeOptions,
    CrackTimeResult,
    ErrorMessages,
    PassmeterError,
    PasswordComparison,
    PasswordOptions,
    ScoreResult,
    Strength,
    StrengthScore,
    StrengthTableError,
)
from .strength import get_strength
from .validator import validate

__version__ = "0.1.0"

__all__ = [
    "ComparisonError",
    "CrackTimeOptions",
    "CrackTimeResult",
    "ErrorMessages",
    "PassmeterError",
    "PasswordComparison",
    "PasswordOptions",
    "ScoreResult",
    "Strength",
    "StrengthScore",
    "StrengthTableError",
    "calculate_crack_time",
    "compare_passwords",
    "compute_score",
    "get_strength",
    "score_breakdown",
    "validate",
]
