"""
passmeter.evaluator

Password score = sum of fixed heuristics, run only once the password passes
validation:
- additions: length, character classes, middle digits/symbols, requirements,
  entropy
- deductions: letters/numbers only, consecutive runs, sequential runs,
  repeated characters, dates, keyboard patterns
- compute_score(password, options): returns a ScoreResult with score -1 and
  the error list when validation fails
"""

import logging
import math
import re
import string
from collections import Counter
from typing import Callable, List, Optional, Tuple

from .charclass import (
    count_digits,
    count_lower,
    count_symbols,
    count_upper,
    is_digit,
    is_letter,
    is_lower,
    is_symbol,
    is_upper,
)
from .models import PasswordOptions, ScoreResult
from .validator import validate

logger = logging.getLogger(__name__)

INVALID_SCORE = -1

# 3-character windows of the alphabet and digit rows ("abc".."xyz", "012".."789")
SEQUENTIAL_LETTERS = tuple(string.ascii_lowercase[i:i + 3] for i in range(24))
SEQUENTIAL_NUMBERS = tuple(string.digits[i:i + 3] for i in range(8))
# shifted number row
SEQUENTIAL_SYMBOLS = ("!@#", "@#$", "$%", "%^", "^&", "&*", "*(", "()")

# digit and symbol runs are counted as non-overlapping leftmost matches
_SEQUENTIAL_NUMBERS_RE = re.compile("|".join(SEQUENTIAL_NUMBERS))
_SEQUENTIAL_SYMBOLS_RE = re.compile("|".join(re.escape(w) for w in SEQUENTIAL_SYMBOLS))

# keyboard rows, numeric runs and finger rolls; reverses are checked separately
KEYBOARD_PATTERNS = (
    "1234567890", "234567890", "34567890", "4567890", "567890", "67890", "7890", "890",
    "0987654321", "987654321", "87654321", "7654321", "654321", "54321", "4321", "321",
    "qwertyuiop", "wertyuiop", "ertyuiop", "rtyuiop", "tyuiop", "yuiop", "uiop", "iop", "op",
    "poiuytrewq", "oiuytrewq", "iuytrewq", "uytrewq", "ytrewq", "trewq", "rewq", "ewq", "wq",
    "asdfghjkl", "sdfghjkl", "dfghjkl", "fghjkl", "ghjkl", "hjkl", "jkl",
    "lkjhgfdsa", "kjhgfdsa", "jhgfdsa", "hgfdsa", "gfdsa", "fdsa", "dsa",
    "zxcvbnm", "xcvbnm", "cvbnm", "vbnm", "bnm",
    "mnbvcxz", "nbvcxz", "bvcxz", "vcxz", "cxz",
    "1qaz", "qazwsx", "azwsxedc", "2wsx", "wsxedc", "sedcrfv", "edcrfvtg", "dcfvgb",
    "3edc", "rfvtgb", "fvtgbyhn", "vtgbyhnujm", "4rfv", "fvgb", "gbhn", "bhnj", "hnjm",
    "5tgb", "6yhn", "7ujm",
    ";/p0", ".lo9", ",ki8", "mj7", "nh6", "bg5", "vf4", "cd3", "xe2", "za1",
    "123456", "234567", "345678", "456789",
    "098765", "987654", "876543", "765432", "543210",
    "qwerty", "wertyu", "ertyui", "rtyuio",
    "poiuyt", "oiuytr", "iuytre", "uytrew",
    "asdfgh", "sdfghj", "dfghjk",
    "lkjhgf", "kjhgsd", "jhgfsa", "hgfasd",
    "zxcvbn", "mnbvcx",
    "qwer", "asdf", "zxcv", "poiuy",
)

_DAY = r"(?:0[1-9]|[12][0-9]|3[01])"
_MONTH = r"(?:0[1-9]|1[0-2])"

# DDMMYYYY, MMDDYYYY, YYYYMMDD
DATE_PATTERN_LONG = re.compile(
    rf"{_DAY}{_MONTH}[0-9]{{4}}|{_MONTH}{_DAY}[0-9]{{4}}|[0-9]{{4}}{_MONTH}{_DAY}"
)
# DDMMYY, MMDDYY, YYMMDD
DATE_PATTERN_SHORT = re.compile(
    rf"{_DAY}{_MONTH}[0-9]{{2}}|{_MONTH}{_DAY}[0-9]{{2}}|[0-9]{{2}}{_MONTH}{_DAY}"
)


def _count_overlapping(haystack: str, needle: str) -> int:
    n = 0
    i = haystack.find(needle)
    while i != -1:
        n += 1
        i = haystack.find(needle, i + 1)
    return n


def _count_windows(haystack: str, windows: Tuple[str, ...]) -> int:
    return sum(_count_overlapping(haystack, w) for w in windows)


def _consecutive_pairs(password: str, predicate: Callable[[str], bool]) -> int:
    """Sum of (run length - 1) over maximal runs of characters matching predicate."""
    pairs = 0
    run = 0
    for c in password:
        if predicate(c):
            run += 1
        else:
            pairs += max(run - 1, 0)
            run = 0
    return pairs + max(run - 1, 0)


# ---------------- additions ----------------

def number_of_characters(password: str) -> int:
    return len(password) * 4


def uppercase_letters(password: str) -> int:
    # rewards the characters that are NOT uppercase
    return (len(password) - count_upper(password)) * 2


def lowercase_letters(password: str) -> int:
    return (len(password) - count_lower(password)) * 2


def numbers(password: str) -> int:
    return count_digits(password) * 4


def symbols(password: str) -> int:
    return count_symbols(password) * 6


def middle_numbers_or_symbols(password: str) -> int:
    if len(password) <= 2:
        return 0
    middle = password[1:-1]
    return sum(1 for c in middle if is_digit(c) or is_symbol(c)) * 2


def requirements(password: str) -> int:
    """
    Bonus for meeting at least 3 of: length >= 8, uppercase, lowercase,
    digit, symbol. Worth 2 points per condition met.
    """
    conditions = (
        len(password) >= 8,
        count_upper(password) > 0,
        count_lower(password) > 0,
        count_digits(password) > 0,
        count_symbols(password) > 0,
    )
    met = sum(conditions)
    return met * 2 if met >= 3 else 0


def entropy(password: str) -> int:
    unique = len(set(password))
    if unique == 0:
        return 0
    return int(round(len(password) * math.log2(unique)))


# ---------------- deductions ----------------

def letters_only(password: str) -> int:
    if password and all(is_letter(c) for c in password):
        return -len(password)
    return 0


def numbers_only(password: str) -> int:
    if password and all(is_digit(c) for c in password):
        return -len(password)
    return 0


def consecutive_uppercase_letters(password: str) -> int:
    return -_consecutive_pairs(password, is_upper) * 2


def consecutive_lowercase_letters(password: str) -> int:
    return -_consecutive_pairs(password, is_lower) * 2


def consecutive_numbers(password: str) -> int:
    return -_consecutive_pairs(password, is_digit) * 2


def sequential_letters(password: str) -> int:
    return -_count_windows(password.lower(), SEQUENTIAL_LETTERS) * 3


def sequential_numbers(password: str) -> int:
    return -len(_SEQUENTIAL_NUMBERS_RE.findall(password)) * 3


def sequential_symbols(password: str) -> int:
    return -len(_SEQUENTIAL_SYMBOLS_RE.findall(password)) * 3


def repeated_characters(password: str) -> int:
    """Each character seen n > 1 times (case-folded) costs n squared."""
    counts = Counter(password.lower())
    return -sum(n * n for n in counts.values() if n > 1)


def date_patterns(password: str) -> int:
    total = len(DATE_PATTERN_LONG.findall(password)) + len(DATE_PATTERN_SHORT.findall(password))
    return -total * 5


def detect_keyboard_patterns(password: str) -> List[str]:
    """
    Return every keyboard pattern (or reversed pattern) found in the password,
    case-insensitively. A pattern and its reverse are reported independently.
    """
    lower = password.lower()
    found = []
    for pattern in KEYBOARD_PATTERNS:
        if pattern in lower:
            found.append(pattern)
        reverse = pattern[::-1]
        if reverse in lower:
            found.append(reverse)
    return found


def keyboard_patterns(password: str) -> int:
    return -len(detect_keyboard_patterns(password)) * 5


HEURISTICS: Tuple[Tuple[str, Callable[[str], int]], ...] = (
    ("number_of_characters", number_of_characters),
    ("uppercase_letters", uppercase_letters),
    ("lowercase_letters", lowercase_letters),
    ("numbers", numbers),
    ("symbols", symbols),
    ("middle_numbers_or_symbols", middle_numbers_or_symbols),
    ("requirements", requirements),
    ("entropy", entropy),
    ("letters_only", letters_only),
    ("numbers_only", numbers_only),
    ("consecutive_uppercase_letters", consecutive_uppercase_letters),
    ("consecutive_lowercase_letters", consecutive_lowercase_letters),
    ("consecutive_numbers", consecutive_numbers),
    ("sequential_letters", sequential_letters),
    ("sequential_numbers", sequential_numbers),
    ("sequential_symbols", sequential_symbols),
    ("repeated_characters", repeated_characters),
    ("date_patterns", date_patterns),
    ("keyboard_patterns", keyboard_patterns),
)


def score_breakdown(password: str) -> List[Tuple[str, int]]:
    """
    Run every heuristic in order and return (name, contribution) pairs.
    Does not validate; callers wanting the sentinel use compute_score.
    """
    breakdown = []
    for name, heuristic in HEURISTICS:
        value = heuristic(password)
        logger.debug("%s: %+d", name, value)
        breakdown.append((name, value))
    return breakdown


def compute_score(password: str, options: Optional[PasswordOptions] = None) -> ScoreResult:
    """
    Validate then score.

    Returns ScoreResult(score=-1, errors=[...]) when any validation rule
    fails; otherwise the summed heuristics with an empty error list. A valid
    password can still score below zero.
    """
    errors = validate(password, options)
    if errors:
        return ScoreResult(score=INVALID_SCORE, errors=errors)
    score = sum(value for _, value in score_breakdown(password))
    return ScoreResult(score=score, errors=[])
