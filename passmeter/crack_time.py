"""
passmeter.crack_time

Brute-force crack time: possible_characters ** length guesses at a fixed
rate, rendered as "1 year, 3 months, 2 days" style text.
"""

import math
from typing import List, Optional

from .models import CrackTimeOptions, CrackTimeResult, TimeUnits

SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = SECONDS_IN_MINUTE * 60
SECONDS_IN_DAY = SECONDS_IN_HOUR * 24
SECONDS_IN_MONTH = SECONDS_IN_DAY * 30.44  # average month
SECONDS_IN_YEAR = SECONDS_IN_DAY * 365.25
SECONDS_IN_DECADE = SECONDS_IN_YEAR * 10
SECONDS_IN_CENTURY = SECONDS_IN_YEAR * 100
SECONDS_IN_MILLENNIUM = SECONDS_IN_YEAR * 1000

# (TimeUnits field, plural word, singular word), largest first
_UNITS = (
    ("millennia", "millenniums", "millennium"),
    ("centuries", "centuries", "century"),
    ("decades", "decades", "decade"),
    ("years", "years", "year"),
    ("months", "months", "month"),
    ("days", "days", "day"),
    ("hours", "hours", "hour"),
    ("minutes", "minutes", "minute"),
    ("seconds", "seconds", "second"),
)

INSTANTLY = "instantly"
FOREVER = "forever"


def seconds_to_time_units(total_seconds: float) -> TimeUnits:
    """Split seconds into whole units, largest first; leftover seconds are floored."""
    if math.isinf(total_seconds) or math.isnan(total_seconds):
        raise ValueError("total_seconds must be finite")
    remaining = total_seconds
    parts = {}
    for name, size in (
        ("millennia", SECONDS_IN_MILLENNIUM),
        ("centuries", SECONDS_IN_CENTURY),
        ("decades", SECONDS_IN_DECADE),
        ("years", SECONDS_IN_YEAR),
        ("months", SECONDS_IN_MONTH),
        ("days", SECONDS_IN_DAY),
        ("hours", SECONDS_IN_HOUR),
        ("minutes", SECONDS_IN_MINUTE),
    ):
        parts[name] = int(remaining // size)
        remaining %= size
    parts["seconds"] = int(math.floor(remaining))
    return TimeUnits(**parts)


def format_time_units(units: TimeUnits) -> str:
    pieces: List[str] = []
    for name, plural, singular in _UNITS:
        value = getattr(units, name)
        if value > 0:
            pieces.append(f"{value} {singular if value == 1 else plural}")
    if not pieces:
        return INSTANTLY
    return ", ".join(pieces)


def calculate_crack_time(password: str, options: Optional[CrackTimeOptions] = None) -> CrackTimeResult:
    """
    Estimate how long an exhaustive search over the password's length takes.

    Defaults assume 5e11 guesses per second over the 95 printable ASCII
    characters. Results too large for a float come back as inf / "forever".
    """
    opts = options or CrackTimeOptions()
    if opts.guesses_per_second <= 0:
        raise ValueError("guesses_per_second must be > 0")
    if opts.possible_characters <= 0:
        raise ValueError("possible_characters must be > 0")

    try:
        seconds = opts.possible_characters ** len(password) / opts.guesses_per_second
    except OverflowError:
        seconds = math.inf
    if math.isinf(seconds):
        return CrackTimeResult(seconds=math.inf, description=FOREVER)
    return CrackTimeResult(seconds=seconds, description=format_time_units(seconds_to_time_units(seconds)))
