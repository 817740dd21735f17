"""
passmeter.models

Plain result/option carriers shared by the evaluator, the CLI and the web API.
"""

from dataclasses import asdict, dataclass, field, fields
from enum import IntEnum
from typing import Any, Dict, List, Mapping, Optional, Tuple


class PassmeterError(Exception):
    """Base class for passmeter errors."""


class StrengthTableError(PassmeterError, ValueError):
    """Raised when a strength tier table is malformed."""


class ComparisonError(PassmeterError, ValueError):
    """Raised when two scores cannot be compared as a ratio."""


class Strength(IntEnum):
    # declaration order is severity order
    INVALID = 0
    VERY_WEAK = 1
    WEAK = 2
    GOOD = 3
    STRONG = 4
    VERY_STRONG = 5
    PERFECT = 6

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @classmethod
    def parse(cls, value: Any) -> "Strength":
        """Accept a Strength, its name ("very_weak", "Very Weak") or its int value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        key = str(value).strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unknown strength tier: {value!r}") from None


@dataclass(frozen=True)
class StrengthScore:
    strength: Strength
    max_score: int


@dataclass(frozen=True)
class ErrorMessages:
    """Per-rule overrides for validation messages. None keeps the default text."""

    empty: Optional[str] = None
    too_short: Optional[str] = None
    too_long: Optional[str] = None
    not_enough_uppercase: Optional[str] = None
    not_enough_lowercase: Optional[str] = None
    not_enough_numbers: Optional[str] = None
    not_enough_symbols: Optional[str] = None
    does_not_include_all: Optional[str] = None
    contains_excluded: Optional[str] = None
    does_not_start_with: Optional[str] = None
    does_not_end_with: Optional[str] = None
    does_not_include_one_of: Optional[str] = None


def _tuple_or_none(value: Any) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ValueError(f"expected a list of strings, got {value!r}")
    return tuple(value)


@dataclass(frozen=True)
class PasswordOptions:
    """
    Policy constraints for validation. Every field is optional; None means
    "no constraint".
    """

    min_length: Optional[int] = None
    max_length: Optional[int] = None
    uppercase_min: Optional[int] = None
    lowercase_min: Optional[int] = None
    numbers_min: Optional[int] = None
    symbols_min: Optional[int] = None
    include: Optional[Tuple[str, ...]] = None
    exclude: Optional[Tuple[str, ...]] = None
    starts_with: Optional[str] = None
    ends_with: Optional[str] = None
    include_one: Optional[Tuple[str, ...]] = None
    error_messages: ErrorMessages = field(default_factory=ErrorMessages)

    def __post_init__(self):
        for name in ("min_length", "max_length", "uppercase_min", "lowercase_min",
                     "numbers_min", "symbols_min"):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in ("starts_with", "ends_with"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        # lists from JSON are frozen into tuples so the options stay hashable
        for name in ("include", "exclude", "include_one"):
            value = _tuple_or_none(getattr(self, name))
            if value is not None and not all(isinstance(item, str) for item in value):
                raise ValueError(f"{name} must contain only strings")
            object.__setattr__(self, name, value)
        if not isinstance(self.error_messages, ErrorMessages):
            raise ValueError("error_messages must be an ErrorMessages instance")

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "PasswordOptions":
        """Build options from a plain mapping (config file or JSON request body)."""
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError("password options must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown password option(s): {', '.join(sorted(unknown))}")
        kwargs = dict(data)
        messages = kwargs.pop("error_messages", None) or {}
        if not isinstance(messages, (ErrorMessages, Mapping)):
            raise ValueError("error_messages must be a mapping")
        if not isinstance(messages, ErrorMessages):
            msg_known = {f.name for f in fields(ErrorMessages)}
            bad = set(messages) - msg_known
            if bad:
                raise ValueError(f"unknown error message key(s): {', '.join(sorted(bad))}")
            messages = ErrorMessages(**messages)
        return cls(error_messages=messages, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ScoreResult:
    score: int
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "errors": list(self.errors)}


@dataclass(frozen=True)
class CrackTimeOptions:
    guesses_per_second: float = 5e11
    possible_characters: int = 95


@dataclass(frozen=True)
class TimeUnits:
    millennia: int = 0
    centuries: int = 0
    decades: int = 0
    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0


@dataclass(frozen=True)
class CrackTimeResult:
    seconds: float
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PasswordComparison:
    difference: float
    difference_percentage: float
    old_score: int
    new_score: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
