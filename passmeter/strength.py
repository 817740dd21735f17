"""
passmeter.strength

Map a numeric score to a Strength tier using a caller-supplied table of
inclusive upper bounds.
"""

from typing import Dict, Iterable, Mapping, Union

from .models import Strength, StrengthScore, StrengthTableError

StrengthTable = Union[Mapping[Strength, int], Iterable[StrengthScore]]

RANKED_TIERS = tuple(s for s in Strength if s is not Strength.INVALID)


def _parse_tier(value) -> Strength:
    try:
        return Strength.parse(value)
    except ValueError as e:
        raise StrengthTableError(str(e)) from None


def _as_mapping(table: StrengthTable) -> Dict[Strength, int]:
    if isinstance(table, Mapping):
        entries = [StrengthScore(_parse_tier(k), v) for k, v in table.items()]
    elif isinstance(table, (str, bytes)) or not isinstance(table, Iterable):
        raise StrengthTableError(f"strength table must be a mapping or a list of StrengthScore, got {table!r}")
    else:
        entries = list(table)
    out: Dict[Strength, int] = {}
    for entry in entries:
        if not isinstance(entry, StrengthScore):
            raise StrengthTableError(f"strength table entry is not a StrengthScore: {entry!r}")
        tier = _parse_tier(entry.strength)
        if tier in out:
            raise StrengthTableError(f"duplicate tier in strength table: {tier.name}")
        if not isinstance(entry.max_score, int) or isinstance(entry.max_score, bool):
            raise StrengthTableError(f"max score for {tier.name} must be an integer, got {entry.max_score!r}")
        out[tier] = entry.max_score
    return out


def validate_strength_table(table: StrengthTable) -> Dict[Strength, int]:
    """
    Check a tier table and return it as {Strength: max_score}.

    Every tier except INVALID must appear exactly once and the bounds must
    not decrease as severity increases. Raises StrengthTableError otherwise.
    """
    bounds = _as_mapping(table)
    if Strength.INVALID in bounds:
        raise StrengthTableError("strength table must not bound the INVALID tier")
    missing = [t.name for t in RANKED_TIERS if t not in bounds]
    if missing:
        raise StrengthTableError(f"strength table is missing tier(s): {', '.join(missing)}")
    previous = None
    for tier in RANKED_TIERS:
        bound = bounds[tier]
        if previous is not None and bound < previous:
            raise StrengthTableError(
                f"strength table bounds must not decrease: {tier.name}={bound} < {previous}"
            )
        previous = bound
    return bounds


def get_strength(score: int, table: StrengthTable) -> Strength:
    """
    Negative scores are INVALID. Otherwise the first tier whose max score is
    >= score wins, so a score equal to a bound lands in the lower tier.
    Scores above every bound are PERFECT.
    """
    bounds = validate_strength_table(table)
    if score < 0:
        return Strength.INVALID
    for tier in RANKED_TIERS:
        if score <= bounds[tier]:
            return tier
    return Strength.PERFECT
