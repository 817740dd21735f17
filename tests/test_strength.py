import pytest

from passmeter.models import Strength, StrengthScore, StrengthTableError
from passmeter.strength import get_strength, validate_strength_table

TABLE = {
    Strength.VERY_WEAK: 20,
    Strength.WEAK: 40,
    Strength.GOOD: 60,
    Strength.STRONG: 80,
    Strength.VERY_STRONG: 100,
    Strength.PERFECT: 120,
}


def test_negative_score_is_invalid():
    assert get_strength(-1, TABLE) is Strength.INVALID
    assert get_strength(-100, TABLE) is Strength.INVALID


def test_boundary_maps_to_lower_tier():
    assert get_strength(0, TABLE) is Strength.VERY_WEAK
    assert get_strength(20, TABLE) is Strength.VERY_WEAK
    assert get_strength(21, TABLE) is Strength.WEAK
    assert get_strength(60, TABLE) is Strength.GOOD
    assert get_strength(100, TABLE) is Strength.VERY_STRONG
    assert get_strength(120, TABLE) is Strength.PERFECT


def test_above_every_bound_is_perfect():
    assert get_strength(10_000, TABLE) is Strength.PERFECT


def test_accepts_strength_score_list_and_names():
    entries = [StrengthScore(tier, bound) for tier, bound in TABLE.items()]
    assert get_strength(45, entries) is Strength.GOOD
    named = {tier.name.lower(): bound for tier, bound in TABLE.items()}
    assert get_strength(45, named) is Strength.GOOD


def test_classification_is_monotonic():
    tiers = [get_strength(score, TABLE) for score in range(-5, 200)]
    assert tiers == sorted(tiers)


def test_equal_bounds_are_allowed():
    flat = {tier: 10 for tier in TABLE}
    assert get_strength(10, flat) is Strength.VERY_WEAK
    assert get_strength(11, flat) is Strength.PERFECT


def test_missing_tier_raises():
    table = dict(TABLE)
    del table[Strength.GOOD]
    with pytest.raises(StrengthTableError):
        get_strength(10, table)


def test_duplicate_tier_raises():
    entries = [StrengthScore(tier, bound) for tier, bound in TABLE.items()]
    entries.append(StrengthScore(Strength.WEAK, 40))
    with pytest.raises(StrengthTableError):
        validate_strength_table(entries)


def test_decreasing_bounds_raise():
    table = dict(TABLE)
    table[Strength.STRONG] = 50
    with pytest.raises(StrengthTableError):
        get_strength(10, table)


def test_invalid_entry_raises_even_for_negative_scores():
    table = dict(TABLE)
    table[Strength.INVALID] = 0
    try:
        get_strength(-1, table)
        raised = False
    except StrengthTableError:
        raised = True
    assert raised


def test_table_error_is_value_error():
    with pytest.raises(ValueError):
        get_strength(1, {})


def test_strength_parse_and_label():
    assert Strength.parse("very strong") is Strength.VERY_STRONG
    assert Strength.parse("very-weak") is Strength.VERY_WEAK
    assert Strength.parse(3) is Strength.GOOD
    assert Strength.VERY_WEAK.label == "Very Weak"
    with pytest.raises(ValueError):
        Strength.parse("meh")


def test_unparseable_tiers_are_table_errors():
    named = {tier.name.lower(): bound for tier, bound in TABLE.items()}
    named["legendary"] = 200
    with pytest.raises(StrengthTableError):
        get_strength(10, named)

    numbered = {int(tier): bound for tier, bound in TABLE.items()}
    numbered[99] = 200
    with pytest.raises(StrengthTableError):
        get_strength(10, numbered)


def test_non_strength_score_entries_are_table_errors():
    pairs = [(tier, bound) for tier, bound in TABLE.items()]
    with pytest.raises(StrengthTableError):
        get_strength(10, pairs)
    with pytest.raises(StrengthTableError):
        get_strength(10, 42)


def test_non_integer_bound_is_table_error():
    table = dict(TABLE)
    table[Strength.GOOD] = "60"
    with pytest.raises(StrengthTableError):
        validate_strength_table(table)
