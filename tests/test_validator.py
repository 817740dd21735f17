import pytest

from passmeter.models import ErrorMessages, PasswordOptions
from passmeter.validator import DEFAULT_MESSAGES, failed_rules, validate


def test_empty_password_always_fails():
    assert validate("") == ["Password is empty."]
    assert validate("", PasswordOptions(min_length=8)) == [
        "Password is empty.",
        "Password is too short.",
    ]


def test_no_options_means_no_constraints():
    assert validate("a") == []
    assert validate("a", PasswordOptions()) == []


def test_rule_order_is_fixed():
    opts = PasswordOptions(
        min_length=2,
        max_length=0,
        uppercase_min=1,
        lowercase_min=2,
        numbers_min=1,
        symbols_min=1,
        include=["y"],
        exclude=["x"],
        starts_with="a",
        ends_with="b",
        include_one=["q", "r"],
    )
    assert failed_rules("x", opts) == [
        "too_short",
        "too_long",
        "not_enough_uppercase",
        "not_enough_lowercase",
        "not_enough_numbers",
        "not_enough_symbols",
        "does_not_include_all",
        "contains_excluded",
        "does_not_start_with",
        "does_not_end_with",
        "does_not_include_one_of",
    ]
    assert validate("x", opts) == [DEFAULT_MESSAGES[r] for r in failed_rules("x", opts)]


def test_passing_policy():
    opts = PasswordOptions(
        min_length=8,
        max_length=16,
        uppercase_min=1,
        lowercase_min=1,
        numbers_min=1,
        symbols_min=1,
        include=["Pass"],
        exclude=["admin"],
        starts_with="P",
        ends_with="!",
        include_one=["1", "2"],
    )
    assert validate("Password1!", opts) == []


def test_bounds_are_inclusive():
    assert validate("abcd", PasswordOptions(min_length=4, max_length=4)) == []
    assert validate("abc", PasswordOptions(min_length=4)) == ["Password is too short."]
    assert validate("abcde", PasswordOptions(max_length=4)) == ["Password is too long."]


def test_underscore_is_not_a_symbol():
    opts = PasswordOptions(symbols_min=1)
    assert validate("abc_", opts) == ["Not enough symbols."]
    assert validate("abc-", opts) == []


@pytest.mark.parametrize("items, password, ok", [
    (["ab", "cd"], "abcd", True),
    (["ab", "zz"], "abcd", False),
])
def test_include_all(items, password, ok):
    errors = validate(password, PasswordOptions(include=items))
    assert (errors == []) is ok


def test_include_one_with_empty_set_fails():
    assert validate("abc", PasswordOptions(include_one=[])) == [
        "Password must contain at least one of the specified characters."
    ]


def test_custom_messages_fall_back_per_rule():
    opts = PasswordOptions(
        min_length=10,
        numbers_min=1,
        error_messages=ErrorMessages(too_short="Use at least 10 characters."),
    )
    assert validate("abc", opts) == ["Use at least 10 characters.", "Not enough numbers."]


def test_options_from_dict():
    opts = PasswordOptions.from_dict({
        "min_length": 3,
        "exclude": ["pw"],
        "error_messages": {"contains_excluded": "no pw"},
    })
    assert opts.exclude == ("pw",)
    assert validate("mypw", opts) == ["no pw"]

    with pytest.raises(ValueError):
        PasswordOptions.from_dict({"min_len": 3})
    with pytest.raises(ValueError):
        PasswordOptions.from_dict({"error_messages": {"nope": "x"}})


def test_option_types_are_checked():
    for bad in ({"min_length": "8"}, {"symbols_min": True}, {"max_length": 8.5},
                {"starts_with": 1}, {"include": 5}, {"exclude": ["ok", 3]},
                {"error_messages": "nope"}):
        with pytest.raises(ValueError):
            PasswordOptions.from_dict(bad)
    with pytest.raises(ValueError):
        PasswordOptions(numbers_min="1")
