"""
passmeter.charclass

ASCII character classes used by both the validator and the heuristics.

A "symbol" is anything outside [A-Za-z0-9_], the same set a regex \\W matches
in ASCII mode. Non-ASCII letters and digits are therefore counted as symbols.
"""

import string
from typing import Callable

UPPERCASE = frozenset(string.ascii_uppercase)
LOWERCASE = frozenset(string.ascii_lowercase)
DIGITS = frozenset(string.digits)
WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def is_upper(c: str) -> bool:
    return c in UPPERCASE


def is_lower(c: str) -> bool:
    return c in LOWERCASE


def is_letter(c: str) -> bool:
    return c in UPPERCASE or c in LOWERCASE


def is_digit(c: str) -> bool:
    return c in DIGITS


def is_symbol(c: str) -> bool:
    return c not in WORD_CHARS


def count(password: str, predicate: Callable[[str], bool]) -> int:
    return sum(1 for c in password if predicate(c))


def count_upper(password: str) -> int:
    return count(password, is_upper)


def count_lower(password: str) -> int:
    return count(password, is_lower)


def count_digits(password: str) -> int:
    return count(password, is_digit)


def count_symbols(password: str) -> int:
    return count(password, is_symbol)
