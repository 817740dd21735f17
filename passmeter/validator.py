"""
passmeter.validator

Policy checks run before scoring. Failures are returned as a list of
messages in a fixed rule order; nothing here raises for a failing password.
"""

import logging
from typing import List, Optional

from .charclass import count_digits, count_lower, count_symbols, count_upper
from .models import PasswordOptions

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES = {
    "empty": "Password is empty.",
    "too_short": "Password is too short.",
    "too_long": "Password is too long.",
    "not_enough_uppercase": "Not enough uppercase letters.",
    "not_enough_lowercase": "Not enough lowercase letters.",
    "not_enough_numbers": "Not enough numbers.",
    "not_enough_symbols": "Not enough symbols.",
    "does_not_include_all": "Password must include all specified characters.",
    "contains_excluded": "Password contains excluded characters.",
    "does_not_start_with": "Password does not start with the specified character.",
    "does_not_end_with": "Password does not end with the specified character.",
    "does_not_include_one_of": "Password must contain at least one of the specified characters.",
}


def _message(options: PasswordOptions, rule: str) -> str:
    override = getattr(options.error_messages, rule)
    return override if override is not None else DEFAULT_MESSAGES[rule]


def failed_rules(password: str, options: Optional[PasswordOptions] = None) -> List[str]:
    """
    Return the names of the rules the password fails, in evaluation order.
    The empty-string rule is checked even without options.
    """
    opts = options or PasswordOptions()
    length = len(password)
    failed: List[str] = []

    if length == 0:
        failed.append("empty")
    if opts.min_length is not None and length < opts.min_length:
        failed.append("too_short")
    if opts.max_length is not None and length > opts.max_length:
        failed.append("too_long")
    if opts.uppercase_min is not None and count_upper(password) < opts.uppercase_min:
        failed.append("not_enough_uppercase")
    if opts.lowercase_min is not None and count_lower(password) < opts.lowercase_min:
        failed.append("not_enough_lowercase")
    if opts.numbers_min is not None and count_digits(password) < opts.numbers_min:
        failed.append("not_enough_numbers")
    if opts.symbols_min is not None and count_symbols(password) < opts.symbols_min:
        failed.append("not_enough_symbols")
    if opts.include is not None and any(item not in password for item in opts.include):
        failed.append("does_not_include_all")
    if opts.exclude is not None and any(item in password for item in opts.exclude):
        failed.append("contains_excluded")
    if opts.starts_with is not None and not password.startswith(opts.starts_with):
        failed.append("does_not_start_with")
    if opts.ends_with is not None and not password.endswith(opts.ends_with):
        failed.append("does_not_end_with")
    if opts.include_one is not None and not any(item in password for item in opts.include_one):
        failed.append("does_not_include_one_of")

    return failed


def validate(password: str, options: Optional[PasswordOptions] = None) -> List[str]:
    """Return error messages for every failing rule; an empty list means valid."""
    opts = options or PasswordOptions()
    rules = failed_rules(password, opts)
    if rules:
        logger.debug("validation failed: %s", ", ".join(rules))
    return [_message(opts, rule) for rule in rules]
