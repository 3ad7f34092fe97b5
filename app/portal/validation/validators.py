"""Pure field predicates

Each predicate takes a raw field value and returns a bool. None of them
raise on malformed input.
"""
import re
from typing import Any

from portal.config.constants import MAX_PASSING_YEAR, MIN_PASSING_YEAR

REGISTRATION_NUMBER_PATTERN = re.compile(r"[A-Za-z0-9]{6,}")
PASSWORD_PATTERN = re.compile(r"(?=.*[A-Za-z])(?=.*[0-9])[A-Za-z0-9@$!%*#?&]{8,}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
YEAR_PATTERN = re.compile(r"[0-9]{4}")


def is_valid_registration_number(value: Any) -> bool:
    """Alphanumeric, at least 6 characters"""
    if not isinstance(value, str):
        return False
    return REGISTRATION_NUMBER_PATTERN.fullmatch(value) is not None


def is_valid_passing_year(value: Any) -> bool:
    """Whole year within the accepted range; non-numeric input is invalid"""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        if not value.is_integer():
            return False
        value = int(value)
    text = str(value).strip()
    if YEAR_PATTERN.fullmatch(text) is None:
        return False
    return MIN_PASSING_YEAR <= int(text) <= MAX_PASSING_YEAR


def is_valid_password(value: Any) -> bool:
    """At least 8 characters with a letter and a digit

    Symbols are limited to @$!%*#?&.
    """
    if not isinstance(value, str):
        return False
    return PASSWORD_PATTERN.fullmatch(value) is not None


def is_valid_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None
