"""Validation rules for user and client input."""

from __future__ import annotations

from .strings import (
    contains_only_letters_and_spaces,
    count_words,
    has_digit,
    has_lower,
    has_space,
    has_special_character,
    has_upper,
    is_all_digits,
    is_alpha_name_with_one_separator,
)

__all__ = [
    "is_valid_password",
    "is_valid_username",
    "is_valid_username_and_password",
    "is_valid_pin_code",
    "is_valid_name",
    "is_valid_phone_number",
]

_ASCII_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
_OPERATOR_CODES = frozenset("0125")


def is_valid_password(password: str) -> bool:
    """Check length 8-16 with upper, lower, punctuation and a digit."""
    if not 8 <= len(password) <= 16:
        return False
    return (
        has_lower(password)
        and has_upper(password)
        and has_special_character(password)
        and has_digit(password)
    )


def is_valid_username(username: str) -> bool:
    """Check length 4-20, a leading letter and at most one '.' or '_'."""
    if not 4 <= len(username) <= 20:
        return False
    if username[0] not in _ASCII_LETTERS:
        return False
    if has_space(username):
        return False
    return is_alpha_name_with_one_separator(username)


def is_valid_username_and_password(username: str, password: str) -> bool:
    """Check both the username and the password."""
    return is_valid_password(password) and is_valid_username(username)


def is_valid_pin_code(pin_code: str) -> bool:
    """Check that the PIN is 4 or 6 digits."""
    return len(pin_code) in (4, 6) and is_all_digits(pin_code)


def is_valid_name(full_name: str) -> bool:
    """Check length 7-50, at least two words, letters and spaces only."""
    if not 7 <= len(full_name) <= 50:
        return False
    if count_words(full_name) < 2:
        return False
    return contains_only_letters_and_spaces(full_name)


def is_valid_phone_number(phone_number: str) -> bool:
    """Check an 11-digit number starting with '01' and a known operator code."""
    if len(phone_number) != 11:
        return False
    if not is_all_digits(phone_number):
        return False
    if not phone_number.startswith("01"):
        return False
    return phone_number[2] in _OPERATOR_CODES