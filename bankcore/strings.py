"""Text helpers: splitting, trimming, case handling and character-class checks.

Character classes follow the ASCII "C" locale: letters are A-Z/a-z, digits are
0-9, punctuation is the printable ASCII punctuation set, and whitespace is
space, tab, newline, vertical tab, form feed and carriage return.
"""

from __future__ import annotations

import string
from enum import Enum

__all__ = [
    "LetterKind",
    "split_string",
    "reverse_words",
    "trim_right",
    "trim_left",
    "trim",
    "is_vowel",
    "vowels",
    "print_vowels",
    "count_lower",
    "count_upper",
    "count_letters",
    "upper_case",
    "lower_case",
    "invert_letter",
    "invert_case",
    "remove_punctuation",
    "read_string",
    "replace_word",
    "count_words",
    "has_upper",
    "has_lower",
    "has_special_character",
    "has_digit",
    "has_space",
    "is_alpha_name_with_one_separator",
    "count_digits",
    "is_all_digits",
    "contains_only_letters_and_spaces",
]

_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_PUNCTUATION = frozenset(string.punctuation)
_WHITESPACE = frozenset(string.whitespace)
_VOWELS = frozenset("AEIOU")

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_SWAP = str.maketrans(
    string.ascii_letters,
    string.ascii_uppercase + string.ascii_lowercase,
)
_SEPARATORS = frozenset("._")


class LetterKind(Enum):
    """Which characters count_letters should count."""

    SMALL = 0
    CAPITAL = 1
    ALL = 2


def split_string(line: str, delim: str) -> list[str]:
    """Split ``line`` on ``delim``, dropping empty pieces."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    return [piece for piece in line.split(delim) if piece]


def reverse_words(line: str) -> str:
    """Return the space-separated words of ``line`` in reverse order.

    Every word, the last included, is followed by a single space.
    """
    return "".join(f"{word} " for word in reversed(split_string(line, " ")))


def trim_right(line: str) -> str:
    """Remove trailing space characters."""
    return line.rstrip(" ")


def trim_left(line: str) -> str:
    """Remove leading space characters."""
    return line.lstrip(" ")


def trim(line: str) -> str:
    """Remove leading and trailing space characters."""
    return trim_right(trim_left(line))


def is_vowel(ch: str) -> bool:
    """Tell whether the single character ``ch`` is one of A, E, I, O, U."""
    return upper_case(ch) in _VOWELS


def vowels(line: str) -> list[str]:
    """Return the vowels of ``line`` in order of appearance."""
    return [ch for ch in line if is_vowel(ch)]


def print_vowels(line: str) -> None:
    """Print the vowels of ``line``, each followed by two spaces."""
    print("Vowels in String are : ", end="")
    print("".join(f"{ch}  " for ch in vowels(line)), end="")


def count_lower(line: str) -> int:
    """Count lowercase letters."""
    return sum(ch in _LOWER for ch in line)


def count_upper(line: str) -> int:
    """Count uppercase letters."""
    return sum(ch in _UPPER for ch in line)


def count_letters(line: str, what: LetterKind = LetterKind.ALL) -> int:
    """Count characters of the given kind; ``ALL`` counts every character."""
    if what is LetterKind.ALL:
        return len(line)
    if what is LetterKind.SMALL:
        return count_lower(line)
    return count_upper(line)


def upper_case(text: str) -> str:
    """Convert ASCII letters to uppercase."""
    return text.translate(_TO_UPPER)


def lower_case(text: str) -> str:
    """Convert ASCII letters to lowercase."""
    return text.translate(_TO_LOWER)


def invert_letter(letter: str) -> str:
    """Swap the case of a single ASCII letter."""
    return letter.translate(_SWAP)


def invert_case(text: str) -> str:
    """Swap the case of every ASCII letter."""
    return text.translate(_SWAP)


def remove_punctuation(text: str) -> str:
    """Drop punctuation characters."""
    return "".join(ch for ch in text if ch not in _PUNCTUATION)


def read_string() -> str:
    """Prompt for and read one line from standard input."""
    try:
        return input("Please Enter Your String : ")
    except EOFError:
        return ""


def replace_word(line: str, find: str, replace: str, match_case: bool = True) -> str:
    """Replace whole space-separated words equal to ``find`` with ``replace``.

    Every word in the result is followed by a single space.
    """
    if match_case:
        matches = lambda word: word == find  # noqa: E731
    else:
        target = upper_case(find)
        matches = lambda word: upper_case(word) == target  # noqa: E731
    return "".join(
        f"{replace if matches(word) else word} " for word in split_string(line, " ")
    )


def count_words(line: str) -> int:
    """Count the non-empty space-separated words."""
    return len(split_string(line, " "))


def has_upper(word: str) -> bool:
    """Tell whether ``word`` holds an uppercase letter."""
    return any(ch in _UPPER for ch in word)


def has_lower(word: str) -> bool:
    """Tell whether ``word`` holds a lowercase letter."""
    return any(ch in _LOWER for ch in word)


def has_special_character(word: str) -> bool:
    """Tell whether ``word`` holds a punctuation character."""
    return any(ch in _PUNCTUATION for ch in word)


def has_digit(word: str) -> bool:
    """Tell whether ``word`` holds a decimal digit."""
    return any(ch in _DIGITS for ch in word)


def has_space(word: str) -> bool:
    """Tell whether ``word`` holds a whitespace character."""
    return any(ch in _WHITESPACE for ch in word)


def is_alpha_name_with_one_separator(word: str) -> bool:
    """Tell whether ``word`` is letters with at most one '.' or '_' in total."""
    separators = 0
    for ch in word:
        if ch in _LETTERS:
            continue
        if ch not in _SEPARATORS:
            return False
        separators += 1
        if separators > 1:
            return False
    return True


def count_digits(word: str) -> int:
    """Count decimal digits."""
    return sum(ch in _DIGITS for ch in word)


def is_all_digits(word: str) -> bool:
    """Tell whether ``word`` is non-empty and made only of digits."""
    return bool(word) and all(ch in _DIGITS for ch in word)


def contains_only_letters_and_spaces(text: str) -> bool:
    """Tell whether ``text`` holds only letters and whitespace."""
    return all(ch in _LETTERS or ch in _WHITESPACE for ch in text)