"""Arithmetic on numbers held as decimal digit strings."""

from __future__ import annotations

__all__ = ["increment"]


def increment(number: str) -> str:
    """Add one to a decimal number given as a string.

    Carries propagate from the right; leading zeros are kept unless every
    digit rolls over, in which case a '1' is prepended.
    """
    head = number.rstrip("9")
    rolled = "0" * (len(number) - len(head))
    if not head:
        return "1" + rolled
    return head[:-1] + chr(ord(head[-1]) + 1) + rolled