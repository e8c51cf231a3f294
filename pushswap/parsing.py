"""Validation of the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when the input is not a list of distinct, valid integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_number(text: str) -> int:
    """Parse an argument made of ASCII digits only into a value within int range.

    Signs are not accepted. An empty argument reads as zero.
    """
    if any(char not in _DIGITS for char in text):
        raise InputError()
    value = int(text) if text else 0
    if value > INT_MAX:
        raise InputError()
    return value


def check_duplicates(values: Iterable[int]) -> None:
    """Raise InputError if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise InputError()
        seen.add(value)


def is_sorted(values: Sequence[int]) -> bool:
    """True when the values are in non-decreasing order."""
    return all(lower <= upper for lower, upper in zip(values, values[1:]))


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse every argument and check that no value repeats."""
    values = [parse_number(arg) for arg in args]
    check_duplicates(values)
    return values