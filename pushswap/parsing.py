"""Reading the list of integers given on the command line."""

from __future__ import annotations

from typing import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = "0123456789"
_LEADING_SPACE = " \t\n\r\v\f"


class InputError(ValueError):
    """Raised for any invalid input; its message is always ``Error``."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(text: str) -> int:
    """Read an integer: leading whitespace, one optional sign, then digits.

    Spaces may appear among the digits and are skipped; any other
    character raises :class:`InputError`.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    number = 0
    for char in rest:
        if char in _DIGITS:
            number = number * 10 + int(char)
        elif char != " ":
            raise InputError()
    return sign * number


def split_arguments(args: Iterable[str]) -> list[str]:
    """Join all arguments with spaces and split them into tokens on spaces."""
    return [token for token in " ".join(args).split(" ") if token]


def check_signs(token: str) -> str:
    """Reject a sign that is not directly followed by a digit."""
    for char, following in zip(token, token[1:] + "\0"):
        if char in "+-" and following not in _DIGITS:
            raise InputError()
    return token


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn the command-line arguments into distinct integers, in order."""
    tokens = split_arguments(args)
    values = []
    for token in tokens:
        value = parse_int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError()
        check_signs(token)
        values.append(value)
    if len(set(values)) != len(values):
        raise InputError()
    return values