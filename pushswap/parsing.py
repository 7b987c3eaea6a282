"""Parsing of the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")
_DIGITS_AND_SIGNS = _DIGITS | {"+", "-"}


class InputError(ValueError):
    """The numbers given are not acceptable."""


def parse_int(text: str) -> int:
    """Read a whole integer whose magnitude does not exceed ``INT_MAX``.

    Leading whitespace is skipped and one sign is allowed when something
    follows it. Anything after the digits is an error. Text with no digits
    after the whitespace reads as zero.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-") and len(body) > 1:
        if body[0] == "-":
            sign = -1
        body = body[1:]
    magnitude = 0
    for position, char in enumerate(body):
        if char not in _DIGITS:
            raise InputError(f"unexpected character {body[position:]!r} in {text!r}")
        magnitude = magnitude * 10 + int(char)
        if magnitude > INT_MAX:
            raise InputError(f"number out of range: {text!r}")
    return sign * magnitude


def parse_argument(text: str, digits_only: bool = False) -> list[int]:
    """Read the space-separated numbers in one argument.

    With ``digits_only`` every character of every number must be a digit or
    a sign.
    """
    tokens = [token for token in text.split(" ") if token]
    if not tokens:
        raise InputError("empty argument")
    if digits_only and any(
        char not in _DIGITS_AND_SIGNS for token in tokens for char in token
    ):
        raise InputError(f"non-numeric argument: {text!r}")
    return [parse_int(token) for token in tokens]


def parse_arguments(args: Iterable[str], digits_only: bool = False) -> list[int]:
    """Read the numbers of all arguments, in order."""
    values: list[int] = []
    for arg in args:
        values.extend(parse_argument(arg, digits_only))
    return values


def check_duplicates(values: Iterable[int]) -> list[int]:
    """Return the values as a list, raising if any value appears twice."""
    result = list(values)
    seen: set[int] = set()
    for value in result:
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
    return result