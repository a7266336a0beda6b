"""Validation and parsing of the integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACES = frozenset(" \t\n\v\f\r")


class InputError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def is_space(char: str) -> bool:
    """Return True for a space or one of the characters tab to carriage return."""
    return char in _SPACES if char else False


def atoi(text: str) -> int:
    """Read an optionally signed decimal number from the start of ``text``.

    Leading whitespace is skipped, and reading stops at the first character
    that is not a digit. Text holding no digits reads as 0.
    """
    stripped = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    elif stripped[:1] == "+":
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def all_space(text: str) -> bool:
    """Return True if ``text`` is empty or holds nothing but whitespace."""
    return all(is_space(char) for char in text)


def split(text: str, sep: str) -> list[str] | None:
    """Split ``text`` on ``sep``, dropping empty pieces.

    Returns None when ``text`` is empty or holds only whitespace.
    """
    if not text or all_space(text):
        return None
    return [piece for piece in text.split(sep) if piece]


def check_number(text: str) -> bool:
    """Return True if ``text`` is an optional minus sign followed by digits.

    A minus sign followed by a space or by nothing raises InputError.
    """
    body = text
    if text.startswith("-"):
        body = text[1:]
        if body == "" or body.startswith(" "):
            raise InputError()
    return all("0" <= char <= "9" for char in body)


def has_duplicate(items: Iterable[str]) -> bool:
    """Return True if two of the items read as the same number."""
    seen: set[int] = set()
    for item in items:
        value = atoi(item)
        if value in seen:
            return True
        seen.add(value)
    return False


def tokens(args: Sequence[str]) -> list[str]:
    """Return the number tokens held by the arguments.

    A single argument is split on spaces; several arguments are taken as they
    are. A single argument that is empty or only whitespace raises InputError.
    """
    if len(args) == 1:
        pieces = split(args[0], " ")
        if pieces is None:
            raise InputError()
        return pieces
    return list(args)


def _check_token(token: str) -> None:
    value = atoi(token)
    if value < INT_MIN or value > INT_MAX:
        raise InputError()
    if not check_number(token) or all_space(token):
        raise InputError()


def validate(args: Sequence[str]) -> list[str]:
    """Check that the arguments hold distinct integers in the 32-bit range.

    Returns the validated tokens; raises InputError otherwise.
    """
    items = tokens(args)
    for token in items:
        _check_token(token)
    if has_duplicate(items):
        raise InputError()
    return items


def read_values(args: Sequence[str]) -> list[int]:
    """Read the numbers held by the arguments, in order."""
    if len(args) == 1:
        pieces = split(args[0], " ")
        return [atoi(piece) for piece in pieces] if pieces else []
    return [atoi(arg) for arg in args]