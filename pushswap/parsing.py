"""Reading the command-line arguments into the numbers of stack ``a``."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_WORD = re.compile(r"[^ \t\n\v\f\r]+")
_INNER_WORD = re.compile(r"[+-]?[0-9]*")
_LAST_WORD = re.compile(r"[+-]?[0-9]+")
_SKIP_WORD = re.compile(r"[ \t\n\v\f\r]*[^ \t\n\v\f\r]*")


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def parse_int(text: str) -> int:
    """Read the integer at the start of ``text`` the way ``atoi`` does.

    Leading whitespace and one sign are accepted, reading stops at the first
    non-digit, and no digits at all read as zero. A value outside the 32-bit
    signed range raises InputError.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    limit = -INT_MIN if negative else INT_MAX
    value = 0
    for char in rest:
        if char not in "0123456789":
            break
        value = value * 10 + int(char)
        if value > limit:
            raise InputError(f"number out of range: {text!r}")
    return -value if negative else value


def check_format(args: Iterable[str]) -> bool:
    """Tell whether every argument is a whitespace-separated list of integers.

    Trailing whitespace is rejected, as is an argument made only of
    whitespace. A lone sign is let through when more follows it.
    """
    for arg in args:
        if not arg:
            continue
        if arg[-1] in _WHITESPACE:
            return False
        *inner, last = _WORD.findall(arg)
        if not _LAST_WORD.fullmatch(last):
            return False
        if not all(_INNER_WORD.fullmatch(word) for word in inner):
            return False
    return True


def _numbers_in(arg: str) -> Iterator[int]:
    position = 0
    while position < len(arg):
        yield parse_int(arg[position:])
        match = _SKIP_WORD.match(arg, position)
        # The pattern always matches; the end is past the word just read.
        position = match.end() if match else len(arg)


def has_duplicates(numbers: Iterable[int]) -> bool:
    """Tell whether any number occurs more than once."""
    values = list(numbers)
    return len(set(values)) != len(values)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the arguments into the numbers of stack ``a``, top first.

    Raises InputError for a malformed argument, an empty argument, a number
    outside the 32-bit signed range, or a number given twice.
    """
    if not check_format(args):
        raise InputError("malformed argument")
    numbers: list[int] = []
    for arg in args:
        found = list(_numbers_in(arg))
        if not found:
            raise InputError("empty argument")
        numbers.extend(found)
    if has_duplicates(numbers):
        raise InputError("duplicate number")
    return numbers