"""Numeric string detection and parsing for list elements."""

import re
from typing import Optional

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# ASCII digits only; int() alone would also accept whitespace, underscores
# and non-ASCII digits.
_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")


def _parse_int64(s: str) -> Optional[int]:
    if not _INTEGER_LITERAL.fullmatch(s):
        return None
    value = int(s)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def is_numeric(s: str) -> bool:
    """
    Check whether a string is a base-10 signed 64-bit integer literal.

    Strings with a decimal point, an exponent or surrounding whitespace
    are not numeric, so "3.14" stays a string.
    """
    return _parse_int64(s) is not None


def parse_number(s: str) -> Optional[int]:
    """
    Parse a string already known to be numeric.

    Leading "0" characters are stripped first, so "007" gives 7 while
    "0" and "000" strip to "" and give None. A signed literal keeps its
    zeros ("-007" gives -7).
    """
    return _parse_int64(s.lstrip("0"))
