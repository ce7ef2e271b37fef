"""Parsing and validation helpers for request fields.

The ``parse_*`` functions return the parsed value, or ``None`` when the
input is not acceptable. The ``is_*`` functions are their boolean forms.
"""

import math
import re
from datetime import date, datetime
from typing import Any, Optional, Union

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_NUMBER_PATTERN = re.compile(r"\s*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\s*")
_INT_PREFIX = re.compile(r"\s*[+-]?[0-9]")
_INT64_MIN = -2 ** 63
_INT64_MAX = 2 ** 63


def parse_date(value: Any) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` string into a calendar date.

    Impossible dates such as ``2021-02-30`` are rejected even though they
    match the pattern.
    """
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        return None
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None
    if parsed.isoformat() != value:
        return None
    return parsed


def parse_number(value: Any) -> Optional[Union[int, float]]:
    """Parse a decimal number.

    Integral values that fit in a signed 64-bit integer are returned as int,
    everything else as float.
    """
    if isinstance(value, bool) or value is None:
        return None
    text = str(value)
    if not _NUMBER_PATTERN.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    if number == math.trunc(number) and _INT64_MIN <= number < _INT64_MAX:
        return int(number)
    return number


def parse_int(value: Any) -> Optional[int]:
    """Parse an integer written in base 10 (``"5"``, ``"5.0"``, ``"1e3"``)."""
    number = parse_number(value)
    if number is None or number != math.trunc(number):
        return None
    if not _INT_PREFIX.match(str(value)):
        return None
    return int(number)


def is_valid_date(value: Any) -> bool:
    return parse_date(value) is not None


def is_int(value: Any) -> bool:
    return parse_int(value) is not None
