"""Value formatting and parsing helpers used by tag coercions."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

# Leading numeric prefix, in the manner of JavaScript's parseFloat
_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
)

# Python switches repr() to exponent notation below 1e-4, JavaScript below 1e-6
_MIN_PLAIN_EXPONENT = -6
_MAX_PLAIN_INTEGER = 1e21


def is_iterable_input(arg: Any) -> bool:
    """Check if arg is a collection of inputs rather than a single input.

    Strings and mappings are iterable but always denote a single input.
    """
    return isinstance(arg, Iterable) and not isinstance(arg, str | bytes | Mapping)


def format_number(number: float) -> str:
    """Render a number the way JavaScript's Number.prototype.toString does."""
    if isinstance(number, int):
        return str(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer() and abs(number) < _MAX_PLAIN_INTEGER:
        return str(int(number))
    mantissa, sep, exponent = repr(number).partition("e")
    if not sep:
        return mantissa
    if _MIN_PLAIN_EXPONENT <= int(exponent) < 0:
        return format(Decimal(repr(number)), "f")
    return f"{mantissa}e{int(exponent):+d}"


def parse_number(text: str) -> float:
    """Parse the leading number in text, or 0 when there is none."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return 0.0
    token = match.group(1)
    number = float(token.replace("Infinity", "inf"))
    return number or 0.0


def to_iso_string(date: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DDTHH:mm:ss.sss±HH:mm``.

    Naive datetimes are interpreted in the local timezone. Offsets are
    rendered to whole minutes.
    """
    if date.tzinfo is None or date.utcoffset() is None:
        date = date.astimezone()
    offset = date.utcoffset()
    minutes = int(offset.total_seconds() / 60) if offset is not None else 0
    sign = "+" if minutes >= 0 else "-"
    hours, minutes = divmod(abs(minutes), 60)
    return (
        f"{date.year:04d}-{date.month:02d}-{date.day:02d}"
        f"T{date.hour:02d}:{date.minute:02d}:{date.second:02d}"
        f".{date.microsecond // 1000:03d}"
        f"{sign}{hours:02d}:{minutes:02d}"
    )


def parse_iso_string(text: str) -> datetime | None:
    """Parse an ISO-8601 string into an aware datetime, or None."""
    try:
        date = datetime.fromisoformat(text.strip())
    except ValueError:
        return None
    if date.tzinfo is None:
        date = date.astimezone()
    return date
