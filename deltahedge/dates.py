"""Date input checks and business-day year fractions."""

from __future__ import annotations

import re
from datetime import date

_DATE_PATTERN = re.compile(r"\s*(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})\s*")
_BUSINESS_DAYS_PER_YEAR = 252.0


def check_format(date: str) -> bool:
    """Return True if the text looks like a yyyy-mm-dd date."""
    return (
        len(date) == 10
        and date[4] == "-"
        and date[7] == "-"
        and date[0].isdigit()
    )


def parse_date(text: str) -> date:
    """Parse a year-month-day date; raise ValueError if it is not one."""
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"not a date: {text!r}")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def _as_date(value: date | str) -> date:
    return value if isinstance(value, date) else parse_date(value)


def _day_of_week(value: date) -> int:
    """Day of the week counted from Sunday as 0."""
    return (value.weekday() + 1) % 7


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def business_years(start: date | str, end: date | str) -> float:
    """Return the business days from start to end, inclusive, in 252-day years."""
    first = _as_date(start)
    last = _as_date(end)
    ndays = (last - first).days + 1
    weekend_days = 2 * _trunc_div(ndays + _day_of_week(last), 7)
    if _day_of_week(last) == 0:
        weekend_days += 1
    if _day_of_week(first) == 6:
        weekend_days -= 1
    return (ndays - weekend_days) / _BUSINESS_DAYS_PER_YEAR