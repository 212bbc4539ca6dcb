from __future__ import annotations
import re
from datetime import date

from .errors import DomainError
from .primitives import last_day_of_month
from .types import Date

_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")


def next_day(d: Date) -> Date:
    """The calendar day after d, stepping month and year by hand."""
    if d.day != last_day_of_month(d.year, d.month):
        return Date(d.year, d.month, d.day + 1)
    if d.month != 12:
        return Date(d.year, d.month + 1, 1)
    return Date(d.year + 1, 1, 1)


def previous_day(d: Date) -> Date:
    """The calendar day before d."""
    if d.day != 1:
        return Date(d.year, d.month, d.day - 1)
    if d.month != 1:
        return Date(d.year, d.month - 1, last_day_of_month(d.year, d.month - 1))
    return Date(d.year - 1, 12, 31)


def parse_date(s: str) -> Date:
    """Parse YYYY-MM-DD; the year may be negative and have any number of digits."""
    m = _DATE_RE.match(s.strip())
    if m is None:
        raise ValueError(f"Expected YYYY-MM-DD, got {s!r}")
    return Date(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def to_pydate(d: Date) -> date:
    try:
        return date(d.year, d.month, d.day)
    except ValueError as e:
        raise DomainError(f"{d} is not representable as datetime.date") from e


def from_pydate(d: date) -> Date:
    return Date(d.year, d.month, d.day)
