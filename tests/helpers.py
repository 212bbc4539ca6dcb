# tests/helpers.py

from calgreg.core.time import next_day, previous_day
from calgreg.core.types import Date


def assert_sharp_bounds(eng):
    """
    Each limit is as wide as it can be: one step past it, the conversion
    stops agreeing with calendar arithmetic, unless the limit is already the
    edge of the storage type.
    """
    Y, R = eng.year_type, eng.rata_die_type
    b = eng.bounds

    first = eng.to_date(b.rata_die_min)
    assert b.rata_die_min == R.min or first == Date.min_of(Y) or eng.to_date(b.rata_die_min - 1) != previous_day(first)

    last = eng.to_date(b.rata_die_max)
    assert b.rata_die_max == R.max or last == Date.max_of(Y) or eng.to_date(b.rata_die_max + 1) != next_day(last)

    n = eng.to_rata_die(b.date_min)
    assert b.date_min == Date.min_of(Y) or n == R.min or eng.to_rata_die(previous_day(b.date_min)) != R.wrap(n - 1)

    n = eng.to_rata_die(b.date_max)
    assert b.date_max == Date.max_of(Y) or n == R.max or eng.to_rata_die(next_day(b.date_max)) != R.wrap(n + 1)


def assert_round_trip_limits(eng):
    b = eng.bounds
    assert b.round_rata_die_min == eng.to_rata_die(b.round_date_min)
    assert b.round_rata_die_max == eng.to_rata_die(b.round_date_max)
    assert b.round_date_min == eng.to_date(b.round_rata_die_min)
    assert b.round_date_max == eng.to_date(b.round_rata_die_max)
    assert b.date_min <= b.round_date_min <= b.round_date_max <= b.date_max
    assert b.rata_die_min <= b.round_rata_die_min <= b.round_rata_die_max <= b.rata_die_max


def walk(eng, n0, count):
    """Dates of n0, n0+1, ... checked against next_day and the inverse conversion."""
    d = eng.to_date(n0)
    assert eng.to_rata_die(d) == n0
    for n in range(n0 + 1, n0 + count):
        e = eng.to_date(n)
        assert e == next_day(d), n
        assert eng.to_rata_die(e) == n, e
        d = e
