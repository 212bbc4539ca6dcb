"""
calgreg.engines.domain
----------------------
Derivation of the domain limits of the Gregorian engines.

For every configuration four pairs of limits are computed once:
  * date_min / date_max: the dates to_rata_die accepts without overflow,
  * rata_die_min / rata_die_max: the rata dies to_date accepts,
  * round_*: the sub-ranges on which to_date and to_rata_die are mutual
    inverses.

The round-trip limits are obtained by pushing each candidate through the
opposite conversion: a limit can be inside one domain and still fail to
round-trip at the very last month of the representable years.
"""

from __future__ import annotations

from typing import Any, Protocol

from calgreg.core.primitives import last_day_of_month
from calgreg.core.types import Bounds, Date


class Converter(Protocol):
    def to_rata_die(self, d: Date) -> int: ...
    def to_date(self, n: int) -> Date: ...


class BoundedEngine:
    """Read-only accessors over the Bounds computed by an engine's __init__."""
    bounds: Bounds

    @property
    def date_min(self) -> Date:
        return self.bounds.date_min

    @property
    def date_max(self) -> Date:
        return self.bounds.date_max

    @property
    def rata_die_min(self) -> int:
        return self.bounds.rata_die_min

    @property
    def rata_die_max(self) -> int:
        return self.bounds.rata_die_max

    @property
    def round_date_min(self) -> Date:
        return self.bounds.round_date_min

    @property
    def round_date_max(self) -> Date:
        return self.bounds.round_date_max

    @property
    def round_rata_die_min(self) -> int:
        return self.bounds.round_rata_die_min

    @property
    def round_rata_die_max(self) -> int:
        return self.bounds.round_rata_die_max


def round_trip_bounds(
    conv: Converter,
    *,
    date_min: Date,
    date_max: Date,
    rata_die_min: int,
    rata_die_max: int,
) -> Bounds:
    """Completes the absolute limits with the round-trip ones."""
    round_rata_die_min = max(rata_die_min, conv.to_rata_die(date_min))
    round_rata_die_max = min(rata_die_max, conv.to_rata_die(date_max))
    return Bounds(
        date_min=date_min,
        date_max=date_max,
        rata_die_min=rata_die_min,
        rata_die_max=rata_die_max,
        round_date_min=conv.to_date(round_rata_die_min),
        round_date_max=conv.to_date(round_rata_die_max),
        round_rata_die_min=round_rata_die_min,
        round_rata_die_max=round_rata_die_max,
    )


def unsigned_bounds(engine: Any) -> Bounds:
    """
    Limits of an UnsignedEngine.

    to_rata_die overflows first on 1461 * year, which caps the year at
    R.max // 1461 (plus the January/February that still belong to the
    previous computational year). to_date overflows first on 4 * n + 3.

    rata_die_max must also keep the produced years inside Y. The candidate
    is evaluated by the promoted engine (years stored in R), so the
    comparison against Y.max never sees a truncated year.
    """
    Y, R = engine.year_type, engine.rata_die_type

    y = R.max // 1461
    if Y.max <= y:
        date_max = Date.max_of(Y)
    else:
        date_max = Date(y + 1, 2, last_day_of_month(y + 1, 2))

    promoted = engine if Y == R else type(engine)(R, R)
    n = (R.max - 3) // 4
    limit = Date.max_of(Y)
    if promoted.to_date(n) <= limit:
        rata_die_max = n
    else:
        rata_die_max = promoted.to_rata_die(limit)

    return round_trip_bounds(
        engine,
        date_min=engine.epoch,
        date_max=date_max,
        rata_die_min=0,
        rata_die_max=rata_die_max,
    )


def signed_bounds(engine: Any) -> Bounds:
    """
    Limits of a SignedEngine, obtained from those of its unsigned helper.

    Comparisons happen after translation to unsigned dates. A year below the
    helper's range wraps around to a huge unsigned year, so "too small" shows
    up as "greater than the helper's date_max".
    """
    u = engine.unsigned
    lo = Date.min_of(engine.year_type)
    hi = Date.max_of(engine.year_type)
    ulo = engine.to_unsigned_date(lo)
    uhi = engine.to_unsigned_date(hi)

    date_min = engine.from_unsigned_date(u.date_min) if u.date_max < ulo else lo
    date_max = engine.from_unsigned_date(u.date_max) if u.date_max < uhi else hi

    last = u.to_date(u.rata_die_max)
    if last < ulo:
        rata_die_min = engine.from_unsigned_rata_die(u.rata_die_min)
    else:
        rata_die_min = engine.to_rata_die(lo)
    if last < uhi:
        rata_die_max = engine.from_unsigned_rata_die(u.rata_die_max)
    else:
        rata_die_max = engine.to_rata_die(hi)

    return round_trip_bounds(
        engine,
        date_min=date_min,
        date_max=date_max,
        rata_die_min=rata_die_min,
        rata_die_max=rata_die_max,
    )
