"""
calgreg.engines.unsigned
------------------------
Gregorian calendar on unsigned storage types.

Day 0 is 0000-03-01. Starting the computational year in March puts the
leap day at its very end, so both directions are straight-line sequences
of Euclidean affine functions (EAFs) f(n) = (a*n + b) // c with no
mid-year branch.

Intermediates are reduced into the rata die type exactly where fixed-width
arithmetic would wrap, so inputs outside the domain misbehave the way
machine integers do instead of silently producing correct dates.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from calgreg.core.errors import ConfigurationError
from calgreg.core.types import Date, EngineId, IntType, UINT32
from calgreg.engines.domain import BoundedEngine, unsigned_bounds

_MASK32 = 0xFFFFFFFF
_MASK16 = 0xFFFF


class UnsignedEngine(BoundedEngine):
    """
    Conversions between dates and rata dies counted from 0000-03-01.

    year_type and rata_die_type must be unsigned, the latter at least as wide
    as the former and able to hold 146097 (the days of a 400-year cycle).
    """

    epoch = Date(0, 3, 1)

    def __init__(
        self,
        year_type: IntType = UINT32,
        rata_die_type: Optional[IntType] = None,
        *,
        id: Optional[EngineId] = None,
    ):
        rata_die_type = rata_die_type or year_type
        if year_type.signed or rata_die_type.signed:
            raise ConfigurationError("UnsignedEngine requires unsigned storage types")
        if rata_die_type.bits < year_type.bits:
            raise ConfigurationError("rata die type must be at least as wide as the year type")
        if rata_die_type.max < 146097:
            raise ConfigurationError("rata die type must be able to hold 146097")

        self.year_type = year_type
        self.rata_die_type = rata_die_type
        self.id = id or EngineId("unsigned", f"{year_type}/{rata_die_type}", "1")
        self.bounds = unsigned_bounds(self)

    def to_rata_die(self, d: Date) -> int:
        """Rata die of d. Requires date_min <= d <= date_max."""
        R = self.rata_die_type

        # January and February become months 13 and 14 of the previous year.
        j = int(d.month < 3)
        y0 = R.wrap(d.year - j)
        m0 = d.month + 12 * j

        # 365*y + y//4 - y//100 + y//400 with one division fewer.
        century = y0 // 100
        year_days = R.wrap(1461 * y0) // 4 - century + century // 4

        # Days from 1 March to the first of month m0, exact for 3 <= m0 <= 14.
        month_days = (979 * m0 - 2922) // 32

        return R.wrap(year_days + month_days + d.day - 1)

    def to_date(self, n: int) -> Date:
        """Date of rata die n. Requires rata_die_min <= n <= rata_die_max."""
        # Century and day of the century.
        n1 = self.rata_die_type.wrap(4 * n + 3)
        century = n1 // 146097
        day_of_century = n1 % 146097 // 4

        # Year of the century and day of the year: n2 // 1461 and its
        # remainder, with the division by 1461 done as 2939745 / 2**32.
        n2 = 4 * day_of_century + 3
        u2 = 2939745 * n2
        year_of_century = u2 >> 32
        day_of_year = (u2 & _MASK32) // 2939745 // 4

        # Month (3..14) and day of the month: 2141 / 2**16 inverts the
        # 979 / 32 step of to_rata_die.
        n3 = 2141 * day_of_year + 197657
        month = n3 >> 16
        day = (n3 & _MASK16) // 2141

        # 306 = days from 1 March to 1 January.
        j = int(day_of_year >= 306)
        year = 100 * century + year_of_century + j
        return Date(self.year_type.wrap(year), month - 12 * j, day + 1)

    def info(self) -> Dict[str, Any]:
        return {
            "family": self.id.family,
            "name": self.id.name,
            "version": self.id.version,
            "year_type": str(self.year_type),
            "rata_die_type": str(self.rata_die_type),
            "epoch": str(self.epoch),
            "bounds": self.bounds.as_dict(),
        }
