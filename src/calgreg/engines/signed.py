"""
calgreg.engines.signed
----------------------
Gregorian calendar on signed storage types with a configurable epoch.

A thin layer over UnsignedEngine: every conversion translates its input by
one modular addition, delegates, and translates the output back. The
offsets are chosen once so that the signed range lands in the middle of the
unsigned helper's capacity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from calgreg.core.errors import ConfigurationError
from calgreg.core.primitives import last_day_of_month
from calgreg.core.types import Date, EngineId, IntType, INT32, UNIX_EPOCH
from calgreg.engines.domain import BoundedEngine, signed_bounds
from calgreg.engines.unsigned import UnsignedEngine


@dataclass(frozen=True)
class Offset:
    year: int       # unsigned year = signed year - year (mod 2**bits)
    rata_die: int   # unsigned rata die = signed rata die + rata_die (mod 2**bits)


class SignedEngine(BoundedEngine):
    """
    Conversions between dates with signed years and signed rata dies counted
    from an arbitrary epoch (1970-01-01 by default).
    """

    def __init__(
        self,
        year_type: IntType = INT32,
        rata_die_type: Optional[IntType] = None,
        epoch: Date = UNIX_EPOCH,
        *,
        id: Optional[EngineId] = None,
    ):
        rata_die_type = rata_die_type or year_type
        if not (year_type.signed and rata_die_type.signed):
            raise ConfigurationError("SignedEngine requires signed storage types")
        if rata_die_type.bits < year_type.bits:
            raise ConfigurationError("rata die type must be at least as wide as the year type")
        if not year_type.contains(epoch.year):
            raise ConfigurationError(f"epoch year {epoch.year} is not representable in {year_type}")
        if not (1 <= epoch.month <= 12 and 1 <= epoch.day <= last_day_of_month(epoch.year, epoch.month)):
            raise ConfigurationError(f"epoch {epoch} is not a valid date")

        self.year_type = year_type
        self.rata_die_type = rata_die_type
        self.epoch = epoch
        self.id = id or EngineId("signed", f"{year_type}/{rata_die_type}@{epoch}", "1")

        # Years are bounded by this class, not by the helper: the helper stores
        # years in the (unsigned) rata die type.
        U = rata_die_type.unsigned()
        self._U = U
        self.unsigned = UnsignedEngine(U, U)
        self.offset = self._compute_offset()
        self.bounds = signed_bounds(self)

    def _compute_offset(self) -> Offset:
        U = self._U
        e = self.epoch
        # Quotient truncated toward zero, so r lies in [-399, 399].
        q = -(-e.year // 400) if e.year < 0 else e.year // 400
        r = e.year - 400 * q
        # (r, month, day) may precede 0000-03-01; r + 400 is in [1, 799], and
        # 400 years are exactly 146097 days.
        n = U.wrap(self.unsigned.to_rata_die(Date(r + 400, e.month, e.day)) - 146097)
        # Number of 400-year cycles that puts the epoch mid-capacity.
        t = self.unsigned.rata_die_max // 146097 // 2
        return Offset(year=U.wrap(400 * (q - t)), rata_die=U.wrap(146097 * t + n))

    # ---------------------------------------------------------
    # Translations to and from the unsigned helper
    # ---------------------------------------------------------

    def to_unsigned_rata_die(self, n: int) -> int:
        return self._U.wrap(n + self.offset.rata_die)

    def from_unsigned_rata_die(self, n: int) -> int:
        return self.rata_die_type.wrap(n - self.offset.rata_die)

    def to_unsigned_date(self, d: Date) -> Date:
        return Date(self._U.wrap(d.year - self.offset.year), d.month, d.day)

    def from_unsigned_date(self, d: Date) -> Date:
        return Date(self.year_type.wrap(d.year + self.offset.year), d.month, d.day)

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def to_rata_die(self, d: Date) -> int:
        """Rata die of d. Requires date_min <= d <= date_max."""
        return self.from_unsigned_rata_die(self.unsigned.to_rata_die(self.to_unsigned_date(d)))

    def to_date(self, n: int) -> Date:
        """Date of rata die n. Requires rata_die_min <= n <= rata_die_max."""
        return self.from_unsigned_date(self.unsigned.to_date(self.to_unsigned_rata_die(n)))

    def info(self) -> Dict[str, Any]:
        return {
            "family": self.id.family,
            "name": self.id.name,
            "version": self.id.version,
            "year_type": str(self.year_type),
            "rata_die_type": str(self.rata_die_type),
            "epoch": str(self.epoch),
            "offset": {"year": self.offset.year, "rata_die": self.offset.rata_die},
            "bounds": self.bounds.as_dict(),
        }
