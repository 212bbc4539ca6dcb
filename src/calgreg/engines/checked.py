"""
calgreg.engines.checked
-----------------------
Validating wrapper around an engine.

The engines themselves never check their preconditions; CheckedEngine is the
boundary where caller input is validated and DomainError raised. The wrapped
engine's hot path stays untouched.
"""

from __future__ import annotations

from typing import Any, Dict

from calgreg.core.engine import CalendarEngine
from calgreg.core.errors import DomainError
from calgreg.core.primitives import last_day_of_month
from calgreg.core.types import Date
from calgreg.engines.domain import BoundedEngine


class CheckedEngine(BoundedEngine):
    def __init__(self, engine: CalendarEngine):
        self.engine = engine
        self.id = engine.id
        self.epoch = engine.epoch
        self.year_type = engine.year_type
        self.rata_die_type = engine.rata_die_type
        self.bounds = engine.bounds

    def validate_date(self, d: Date, *, round_trip: bool = False) -> None:
        if not 1 <= d.month <= 12:
            raise DomainError(f"month {d.month} is not in 1..12")
        if not 1 <= d.day <= last_day_of_month(d.year, d.month):
            raise DomainError(f"{d} is not a valid date")
        lo, hi = (self.round_date_min, self.round_date_max) if round_trip else (self.date_min, self.date_max)
        if not lo <= d <= hi:
            raise DomainError(f"{d} is outside [{lo}, {hi}] for engine '{self.id.name}'")

    def validate_rata_die(self, n: int, *, round_trip: bool = False) -> None:
        lo, hi = (self.round_rata_die_min, self.round_rata_die_max) if round_trip else (self.rata_die_min, self.rata_die_max)
        if not lo <= n <= hi:
            raise DomainError(f"rata die {n} is outside [{lo}, {hi}] for engine '{self.id.name}'")

    def to_rata_die(self, d: Date, *, round_trip: bool = False) -> int:
        self.validate_date(d, round_trip=round_trip)
        return self.engine.to_rata_die(d)

    def to_date(self, n: int, *, round_trip: bool = False) -> Date:
        self.validate_rata_die(n, round_trip=round_trip)
        return self.engine.to_date(n)

    def info(self) -> Dict[str, Any]:
        out = dict(self.engine.info())
        out["checked"] = True
        return out
