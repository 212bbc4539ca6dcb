"""
calgreg.engines.factory
-----------------------
Turns pure-data EngineSpec records into live engine objects.
"""

from __future__ import annotations
from calgreg.core.engine import CalendarEngine
from calgreg.core.errors import ConfigurationError
from calgreg.core.types import EngineSpec
from calgreg.engines.signed import SignedEngine
from calgreg.engines.unsigned import UnsignedEngine


def make_engine(spec: EngineSpec) -> CalendarEngine:
    """The universal entry point."""
    if spec.kind == "unsigned":
        if spec.epoch is not None and spec.epoch != UnsignedEngine.epoch:
            raise ConfigurationError(f"Unsigned engines have the fixed epoch {UnsignedEngine.epoch}")
        return UnsignedEngine(spec.year_type, spec.rata_die_type, id=spec.id)
    if spec.kind == "signed":
        if spec.epoch is None:
            return SignedEngine(spec.year_type, spec.rata_die_type, id=spec.id)
        return SignedEngine(spec.year_type, spec.rata_die_type, spec.epoch, id=spec.id)
    raise ValueError(f"Unknown engine kind: {spec.kind!r}")
