from __future__ import annotations
from calgreg.core.engine import EngineRegistry
from calgreg.engines.specs import ALL_SPECS
from calgreg.engines.factory import make_engine

def build_registry() -> EngineRegistry:
    return EngineRegistry({name: make_engine(spec) for name, spec in ALL_SPECS.items()})
