from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List, Optional

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import Bounds, Date, EngineSpec, INT64, UNIX_EPOCH
from .engines.checked import CheckedEngine
from .engines.factory import make_engine as _make_engine
from .engines.signed import SignedEngine

DEFAULT_ENGINE = "unix32"
_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def _checked(engine: str) -> CheckedEngine:
    eng = _reg().get(engine)
    return eng if isinstance(eng, CheckedEngine) else CheckedEngine(eng)

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_engine(engine: str = DEFAULT_ENGINE) -> CalendarEngine:
    return _reg().get(engine)

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def to_rata_die(d: Date, *, engine: str = DEFAULT_ENGINE) -> int:
    return _checked(engine).to_rata_die(d)

def to_date(n: int, *, engine: str = DEFAULT_ENGINE) -> Date:
    return _checked(engine).to_date(n)

def bounds(engine: str = DEFAULT_ENGINE) -> Bounds:
    return _reg().get(engine).bounds

def days_between(a: Date, b: Date, *, engine: str = DEFAULT_ENGINE) -> int:
    """Signed number of days from a to b."""
    eng = _checked(engine)
    return eng.to_rata_die(b) - eng.to_rata_die(a)

def add_days(d: Date, k: int, *, engine: str = DEFAULT_ENGINE) -> Date:
    eng = _checked(engine)
    return eng.to_date(eng.to_rata_die(d) + k)

# ============================================================
# Weekdays
# ============================================================

@lru_cache(maxsize=None)
def _reference() -> SignedEngine:
    return SignedEngine(INT64, INT64, UNIX_EPOCH)

@lru_cache(maxsize=None)
def _epoch_weekday(epoch: Date) -> int:
    # 1970-01-01 was a Thursday (ISO 4).
    return (_reference().to_rata_die(epoch) + 3) % 7 + 1

def day_of_week(d: Date, *, engine: str = DEFAULT_ENGINE) -> int:
    """ISO weekday of d: 1 = Monday ... 7 = Sunday."""
    eng = _checked(engine)
    n = eng.to_rata_die(d)
    return (n + _epoch_weekday(eng.epoch) - 1) % 7 + 1
