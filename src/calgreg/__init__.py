"""calgreg public API.

Gregorian calendar arithmetic on fixed-width integers: dates to rata dies and
back through Euclidean affine functions, for any storage width, signedness
and epoch.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_engines,
    engine_info,
    get_engine,
    make_engine,
    register_engine,
    to_date,
    to_rata_die,
    bounds,
    days_between,
    add_days,
    day_of_week,
)
from .core.errors import CalgregError, ConfigurationError, DomainError
from .core.primitives import is_leap_year, is_multiple_of_100, last_day_of_month
from .core.types import Bounds, Date, EngineSpec, IntType
from .engines.checked import CheckedEngine
from .engines.signed import SignedEngine
from .engines.unsigned import UnsignedEngine

__all__ = [
    "list_engines",
    "engine_info",
    "get_engine",
    "make_engine",
    "register_engine",
    "to_date",
    "to_rata_die",
    "bounds",
    "days_between",
    "add_days",
    "day_of_week",
    "CalgregError",
    "ConfigurationError",
    "DomainError",
    "is_leap_year",
    "is_multiple_of_100",
    "last_day_of_month",
    "Bounds",
    "Date",
    "EngineSpec",
    "IntType",
    "CheckedEngine",
    "SignedEngine",
    "UnsignedEngine",
]
