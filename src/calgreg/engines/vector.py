"""
calgreg.engines.vector
----------------------
numpy versions of the conversions and primitives.

Arrays are held in the engine's storage dtypes, so numpy's wrap-around
reproduces the scalar engines bit for bit, inside and outside the domain.
"""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from calgreg.core.primitives import MCOMP_BOUND, MCOMP_MULTIPLIER, MCOMP_OFFSET
from calgreg.core.types import Date
from calgreg.engines.checked import CheckedEngine
from calgreg.engines.signed import SignedEngine
from calgreg.engines.unsigned import UnsignedEngine

ArrayLike = Any
DateArrays = Tuple[np.ndarray, np.ndarray, np.ndarray]

_U64 = np.uint64


def is_multiple_of_100_array(n: ArrayLike) -> np.ndarray:
    """Elementwise mcomp test. Requires MCOMP_MIN <= n <= MCOMP_MAX."""
    u = np.asarray(n).astype(np.uint32) + np.uint32(MCOMP_OFFSET)
    return u * np.uint32(MCOMP_MULTIPLIER) < np.uint32(MCOMP_BOUND)


def is_leap_year_array(y: ArrayLike) -> np.ndarray:
    y = np.asarray(y)
    return (~is_multiple_of_100_array(y) | (y % 16 == 0)) & (y % 4 == 0)


# ---------------------------------------------------------
# Unsigned kernels
# ---------------------------------------------------------

def _unsigned_to_rata_die(years: np.ndarray, months: np.ndarray, days: np.ndarray, rdt: np.dtype) -> np.ndarray:
    y = years.astype(rdt)
    m = months.astype(rdt)
    d = days.astype(rdt)

    j = (m < 3).astype(rdt)
    y0 = y - j
    m0 = m + 12 * j

    century = y0 // 100
    year_days = 1461 * y0 // 4 - century + century // 4
    month_days = (979 * m0 - 2922) // 32
    return year_days + month_days + d - 1


def _unsigned_to_date(n: np.ndarray, rdt: np.dtype, yt: np.dtype) -> DateArrays:
    n1 = 4 * n.astype(rdt) + 3
    century = n1 // 146097
    day_of_century = n1 % 146097 // 4

    n2 = (4 * day_of_century + 3).astype(_U64)
    u2 = _U64(2939745) * n2
    year_of_century = u2 >> _U64(32)
    day_of_year = (u2 & _U64(0xFFFFFFFF)) // _U64(2939745) // _U64(4)

    n3 = _U64(2141) * day_of_year + _U64(197657)
    month = n3 >> _U64(16)
    day = (n3 & _U64(0xFFFF)) // _U64(2141)

    j = day_of_year >= _U64(306)
    year = _U64(100) * century.astype(_U64) + year_of_century + j.astype(_U64)
    month = month - _U64(12) * j.astype(_U64)
    return year.astype(yt), month.astype(np.uint8), (day + _U64(1)).astype(np.uint8)


# ---------------------------------------------------------
# Public entry points
# ---------------------------------------------------------

def to_rata_die_array(engine: Any, years: ArrayLike, months: ArrayLike, days: ArrayLike) -> np.ndarray:
    """Rata dies of the dates (years[i], months[i], days[i]), dtype of the engine's rata die type."""
    years, months, days = np.broadcast_arrays(np.asarray(years), np.asarray(months), np.asarray(days))

    if isinstance(engine, CheckedEngine):
        for i, (y, m, d) in enumerate(zip(years.ravel().tolist(), months.ravel().tolist(), days.ravel().tolist())):
            try:
                engine.validate_date(Date(y, m, d))
            except ValueError as e:
                raise type(e)(f"index {i}: {e}") from e
        engine = engine.engine

    if isinstance(engine, UnsignedEngine):
        return _unsigned_to_rata_die(years, months, days, engine.rata_die_type.numpy_dtype)

    if isinstance(engine, SignedEngine):
        ut = engine.unsigned.rata_die_type.numpy_dtype
        uy = years.astype(ut) - np.asarray(engine.offset.year, dtype=ut)
        un = _unsigned_to_rata_die(uy, months, days, ut)
        n = un - np.asarray(engine.offset.rata_die, dtype=ut)
        return n.astype(engine.rata_die_type.numpy_dtype)

    raise TypeError(f"Unsupported engine type: {type(engine)}")


def to_date_array(engine: Any, n: ArrayLike) -> DateArrays:
    """Dates of the rata dies n as (years, months, days) arrays."""
    n = np.asarray(n)

    if isinstance(engine, CheckedEngine):
        for i, x in enumerate(n.ravel().tolist()):
            try:
                engine.validate_rata_die(x)
            except ValueError as e:
                raise type(e)(f"index {i}: {e}") from e
        engine = engine.engine

    if isinstance(engine, UnsignedEngine):
        return _unsigned_to_date(n, engine.rata_die_type.numpy_dtype, engine.year_type.numpy_dtype)

    if isinstance(engine, SignedEngine):
        ut = engine.unsigned.rata_die_type.numpy_dtype
        un = n.astype(ut) + np.asarray(engine.offset.rata_die, dtype=ut)
        uy, months, days = _unsigned_to_date(un, ut, ut)
        years = (uy + np.asarray(engine.offset.year, dtype=ut)).astype(engine.year_type.numpy_dtype)
        return years, months, days

    raise TypeError(f"Unsupported engine type: {type(engine)}")
