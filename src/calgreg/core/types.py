from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Literal, Optional

import numpy as np

@dataclass(frozen=True)
class EngineId:
    family: Literal["unsigned", "signed", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class IntType:
    """
    Fixed-width machine integer used to store years or rata dies.

    Python ints never overflow, so engines call wrap() wherever a value is
    stored into this type; the result is what a C-style cast would give.
    """
    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if self.bits not in (8, 16, 32, 64):
            raise ValueError("bits must be one of 8, 16, 32, 64")

    @staticmethod
    def of(dtype: Any) -> "IntType":
        """Descriptor for a numpy integer dtype, e.g. IntType.of(np.int16)."""
        dt = np.dtype(dtype)
        if dt.kind not in ("i", "u"):
            raise ValueError(f"Not an integer dtype: {dt}")
        return IntType(bits=dt.itemsize * 8, signed=(dt.kind == "i"))

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(f"{'i' if self.signed else 'u'}{self.bits // 8}")

    def wrap(self, n: int) -> int:
        """Reduce n modulo 2**bits into [min, max] (two's complement)."""
        n &= (1 << self.bits) - 1
        if self.signed and n > self.max:
            n -= 1 << self.bits
        return n

    def contains(self, n: int) -> bool:
        return self.min <= n <= self.max

    def unsigned(self) -> "IntType":
        return IntType(bits=self.bits, signed=False)

    def __str__(self) -> str:
        return f"{'int' if self.signed else 'uint'}{self.bits}"


UINT8 = IntType(8, False)
UINT16 = IntType(16, False)
UINT32 = IntType(32, False)
UINT64 = IntType(64, False)
INT8 = IntType(8, True)
INT16 = IntType(16, True)
INT32 = IntType(32, True)
INT64 = IntType(64, True)

@dataclass(frozen=True, order=True)
class Date:
    """
    Proleptic Gregorian date. Ordered lexicographically on (year, month, day).

    No validation happens here: engines produce well-formed dates by
    construction and CheckedEngine validates caller input.
    """
    year: int
    month: int
    day: int

    @classmethod
    def min_of(cls, year_type: IntType) -> "Date":
        return cls(year_type.min, 1, 1)

    @classmethod
    def max_of(cls, year_type: IntType) -> "Date":
        return cls(year_type.max, 12, 31)

    def __str__(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"


UNIX_EPOCH = Date(1970, 1, 1)

@dataclass(frozen=True)
class Bounds:
    """Domain limits of an engine. Derived once from (Y, R, epoch)."""
    date_min: Date
    date_max: Date
    rata_die_min: int
    rata_die_max: int
    round_date_min: Date
    round_date_max: Date
    round_rata_die_min: int
    round_rata_die_max: int

    def as_dict(self) -> Dict[str, Any]:
        return {k: (str(v) if isinstance(v, Date) else v) for k, v in self.__dict__.items()}

@dataclass(frozen=True)
class EngineSpec:
    """Pure data payload for constructing an engine."""
    kind: Literal["unsigned", "signed"]
    id: EngineId
    year_type: IntType
    rata_die_type: IntType
    epoch: Optional[Date] = None  # signed only; unsigned engines are fixed at 0000-03-01
    meta: Optional[Dict[str, Any]] = None

    @staticmethod
    def like(name: str) -> "EngineSpec":
        from calgreg.engines.specs import ALL_SPECS
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, **kwargs)
