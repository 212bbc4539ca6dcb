from __future__ import annotations

from typing import Dict

from calgreg.core.types import (
    Date,
    EngineId,
    EngineSpec,
    IntType,
    INT16,
    INT32,
    INT64,
    UINT16,
    UINT32,
    UINT64,
    UNIX_EPOCH,
)


# ============================================================
# HELPER FUNCTIONS
# ============================================================

def unsigned_spec(name: str, year_type: IntType, rata_die_type: IntType, **meta) -> EngineSpec:
    return EngineSpec(
        kind="unsigned",
        id=EngineId("unsigned", name, "1"),
        year_type=year_type,
        rata_die_type=rata_die_type,
        meta=meta or None,
    )


def signed_spec(name: str, year_type: IntType, rata_die_type: IntType, epoch: Date = UNIX_EPOCH, **meta) -> EngineSpec:
    return EngineSpec(
        kind="signed",
        id=EngineId("signed", name, "1"),
        year_type=year_type,
        rata_die_type=rata_die_type,
        epoch=epoch,
        meta=meta or None,
    )


# ============================================================
# STANDARD CONFIGURATIONS
# ============================================================

UNSIGNED_SPECS: Dict[str, EngineSpec] = {
    "unsigned16": unsigned_spec("unsigned16", UINT16, UINT32),
    "unsigned32": unsigned_spec("unsigned32", UINT32, UINT32),
    "unsigned64": unsigned_spec("unsigned64", UINT64, UINT64),
}

SIGNED_SPECS: Dict[str, EngineSpec] = {
    # 16-bit years and 32-bit day counts, as std::chrono::year and std::chrono::days.
    "unix16": signed_spec("unix16", INT16, INT32, note="std::chrono layout"),
    "unix32": signed_spec("unix32", INT32, INT32),
    "unix64": signed_spec("unix64", INT64, INT64),
    "march0": signed_spec("march0", INT16, INT32, Date(0, 3, 1)),
    "jan0": signed_spec("jan0", INT16, INT32, Date(0, 1, 1)),
}

ALL_SPECS: Dict[str, EngineSpec] = {**UNSIGNED_SPECS, **SIGNED_SPECS}
