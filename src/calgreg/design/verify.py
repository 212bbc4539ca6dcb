# design/verify.py

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import numpy as np

from calgreg.core.primitives import MCOMP_MAX, MCOMP_MIN
from calgreg.design.eaf_search import MONTH_LIMITS
from calgreg.engines.vector import is_multiple_of_100_array


def check_days_before_month() -> List[str]:
    failures = []
    for m, (first, _) in enumerate(MONTH_LIMITS):
        mp = m + 3
        got = (979 * mp - 2922) // 32
        if got != first:
            failures.append(f"days before month {mp}: got {got}, expected {first}")
    return failures


def check_month_and_day() -> List[str]:
    failures = []
    for m, (first, last) in enumerate(MONTH_LIMITS):
        for doy in range(first, last + 1):
            n3 = 2141 * doy + 197657
            month, day = n3 >> 16, (n3 & 0xFFFF) // 2141
            if (month, day) != (m + 3, doy - first):
                failures.append(f"day of year {doy}: got ({month}, {day}), expected ({m + 3}, {doy - first})")
    return failures


def check_year_of_century() -> List[str]:
    n2 = 4 * np.arange(146097, dtype=np.uint64) + np.uint64(3)
    u2 = np.uint64(2939745) * n2
    year = u2 >> np.uint64(32)
    doy = (u2 & np.uint64(0xFFFFFFFF)) // np.uint64(2939745) // np.uint64(4)
    bad = np.flatnonzero((year != n2 // np.uint64(1461)) | (doy != n2 % np.uint64(1461) // np.uint64(4)))
    return [f"year of century at n2 = {int(n2[i])}" for i in bad[:10]]


def check_mcomp(chunk: int = 1 << 24) -> List[str]:
    failures = []
    for lo in range(MCOMP_MIN, MCOMP_MAX + 1, chunk):
        n = np.arange(lo, min(lo + chunk, MCOMP_MAX + 1), dtype=np.int64)
        bad = np.flatnonzero(is_multiple_of_100_array(n) != (n % 100 == 0))
        failures.extend(f"is_multiple_of_100({int(n[i])})" for i in bad[:10])
    return failures


def verify_coefficients(*, mcomp: bool = True) -> List[str]:
    """Check every constant the engines rely on over its full domain. Returns failures."""
    failures = check_days_before_month() + check_month_and_day() + check_year_of_century()
    if mcomp:
        failures += check_mcomp()
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Verify the engine constants over their full domains.")
    p.add_argument("--skip-mcomp", action="store_true", help="Skip the ~1e9 value sweep of the mcomp test.")
    args = p.parse_args(argv)

    failures = verify_coefficients(mcomp=not args.skip_mcomp)
    for f in failures:
        print("FAIL", f)
    print("OK" if not failures else f"{len(failures)} failure(s)")
    return 0 if not failures else 1


if __name__ == "__main__":
    sys.exit(main())
