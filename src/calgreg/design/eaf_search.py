# design/eaf_search.py

from __future__ import annotations

import argparse
import sys
from fractions import Fraction
from typing import Callable, Dict, List, Optional, Tuple

from calgreg.design.fast_eaf import EAF

Predicate = Callable[[int, int, int], bool]

# Months counted from March: Mar = 0, ..., Dec = 9, Jan = 10, Feb = 11.
# MONTH_LIMITS[m] = (days from 01-Mar to the first of month m,
#                    days from 01-Mar to the last of month m)
MONTH_LIMITS: Tuple[Tuple[int, int], ...] = (
    # Mar       Apr        May        Jun        Jul        Aug
    (0, 30), (31, 60), (61, 91), (92, 121), (122, 152), (153, 183),
    # Sep       Oct        Nov        Dec        Jan        Feb
    (184, 213), (214, 244), (245, 274), (275, 305), (306, 336), (337, 365),
)


def month_from_day_of_year(a: int, b: int, c: int) -> bool:
    """(a*n + b) // c maps every day of year n (from 01-Mar) to its month."""
    for m, (first, last) in enumerate(MONTH_LIMITS):
        if (a * first + b) // c != m or (a * last + b) // c != m:
            return False
    return True


def days_before_month(a: int, b: int, c: int) -> bool:
    """(a*m + b) // c is the number of days from 01-Mar to the first of month m."""
    for m, (first, _) in enumerate(MONTH_LIMITS):
        if (a * m + b) // c != first:
            return False
    return True


def year_of_century(a: int, b: int, c: int) -> bool:
    """(a*n + b) // c is the year of the century containing day n."""
    for n in range(36525):
        if (a * n + b) // c != (4 * n + 3) // 1461:
            return False
    return True


# name -> (predicate, lower bound hint for a / c)
TARGETS: Dict[str, Tuple[Predicate, Fraction]] = {
    "month-from-day-of-year": (month_from_day_of_year, Fraction(1, 31)),
    "days-before-month": (days_before_month, Fraction(30, 1)),
    "year-of-century": (year_of_century, Fraction(1, 366)),
}


def find_coefficients(test: Predicate, hint: Fraction, *, max_log2_c: int = 31) -> Optional[EAF]:
    """
    Brute-force search for (a, b, c) with test(a, b, c), c a power of two.

    For each c = 1, 2, 4, ... the candidates are a in [a_min, a_max) around
    c * hint and 0 <= b < a, scanned in increasing order; the first match is
    returned. hint must have numerator 1 or denominator 1.
    """
    num, den = hint.numerator, hint.denominator
    if num != 1 and den != 1:
        raise ValueError("hint must be of the form 1/q or p/1")

    for log2_c in range(max_log2_c + 1):
        c = 1 << log2_c
        a_min = -(-c // den)
        a_max = c * (num + 1) if den == 1 else c // (den - 1)
        for a in range(a_min, a_max):
            for b in range(a):
                if test(a, b, c):
                    return EAF(a, b, c)
    return None


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Search EAF coefficients (a*n + b) // c, c a power of two, for calendar tables.")
    p.add_argument("targets", nargs="*", help=f"Any of: {', '.join(sorted(TARGETS))}.")
    p.add_argument("--max-log2-c", type=int, default=31, help="Give up after c = 2^max_log2_c.")
    args = p.parse_args(argv)

    names = args.targets or ["month-from-day-of-year", "days-before-month"]
    for name in names:
        if name not in TARGETS:
            p.error(f"unknown target {name!r}")

    for name in names:
        test, hint = TARGETS[name]
        print(f"Coefficients for {name}: ", end="", flush=True)
        eaf = find_coefficients(test, hint, max_log2_c=args.max_log2_c)
        if eaf is None:
            print("none found.")
        else:
            print(f"a = {eaf.alpha}, b = {eaf.beta}, c = {eaf.delta}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
