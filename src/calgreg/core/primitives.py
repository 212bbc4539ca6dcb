"""
calgreg.core.primitives
-----------------------
Closed-form calendar predicates. Each one replaces a division or a branch
with a multiply-and-compare or a bit trick.
"""

from __future__ import annotations

# mcomp test for divisor 100 on 32-bit words: n is a multiple of 100 iff
# (MULTIPLIER * n) mod 2**32 < BOUND, for 0 <= n <= MAX_DIVIDEND.
# See https://accu.org/var/uploads/journals/Overload155.pdf#page=16
MCOMP_MULTIPLIER = 42949673
MCOMP_BOUND = 42949669
MCOMP_MAX_DIVIDEND = 1073741799

# Shifting by a multiple of 100 preserves divisibility and centres the domain on 0.
MCOMP_OFFSET = MCOMP_MAX_DIVIDEND // 2 // 100 * 100   #  536870800
MCOMP_MIN = -MCOMP_OFFSET                              # -536870800
MCOMP_MAX = MCOMP_MAX_DIVIDEND - MCOMP_OFFSET          #  536870999

_MASK32 = 0xFFFFFFFF

# Bit m is set iff month m has 31 days (Jan, Mar, May, Jul, Aug, Oct, Dec).
LONG_MONTHS = 0b1010110101010


def is_multiple_of_100(n: int) -> bool:
    """
    n % 100 == 0 without a division.

    The multiply-and-compare path serves MCOMP_MIN <= n <= MCOMP_MAX, the
    32-bit domain. Wider integers use the plain remainder.
    """
    if MCOMP_MIN <= n <= MCOMP_MAX:
        return ((MCOMP_MULTIPLIER * (n + MCOMP_OFFSET)) & _MASK32) < MCOMP_BOUND
    return n % 100 == 0


def is_leap_year(y: int) -> bool:
    # For multiples of 100, divisibility by 400 is divisibility by 16.
    return (not is_multiple_of_100(y) or y % 16 == 0) and y % 4 == 0


def last_day_of_month(y: int, m: int) -> int:
    """Number of days in month m (1..12) of year y."""
    if m != 2:
        return 30 | ((LONG_MONTHS >> m) & 1)
    return 29 if is_leap_year(y) else 28
