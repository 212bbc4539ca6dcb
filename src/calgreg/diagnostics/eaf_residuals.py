#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import numpy as np

from calgreg.design.eaf_search import MONTH_LIMITS


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calgreg[diagnostics]"') from e


def month_table():
    """Exact month (3..14) and day of month (0-based) for every day of year from 01-Mar."""
    doy = np.arange(366)
    month = np.empty(366, dtype=np.int64)
    day = np.empty(366, dtype=np.int64)
    for m, (first, last) in enumerate(MONTH_LIMITS):
        month[first:last + 1] = m + 3
        day[first:last + 1] = doy[first:last + 1] - first
    return doy, month, day


def residuals():
    """
    Slack of the month EAFs against the exact table.

    For the inverse 2141/2**16 step the slack is the distance of the scaled
    numerator to the nearest month boundary: non-negative everywhere iff exact.
    For the forward 979/32 step it is the remainder of the division.
    """
    doy, month, _ = month_table()
    n3 = 2141 * doy + 197657
    lower = n3 - (month << 16)
    upper = ((month + 1) << 16) - 1 - n3
    inverse = np.minimum(lower, upper)

    mp = np.arange(3, 15)
    forward = (979 * mp - 2922) % 32
    return doy, inverse, mp, forward


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot the slack of the month EAFs against the exact month table.")
    p.add_argument("--out", default="", help="Save the figure to this file instead of showing it.")
    args = p.parse_args(argv)

    plt = _need_matplotlib()

    doy, inverse, mp, forward = residuals()
    print(f"inverse step: min slack {int(inverse.min())} (of 65536)")
    print(f"forward step: remainders {forward.tolist()} (of 32)")

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 7))
    ax1.plot(doy, inverse, lw=1)
    ax1.axhline(0, color="red", lw=0.8)
    for first, _ in MONTH_LIMITS:
        ax1.axvline(first, color="grey", lw=0.4, ls=":")
    ax1.set_xlabel("day of year (from 01-Mar)")
    ax1.set_ylabel("slack")
    ax1.set_title("(2141*n + 197657) >> 16")

    ax2.bar(mp, forward)
    ax2.set_xlabel("month (3..14)")
    ax2.set_ylabel("remainder")
    ax2.set_title("(979*m - 2922) // 32")
    fig.tight_layout()

    if args.out:
        fig.savefig(args.out, dpi=150)
        print(f"Saved figure to {args.out}")
    else:
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
