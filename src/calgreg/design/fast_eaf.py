# design/fast_eaf.py

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class EAF:
    """Euclidean affine function n -> (alpha * n + beta) // delta."""
    alpha: int
    beta: int
    delta: int

    def __call__(self, n: int) -> int:
        return (self.alpha * n + self.beta) // self.delta


@dataclass(frozen=True)
class FastEAF:
    """
    Replacement of an EAF by one with divisor 2**k, exact for 0 <= n < upper_bound.
    upper_bound is None when the replacement is exact for every n >= 0.
    """
    fast: EAF
    k: int
    upper_bound: Optional[int]


def check_eaf(eaf: EAF) -> None:
    if eaf.alpha <= 0 or eaf.delta <= 0:
        raise ValueError("alpha and delta must be strictly positive")
    if eaf.delta & (eaf.delta - 1) == 0:
        raise ValueError("delta must not be a power of two")


def fast_eaf(k: int, eaf: EAF) -> FastEAF:
    """
    Best fast EAF with divisor 2**k: alpha' is 2**k * alpha / delta rounded to
    the nearest integer, beta' the offset that keeps it exact longest.
    """
    check_eaf(eaf)
    alpha, beta, delta = eaf.alpha, eaf.beta, eaf.delta

    two_k = 1 << k
    div, mod = divmod(two_k * alpha, delta)
    round_up = mod > delta - mod
    alpha_p = div + 1 if round_up else div
    nu = delta - mod if round_up else mod

    def f(r: int) -> int:
        return alpha_p * r - two_k * ((alpha * r + beta) // delta)

    if round_up:
        beta_p = -min(f(r) for r in range(delta))
    else:
        beta_p = two_k - max(f(r) for r in range(delta)) - 1

    fast = EAF(alpha_p, beta_p, two_k)
    if nu == 0:
        # delta divides 2**k * alpha: both functions agree everywhere.
        return FastEAF(fast, k, None)

    def upper_bound_at(r: int) -> int:
        if round_up:
            num = two_k - (f(r) + beta_p)
            if num <= 0:
                return r
            return -(-num // nu) * delta + r
        num = f(r) + beta_p
        if num < 0:
            return r
        return (num // nu + 1) * delta + r

    return FastEAF(fast, k, min(upper_bound_at(r) for r in range(delta)))


def simple_fast_eaf(k: int, eaf: EAF) -> FastEAF:
    """
    Scale all coefficients by mu = 2**k // delta + 1. Cheaper to derive than
    fast_eaf() and usually valid on a shorter range (0 when never valid).
    The bound is derived for n // delta, i.e. alpha = 1 and beta = 0.
    """
    check_eaf(eaf)
    two_k = 1 << k
    mu = two_k // eaf.delta + 1
    nu = eaf.delta - two_k % eaf.delta
    n = -(-mu // nu) * eaf.delta - 1
    return FastEAF(EAF(mu * eaf.alpha, mu * eaf.beta, two_k), k, n if nu <= mu else 0)


def format_fast_eaf(x: FastEAF) -> str:
    ub = "unbounded" if x.upper_bound is None else str(x.upper_bound)
    return "\n".join([
        f"alpha'      = {x.fast.alpha}",
        f"beta'       = {x.fast.beta}",
        f"delta'      = {x.fast.delta}",
        f"k           = {x.k}",
        f"upper bound = {ub}",
    ])


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Coefficients and upper bound of fast EAFs equivalent to (alpha*n + beta) // delta.")
    p.add_argument("alpha", type=int)
    p.add_argument("beta", type=int)
    p.add_argument("delta", type=int)
    p.add_argument("--simple", action="store_true", help="Use the simple scaling method.")
    p.add_argument("--k-max", type=int, default=32, help="Largest exponent of the divisor 2^k.")
    args = p.parse_args(argv)

    eaf = EAF(args.alpha, args.beta, args.delta)
    try:
        check_eaf(eaf)
    except ValueError as e:
        print(f"error: {e}.", file=sys.stderr)
        return 1

    method = simple_fast_eaf if args.simple else fast_eaf
    for k in range(1, args.k_max + 1):
        print(format_fast_eaf(method(k, eaf)))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
