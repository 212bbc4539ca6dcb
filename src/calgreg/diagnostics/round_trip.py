from __future__ import annotations

import argparse
from typing import Iterable, List, Optional

import calgreg
from calgreg.core.engine import CalendarEngine
from calgreg.core.time import next_day


def parse_engines(s: str) -> List[str]:
    # "unix32,unsigned32" -> ["unix32", "unsigned32"]
    return [x.strip() for x in s.split(",") if x.strip()]


def windows(engine: CalendarEngine, span: int) -> List[range]:
    """Rata die windows of `span` values at both round-trip limits and around the epoch."""
    lo, hi = engine.bounds.round_rata_die_min, engine.bounds.round_rata_die_max
    if hi - lo + 1 <= 3 * span:
        return [range(lo, hi + 1)]
    out = [range(lo, lo + span), range(hi - span + 1, hi + 1)]
    n0 = engine.to_rata_die(engine.epoch)
    a, b = max(lo + span, n0 - span // 2), min(hi - span + 1, n0 + span // 2)
    if a < b:
        out.append(range(a, b))
    return out


def check_window(engine: CalendarEngine, ns: Iterable[int], *, max_failures: int = 10) -> List[str]:
    """
    For every n: to_rata_die(to_date(n)) == n, and consecutive rata dies map
    to consecutive calendar days.
    """
    failures: List[str] = []
    prev = None
    for n in ns:
        d = engine.to_date(n)
        back = engine.to_rata_die(d)
        if back != n:
            failures.append(f"to_rata_die(to_date({n})) = {back} (date {d})")
        if prev is not None and next_day(prev) != d:
            failures.append(f"to_date({n}) = {d}, expected {next_day(prev)}")
        prev = d
        if len(failures) >= max_failures:
            break
    return failures[:max_failures]


def check_engine(engine: CalendarEngine, *, span: int = 1000, max_failures: int = 10) -> List[str]:
    failures: List[str] = []
    for w in windows(engine, span):
        failures += check_window(engine, w, max_failures=max_failures - len(failures))
        if len(failures) >= max_failures:
            break
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip and adjacency checks near the limits of each engine.")
    p.add_argument("--engines", default="", help="Comma separated engine names (default: all registered).")
    p.add_argument("--span", type=int, default=1000, help="Rata dies checked per window.")
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    names = parse_engines(args.engines) or calgreg.list_engines()
    total = 0
    for name in names:
        eng = calgreg.get_engine(name)
        failures = check_engine(eng, span=args.span, max_failures=args.max_failures)
        total += len(failures)
        status = "OK" if not failures else f"{len(failures)} failure(s)"
        print(f"{name:<12} {status}")
        for f in failures:
            print("  FAIL", f)

    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
