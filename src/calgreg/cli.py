from __future__ import annotations

import argparse
import importlib
import inspect
import sys
from typing import Callable, Dict

from calgreg.core.errors import DomainError


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _engine_option(p: argparse.ArgumentParser) -> None:
    import calgreg
    p.add_argument("--engine", default=calgreg.api.DEFAULT_ENGINE, help="Engine name (see `calgreg engines`).")


def cmd_to_date(argv: list[str]) -> int:
    import calgreg

    p = argparse.ArgumentParser(prog="calgreg to-date", description="Rata die -> date")
    p.add_argument("n", type=int, help="rata die (days since the engine's epoch)")
    _engine_option(p)
    args = p.parse_args(argv)

    print(calgreg.to_date(args.n, engine=args.engine))
    return 0


def cmd_to_rata_die(argv: list[str]) -> int:
    import calgreg
    from calgreg.core.time import parse_date

    p = argparse.ArgumentParser(
        prog="calgreg to-rata-die",
        description="Date -> rata die. Put negative years after '--', e.g. `calgreg to-rata-die -- -0001-03-01`.",
    )
    p.add_argument("date", help="[-]YYYY-MM-DD")
    _engine_option(p)
    args = p.parse_args(argv)

    try:
        d = parse_date(args.date)
    except ValueError as e:
        p.error(str(e))
    print(calgreg.to_rata_die(d, engine=args.engine))
    return 0


def cmd_leap(argv: list[str]) -> int:
    import calgreg

    p = argparse.ArgumentParser(prog="calgreg leap", description="Is YEAR a leap year?")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    leap = calgreg.is_leap_year(args.year)
    print(f"{args.year}: {'leap' if leap else 'common'} year ({29 if leap else 28} days in February)")
    return 0


def cmd_bounds(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="calgreg bounds", description="Domain limits of an engine")
    _engine_option(p)
    args = p.parse_args(argv)
    return _run_module_main("calgreg.diagnostics.bounds_table", [args.engine])


def cmd_engines(argv: list[str]) -> int:
    import calgreg

    p = argparse.ArgumentParser(prog="calgreg engines", description="List registered engines")
    p.parse_args(argv)

    for name in calgreg.list_engines():
        info = calgreg.engine_info(name)
        print(f"{name:<12} {info['family']:<9} {info['year_type']:>7}/{info['rata_die_type']:<7} epoch {info['epoch']}")
    return 0


COMMANDS: Dict[str, Callable[[list[str]], int]] = {
    "to-date": cmd_to_date,
    "to-rata-die": cmd_to_rata_die,
    "leap": cmd_leap,
    "bounds": cmd_bounds,
    "engines": cmd_engines,
}

DIAG_TOOLS = {
    "round-trip": "calgreg.diagnostics.round_trip",
    "bounds-table": "calgreg.diagnostics.bounds_table",
    "eaf-residuals": "calgreg.diagnostics.eaf_residuals",
}

DESIGN_TOOLS = {
    "eaf-search": "calgreg.design.eaf_search",
    "fast-eaf": "calgreg.design.fast_eaf",
    "verify": "calgreg.design.verify",
}


def _dispatch(argv: list[str]) -> int:
    # Conversion commands parse their own arguments so that negative numbers
    # reach them untouched.
    if argv and argv[0] in COMMANDS:
        return COMMANDS[argv[0]](argv[1:])

    p = argparse.ArgumentParser(prog="calgreg", description="Gregorian calendar arithmetic on fixed-width integers.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-date", help="Rata die -> date")
    sub.add_parser("to-rata-die", help="Date -> rata die")
    sub.add_parser("leap", help="Leap year test")
    sub.add_parser("bounds", help="Domain limits of an engine")
    sub.add_parser("engines", help="List registered engines")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=sorted(DIAG_TOOLS), help="Which diagnostic to run")

    p_design = sub.add_parser("design", help="Design-time EAF tools")
    p_design.add_argument("tool", choices=sorted(DESIGN_TOOLS), help="Which design tool to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "diag":
        return _run_module_main(DIAG_TOOLS[args.tool], rest)

    if args.cmd == "design":
        return _run_module_main(DESIGN_TOOLS[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        return _dispatch(argv)
    except DomainError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
