from __future__ import annotations

import argparse
from typing import List, Optional

import calgreg

FIELDS = (
    "date_min", "date_max", "rata_die_min", "rata_die_max",
    "round_date_min", "round_date_max", "round_rata_die_min", "round_rata_die_max",
)


def format_table(names: List[str]) -> str:
    lines = []
    for name in names:
        info = calgreg.engine_info(name)
        b = info["bounds"]
        lines.append(f"{name}  ({info['year_type']}/{info['rata_die_type']}, epoch {info['epoch']})")
        for f in FIELDS:
            lines.append(f"  {f:<20} {b[f]}")
        lines.append("")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print the domain limits of registered engines.")
    p.add_argument("engines", nargs="*", help="Engine names (default: all).")
    args = p.parse_args(argv)

    print(format_table(args.engines or calgreg.list_engines()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
