from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from datepicker.cli import add_constraint_args, config_from_args, parse_year_month
from datepicker.core.time import iter_month_days
from datepicker.core.types import ViewGranularity, YearMonth
from datepicker.engines.config import PickerConfig
from datepicker.engines.navigation import should_show_next, should_show_previous, title_for

Cell = Optional[Tuple[int, bool]]  # (day, forbidden), None for padding


def dow_header() -> str:
    return " Mo   Tu   We   Th   Fr   Sa   Su"


def month_grid(config: PickerConfig, ym: YearMonth) -> List[List[Cell]]:
    """Monday-first weeks of the month; each cell is (day, forbidden) or None."""
    weeks: List[List[Cell]] = []
    wk: List[Cell] = [None] * ym.first_day_of_month().weekday()
    for d in iter_month_days(ym.year, ym.month):
        wk.append((d.day, config.is_day_forbidden(d)))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        wk.extend([None] * (7 - len(wk)))
        weeks.append(wk)
    return weeks


def cell(c: Cell) -> str:
    if c is None:
        return "    "
    day, forbidden = c
    return f"({day:2d})" if forbidden else f" {day:2d} "


def render_month(config: PickerConfig, ym: YearMonth) -> str:
    prev = "«" if should_show_previous(ViewGranularity.DAYS, ym, config) else " "
    nxt = "»" if should_show_next(ViewGranularity.DAYS, ym, config) else " "
    title = title_for(ViewGranularity.DAYS, ym, config.month_title_format)

    lines = [f"{prev} {title} {nxt}", dow_header(), "-" * len(dow_header())]
    for wk in month_grid(config, ym):
        lines.append(" ".join(cell(c) for c in wk).rstrip())
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="datepicker pretty-month",
        description="Print a month grid; forbidden days are shown in parentheses.",
    )
    p.add_argument("month", help="YYYY-MM")
    add_constraint_args(p)
    args = p.parse_args(argv)

    config = config_from_args(args)
    print(render_month(config, parse_year_month(args.month)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
