from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect

from datepicker.core.errors import ConfigError
from datepicker.core.types import ViewGranularity, YearMonth
from datepicker.engines.navigation import DEFAULT_MONTH_TITLE_FORMAT


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_VIEW_CHOICES = [v.name.lower() for v in ViewGranularity]


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def parse_year_month(s: str) -> YearMonth:
    y, m = map(int, s.split("-"))
    return YearMonth(y, m)


def _parse_md(s: str) -> tuple[int, int]:
    m, d = map(int, s.split("-"))
    return (m, d)


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


# ---------------------------------------------------------
# Constraint flags shared by every command
# ---------------------------------------------------------

def add_constraint_args(p: argparse.ArgumentParser) -> None:
    g = p.add_argument_group("constraints")
    g.add_argument("--min", dest="min_date", type=_parse_ymd, help="earliest selectable date, YYYY-MM-DD")
    g.add_argument("--max", dest="max_date", type=_parse_ymd, help="latest selectable date, YYYY-MM-DD")
    g.add_argument("--weekday", action="append", default=[], help="disabled weekday, e.g. Sat (repeatable)")
    g.add_argument("--month", dest="months", action="append", default=[], help="disabled month, e.g. Jul or 7 (repeatable)")
    g.add_argument("--year", dest="years", type=int, action="append", default=[], help="disabled year (repeatable)")
    g.add_argument("--monthly", type=int, action="append", default=[], help="day of month disabled in every month (repeatable)")
    g.add_argument("--yearly", type=_parse_md, action="append", default=[], help="MM-DD disabled in every year (repeatable)")
    g.add_argument("--unique", type=_parse_ymd, action="append", default=[], help="single disabled date, YYYY-MM-DD (repeatable)")

    c = p.add_argument_group("picker")
    c.add_argument("--initial-date", type=_parse_ymd)
    c.add_argument("--initial-view", default="days", choices=_VIEW_CHOICES)
    c.add_argument("--selection-type", default="days", choices=_VIEW_CHOICES)
    c.add_argument("--title-format", default=DEFAULT_MONTH_TITLE_FORMAT, help="strftime pattern of the month title")
    c.add_argument("-v", "--verbose", action="store_true", help="debug logging")


def config_from_args(args: argparse.Namespace):
    from datepicker.engines.config import make_config

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return make_config(
        min_date=args.min_date,
        max_date=args.max_date,
        disabled_weekdays=args.weekday,
        disabled_months=args.months,
        disabled_years=args.years,
        disabled_monthly_dates=args.monthly,
        disabled_yearly_dates=args.yearly,
        disabled_unique_dates=args.unique,
        initial_date=args.initial_date,
        initial_view_type=args.initial_view,
        selection_type=args.selection_type,
        month_title_format=args.title_format,
    )


def _verdict(forbidden: bool) -> str:
    return "forbidden" if forbidden else "allowed"


# ---------------------------------------------------------
# Commands
# ---------------------------------------------------------

def cmd_day(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="datepicker day", description="Is a single day selectable?")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    add_constraint_args(p)
    args = p.parse_args(argv)

    config = config_from_args(args)
    print(f"{args.date.isoformat()} {_verdict(config.is_day_forbidden(args.date))}")
    return 0

def cmd_month(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="datepicker month", description="Is any day of a month selectable?")
    p.add_argument("month", type=parse_year_month, help="YYYY-MM")
    add_constraint_args(p)
    args = p.parse_args(argv)

    config = config_from_args(args)
    print(f"{args.month} {_verdict(config.is_month_forbidden(args.month))}")
    return 0

def cmd_year(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="datepicker year", description="Is any day of a year selectable?")
    p.add_argument("year", type=int)
    add_constraint_args(p)
    args = p.parse_args(argv)

    config = config_from_args(args)
    print(f"{args.year} {_verdict(config.is_year_forbidden(args.year))}")
    return 0

def cmd_group(argv: list[str]) -> int:
    from datepicker.core.time import year_group_end, year_group_start

    p = argparse.ArgumentParser(prog="datepicker group", description="Is any day of a 20-year group selectable?")
    p.add_argument("year", type=int, help="any year of the group")
    add_constraint_args(p)
    args = p.parse_args(argv)

    config = config_from_args(args)
    label = f"{year_group_start(args.year)}-{year_group_end(args.year)}"
    print(f"{label} {_verdict(config.is_year_group_forbidden(args.year))}")
    return 0

def cmd_nav(argv: list[str]) -> int:
    from datepicker.engines.navigation import should_show_next, should_show_previous, step_next, step_previous, title_for

    p = argparse.ArgumentParser(prog="datepicker nav", description="Dialog header for a viewed period.")
    p.add_argument("view", choices=_VIEW_CHOICES)
    p.add_argument("period", type=parse_year_month, help="viewed YYYY-MM")
    add_constraint_args(p)
    args = p.parse_args(argv)

    config = config_from_args(args)
    view = ViewGranularity.parse(args.view)
    ym = args.period

    print(f"title    : {title_for(view, ym, config.month_title_format)}")
    prev_state = "shown" if should_show_previous(view, ym, config) else "hidden"
    next_state = "shown" if should_show_next(view, ym, config) else "hidden"
    print(f"previous : {prev_state:6s} -> {step_previous(view, ym)}")
    print(f"next     : {next_state:6s} -> {step_next(view, ym)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `datepicker YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return _guarded(cmd_day, argv)

    p = argparse.ArgumentParser(prog="datepicker", description="Date picker constraint and navigation toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Is a day selectable?", add_help=False)
    sub.add_parser("month", help="Is a month (YYYY-MM) selectable?", add_help=False)
    sub.add_parser("year", help="Is a year selectable?", add_help=False)
    sub.add_parser("group", help="Is a 20-year group selectable?", add_help=False)
    sub.add_parser("nav", help="Title and previous/next visibility for a view", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print a month grid marking forbidden days (diagnostics)", add_help=False)
    sub.add_parser("availability-map", help="Plot a year's forbidden days (needs numpy, matplotlib)", add_help=False)

    args, rest = p.parse_known_args(argv)

    commands = {
        "day": cmd_day,
        "month": cmd_month,
        "year": cmd_year,
        "group": cmd_group,
        "nav": cmd_nav,
    }
    if args.cmd in commands:
        return _guarded(commands[args.cmd], rest)

    tool_map = {
        "pretty-month": "datepicker.diagnostics.pretty_month",
        "availability-map": "datepicker.diagnostics.availability_map",
    }
    if args.cmd in tool_map:
        return _guarded(lambda a: _run_module_main(tool_map[args.cmd], a), rest)

    raise RuntimeError("unreachable")


def _guarded(fn, argv: list[str]) -> int:
    try:
        return fn(argv)
    except ConfigError as e:
        print(f"datepicker: configuration error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
