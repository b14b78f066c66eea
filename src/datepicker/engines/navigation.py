"""
datepicker.engines.navigation
-----------------------------
The view gate: what the previous/next controls do, whether they are shown,
and the dialog title, for each ViewGranularity.

Stepping is plain calendar arithmetic and always succeeds; the constraint
provider only decides whether the control is offered.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from datepicker.core.engine import ConstraintProvider
from datepicker.core.time import is_representable, year_group_end, year_group_start
from datepicker.core.types import ViewGranularity, YearMonth

DEFAULT_MONTH_TITLE_FORMAT = "%b %Y"

PeriodLike = Union[YearMonth, date]


def _as_year_month(period: PeriodLike) -> YearMonth:
    if isinstance(period, YearMonth):
        return period
    return YearMonth.from_date(period)


def larger_granularity(g: ViewGranularity) -> Optional[ViewGranularity]:
    """One level coarser, or None at YEARS."""
    if g == ViewGranularity.DAYS:
        return ViewGranularity.MONTHS
    if g == ViewGranularity.MONTHS:
        return ViewGranularity.YEARS
    return None

def smaller_granularity(g: ViewGranularity) -> Optional[ViewGranularity]:
    """One level finer, or None at DAYS."""
    if g == ViewGranularity.YEARS:
        return ViewGranularity.MONTHS
    if g == ViewGranularity.MONTHS:
        return ViewGranularity.DAYS
    return None


def step_previous(g: ViewGranularity, period: PeriodLike) -> YearMonth:
    ym = _as_year_month(period)
    if g == ViewGranularity.DAYS:
        return ym.previous_month()
    if g == ViewGranularity.MONTHS:
        return ym.previous_year()
    return ym.previous_year_group()

def step_next(g: ViewGranularity, period: PeriodLike) -> YearMonth:
    ym = _as_year_month(period)
    if g == ViewGranularity.DAYS:
        return ym.next_month()
    if g == ViewGranularity.MONTHS:
        return ym.next_year()
    return ym.next_year_group()


def should_show_previous(g: ViewGranularity, period: PeriodLike, provider: ConstraintProvider) -> bool:
    ym = _as_year_month(period)
    if g == ViewGranularity.DAYS:
        return not provider.is_month_forbidden(ym.previous_month())
    if g == ViewGranularity.MONTHS:
        return not provider.is_year_forbidden(ym.year - 1)
    return not provider.is_year_group_forbidden(year_group_start(ym.year) - 1)

def should_show_next(g: ViewGranularity, period: PeriodLike, provider: ConstraintProvider) -> bool:
    ym = _as_year_month(period)
    if g == ViewGranularity.DAYS:
        return not provider.is_month_forbidden(ym.next_month())
    if g == ViewGranularity.MONTHS:
        return not provider.is_year_forbidden(ym.year + 1)
    return not provider.is_year_group_forbidden(year_group_end(ym.year) + 1)


def title_for(g: ViewGranularity, period: PeriodLike, month_format: str = DEFAULT_MONTH_TITLE_FORMAT) -> str:
    """
    Dialog title for the viewed period.

    DAYS formats the first day of the month with `month_format` (strftime),
    MONTHS shows the 4-digit year, YEARS the bounds of the year group.
    Months outside the range of datetime.date fall back to "YYYY-MM".
    """
    ym = _as_year_month(period)
    if g == ViewGranularity.DAYS:
        if not is_representable(ym.year):
            return f"{ym.year}-{ym.month:02d}"
        return ym.first_day_of_month().strftime(month_format)
    if g == ViewGranularity.MONTHS:
        return f"{ym.year:04d}"
    return f"{year_group_start(ym.year)}-{year_group_end(ym.year)}"
