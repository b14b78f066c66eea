from __future__ import annotations
import calendar as pycal
from datetime import date, timedelta
from typing import TYPE_CHECKING, Iterator, Union

if TYPE_CHECKING:
    from .types import ViewGranularity, YearMonth

YEARS_IN_YEAR_GROUP = 20


def is_representable(year: int) -> bool:
    """Whether datetime.date can hold any day of the given year."""
    return date.min.year <= year <= date.max.year


def days_in_month(year: int, month: int) -> int:
    return pycal.monthrange(year, month)[1]


def first_day_of_month(year: int, month: int) -> date:
    return date(year, month, 1)


def iter_month_days(year: int, month: int) -> Iterator[date]:
    """Every calendar day of the month, first to last (28..31 items)."""
    d = first_day_of_month(year, month)
    for _ in range(days_in_month(year, month)):
        yield d
        d += timedelta(days=1)


# ============================================================
# Year groups (pages of the YEARS view)
# ============================================================

def year_group_start(year: int) -> int:
    # remainder truncated toward zero: year_group_start(-1) == 0
    rem = abs(year) % YEARS_IN_YEAR_GROUP
    return year - (rem if year >= 0 else -rem)

def year_group_end(year: int) -> int:
    return year_group_start(year) + (YEARS_IN_YEAR_GROUP - 1)

def year_group_range(year: int) -> range:
    """Inclusive run of years in the group containing `year`, as a range."""
    return range(year_group_start(year), year_group_end(year) + 1)


def contains(reference: Union[date, YearMonth], granularity: ViewGranularity, d: date) -> bool:
    """
    Whether `d` lies in the period `reference` denotes at `granularity`.

    YEARS compares the year, MONTHS year and month, DAYS the exact date.
    A YearMonth reference stands for its first day at DAYS granularity.
    """
    from .types import ViewGranularity, YearMonth

    if granularity == ViewGranularity.YEARS:
        return reference.year == d.year
    if granularity == ViewGranularity.MONTHS:
        return reference.year == d.year and reference.month == d.month
    if isinstance(reference, YearMonth):
        if not is_representable(reference.year):
            return False
        reference = reference.first_day_of_month()
    return reference == d
