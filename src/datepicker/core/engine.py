from __future__ import annotations
from datetime import date
from typing import Protocol, runtime_checkable

from .types import YearMonth

@runtime_checkable
class ConstraintProvider(Protocol):
    """
    Answers whether a day, month, year or year group can be selected.

    Month, year and year-group answers are universal aggregates over the day
    predicate: a period is forbidden iff every day in it is forbidden.
    """
    def is_day_forbidden(self, d: date) -> bool: ...
    def is_month_forbidden(self, ym: YearMonth) -> bool: ...
    def is_year_forbidden(self, year: int) -> bool: ...
    def is_year_group_forbidden(self, year: int) -> bool: ...
