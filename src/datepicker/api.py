from __future__ import annotations

from datetime import date
from typing import Callable, Union

from .core.engine import ConstraintProvider
from .core.types import YearMonth
from .engines.config import PickerConfig


# ============================================================
# Read-only query surface for the rendering layer
# ============================================================

def is_day_forbidden(config: ConstraintProvider, d: date) -> bool:
    return config.is_day_forbidden(d)

def is_month_forbidden(config: ConstraintProvider, ym: Union[YearMonth, date]) -> bool:
    if isinstance(ym, date):
        ym = YearMonth.from_date(ym)
    return config.is_month_forbidden(ym)

def is_year_forbidden(config: ConstraintProvider, year: int) -> bool:
    return config.is_year_forbidden(year)

def is_year_group_forbidden(config: ConstraintProvider, year: int) -> bool:
    return config.is_year_group_forbidden(year)

def guess_initial_period(config: PickerConfig, *, today: Callable[[], date] = date.today) -> YearMonth:
    return config.guess_initial_period(today)

