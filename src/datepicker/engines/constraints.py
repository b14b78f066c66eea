"""
datepicker.engines.constraints
------------------------------
The constraint evaluation engine. A day is forbidden iff any of the
independent rules matches; months, years and year groups are forbidden iff
every day they contain is forbidden.

Periods outside the range of datetime.date (years < 1 or > 9999) hold no
selectable day and are reported as forbidden, which keeps the aggregate
predicates total over int years.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from datetime import date
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple, TypeVar, Union

from datepicker.core.errors import ConfigError, InvalidConstraintError, MinAfterMaxError
from datepicker.core.time import is_representable, iter_month_days, year_group_range
from datepicker.core.types import Month, Weekday, YearMonth

logger = logging.getLogger(__name__)

MonthDay = Tuple[int, int]
T = TypeVar("T")


def _min_after_max(min_date: Optional[date], max_date: Optional[date]) -> Optional[MinAfterMaxError]:
    if min_date is not None and max_date is not None and min_date > max_date:
        return MinAfterMaxError(
            f"min_date {min_date.isoformat()} must be earlier or exactly at max_date {max_date.isoformat()}"
        )
    return None


@dataclass(frozen=True)
class DateConstraints:
    """Immutable set of constraint rules; the canonical ConstraintProvider."""
    # inclusive bounds
    min_date: Optional[date] = None
    max_date: Optional[date] = None
    # recurring rules
    disabled_weekdays: FrozenSet[Weekday] = frozenset()
    disabled_months: FrozenSet[Month] = frozenset()
    disabled_years: FrozenSet[int] = frozenset()
    disabled_monthly_dates: FrozenSet[int] = frozenset()
    # (month, day) pairs, matched in every year
    disabled_yearly_dates: Tuple[MonthDay, ...] = ()
    # one-off dates
    disabled_unique_dates: FrozenSet[date] = frozenset()

    def __post_init__(self) -> None:
        err = _min_after_max(self.min_date, self.max_date)
        if err is not None:
            raise err

    def is_day_forbidden(self, d: date) -> bool:
        return (
            (self.min_date is not None and d < self.min_date)
            or (self.max_date is not None and d > self.max_date)
            or d.weekday() in self.disabled_weekdays
            or d.month in self.disabled_months
            or d.year in self.disabled_years
            or d in self.disabled_unique_dates
            or d.day in self.disabled_monthly_dates
            or any(m == d.month and day == d.day for m, day in self.disabled_yearly_dates)
        )

    def is_month_forbidden(self, ym: YearMonth) -> bool:
        if not is_representable(ym.year):
            return True
        return all(self.is_day_forbidden(d) for d in iter_month_days(ym.year, ym.month))

    def is_year_forbidden(self, year: int) -> bool:
        return all(self.is_month_forbidden(YearMonth(year, m)) for m in range(1, 13))

    def is_year_group_forbidden(self, year: int) -> bool:
        return all(self.is_year_forbidden(y) for y in year_group_range(year))

    def is_empty(self) -> bool:
        return all(not getattr(self, f.name) for f in fields(self))


# ============================================================
# Staging builder
# ============================================================

def _parse_each(parse: Callable[[Any], T], values: Iterable[Any], what: str, errors: List[ConfigError]) -> List[T]:
    out: List[T] = []
    for v in values:
        try:
            out.append(parse(v))
        except (TypeError, ValueError) as e:
            errors.append(InvalidConstraintError(f"Invalid {what} {v!r}: {e}"))
    return out


def _parse_day_of_month(v: Any) -> int:
    day = int(v)
    if not 1 <= day <= 31:
        raise ValueError("day of month must be in 1..31")
    return day


def _parse_year(v: Any) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError("year must be an int")
    return v


def _parse_month_day(v: Any) -> MonthDay:
    if isinstance(v, date):
        return (v.month, v.day)
    month, day = v
    # 2000 is a leap year, so Feb 29 is accepted
    date(2000, int(month), int(day))
    return (int(month), int(day))


def _parse_unique_date(v: Any) -> date:
    if not isinstance(v, date):
        raise TypeError("unique dates must be datetime.date values")
    return v


RULE_FIELDS = (
    "disabled_weekdays",
    "disabled_months",
    "disabled_years",
    "disabled_monthly_dates",
    "disabled_yearly_dates",
    "disabled_unique_dates",
)


def materialize_rules(staging: Any) -> None:
    """Replace one-shot iterables in the rule fields of `staging` with tuples, in place."""
    for name in RULE_FIELDS:
        value = getattr(staging, name)
        if not isinstance(value, tuple):
            setattr(staging, name, tuple(value))


@dataclass
class DateConstraintsBuilder:
    """
    Mutable staging area for DateConstraints.

    Fields take loose input (weekday labels, month numbers, full dates for the
    yearly rule whose year is ignored); check() validates everything in one
    pass and build() freezes the result.
    """
    min_date: Optional[date] = None
    max_date: Optional[date] = None
    disabled_weekdays: Iterable[Union[Weekday, int, str]] = ()
    disabled_months: Iterable[Union[Month, int, str]] = ()
    disabled_years: Iterable[int] = ()
    disabled_monthly_dates: Iterable[int] = ()
    disabled_yearly_dates: Iterable[Union[date, MonthDay]] = ()
    disabled_unique_dates: Iterable[date] = ()

    def __post_init__(self) -> None:
        materialize_rules(self)

    def _collect(self) -> Tuple[Dict[str, Any], List[ConfigError]]:
        materialize_rules(self)
        errors: List[ConfigError] = []
        err = _min_after_max(self.min_date, self.max_date)
        if err is not None:
            errors.append(err)

        values: Dict[str, Any] = {
            "min_date": self.min_date,
            "max_date": self.max_date,
            "disabled_weekdays": frozenset(_parse_each(Weekday.parse, self.disabled_weekdays, "weekday", errors)),
            "disabled_months": frozenset(_parse_each(Month.parse, self.disabled_months, "month", errors)),
            "disabled_years": frozenset(_parse_each(_parse_year, self.disabled_years, "year", errors)),
            "disabled_monthly_dates": frozenset(
                _parse_each(_parse_day_of_month, self.disabled_monthly_dates, "day of month", errors)
            ),
            "disabled_yearly_dates": tuple(
                _parse_each(_parse_month_day, self.disabled_yearly_dates, "yearly date", errors)
            ),
            "disabled_unique_dates": frozenset(
                _parse_each(_parse_unique_date, self.disabled_unique_dates, "unique date", errors)
            ),
        }
        return values, errors

    def is_empty(self) -> bool:
        materialize_rules(self)
        return all(not getattr(self, f.name) for f in fields(self))

    def check(self) -> List[ConfigError]:
        """All broken invariants, in field order; empty when build() would succeed."""
        return self._collect()[1]

    def build(self) -> DateConstraints:
        values, errors = self._collect()
        if errors:
            logger.debug("Rejected date constraints: %s", "; ".join(str(e) for e in errors))
            raise errors[0]
        constraints = DateConstraints(**values)
        logger.debug("Built %r", constraints)
        return constraints
