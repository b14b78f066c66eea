# tests/test_constraints.py

import random
from datetime import date, timedelta

import pytest

from datepicker.core.errors import InvalidConstraintError, MinAfterMaxError
from datepicker.core.time import iter_month_days
from datepicker.core.types import Month, Weekday, YearMonth
from datepicker.engines.constraints import DateConstraints, DateConstraintsBuilder


def random_dates(n, lo=1, hi=365 * 5000, seed=42):
    rng = random.Random(seed)
    return [date.fromordinal(rng.randint(lo, hi)) for _ in range(n)]


# --- No constraints ---

def test_no_constraints_nothing_forbidden():
    c = DateConstraints()
    for d in random_dates(10000):
        assert not c.is_day_forbidden(d)


def test_no_constraints_no_month_or_year_forbidden():
    c = DateConstraints()
    random.seed(42)
    for _ in range(500):
        year = random.randint(1, 5000)
        assert not c.is_month_forbidden(YearMonth(year, random.randint(1, 12)))
        assert not c.is_year_forbidden(year)
        assert not c.is_year_group_forbidden(year)


# --- Bounds ---

@pytest.fixture
def pivot():
    return date(2020, 10, 15)


def test_at_min_date_allowed(pivot):
    c = DateConstraintsBuilder(min_date=pivot).build()
    assert not c.is_day_forbidden(pivot)
    assert c.is_day_forbidden(pivot - timedelta(days=1))


def test_at_max_date_allowed(pivot):
    c = DateConstraintsBuilder(max_date=pivot).build()
    assert not c.is_day_forbidden(pivot)
    assert c.is_day_forbidden(pivot + timedelta(days=1))


def test_min_equals_max_single_day(pivot):
    c = DateConstraintsBuilder(min_date=pivot, max_date=pivot).build()
    assert not c.is_day_forbidden(pivot)
    assert c.is_day_forbidden(pivot - timedelta(days=1))
    assert c.is_day_forbidden(pivot + timedelta(days=1))
    assert not c.is_month_forbidden(YearMonth(2020, 10))
    assert c.is_month_forbidden(YearMonth(2020, 11))
    assert not c.is_year_forbidden(2020)
    assert c.is_year_forbidden(2021)


def test_min_after_max_rejected(pivot):
    with pytest.raises(MinAfterMaxError):
        DateConstraintsBuilder(min_date=pivot, max_date=pivot - timedelta(days=1)).build()
    with pytest.raises(MinAfterMaxError):
        DateConstraints(min_date=pivot, max_date=pivot - timedelta(days=1))


# --- Recurring rules ---

def test_disabled_saturday():
    c = DateConstraintsBuilder(disabled_weekdays=["Sat"]).build()
    for d in random_dates(5000):
        assert c.is_day_forbidden(d) == (d.weekday() == Weekday.SATURDAY)
    # a few well-known Saturdays across years and ISO weeks
    for d in (date(1999, 12, 25), date(2000, 1, 1), date(2020, 10, 17), date(2021, 1, 2)):
        assert c.is_day_forbidden(d)


def test_disabled_weekend_month_not_forbidden():
    c = DateConstraintsBuilder(disabled_weekdays=[Weekday.SATURDAY, Weekday.SUNDAY]).build()
    assert not c.is_month_forbidden(YearMonth(2021, 2))


def test_disabled_month():
    c = DateConstraintsBuilder(disabled_months=[Month.JULY, "Aug"]).build()
    assert all(c.is_day_forbidden(d) for d in iter_month_days(2021, 7))
    assert all(c.is_day_forbidden(d) for d in iter_month_days(1850, 8))
    assert not c.is_day_forbidden(date(2021, 6, 30))
    assert c.is_month_forbidden(YearMonth(2021, 7))
    assert not c.is_month_forbidden(YearMonth(2021, 9))
    assert not c.is_year_forbidden(2021)


def test_disabled_year():
    c = DateConstraintsBuilder(disabled_years=[2021]).build()
    assert c.is_day_forbidden(date(2021, 5, 5))
    assert not c.is_day_forbidden(date(2020, 12, 31))
    assert c.is_year_forbidden(2021)
    assert all(c.is_month_forbidden(YearMonth(2021, m)) for m in range(1, 13))
    assert not c.is_year_forbidden(2022)
    assert not c.is_year_group_forbidden(2021)


def test_disabled_monthly_date():
    c = DateConstraintsBuilder(disabled_monthly_dates=[13]).build()
    for m in range(1, 13):
        assert c.is_day_forbidden(date(2020, m, 13))
        assert not c.is_day_forbidden(date(2020, m, 14))
    assert not c.is_month_forbidden(YearMonth(2020, 12))


def test_disabled_yearly_date_ignores_stored_year():
    c = DateConstraintsBuilder(disabled_yearly_dates=[date(1, 12, 25)]).build()
    assert c.disabled_yearly_dates == ((12, 25),)
    for year in (1, 1066, 1999, 2020, 2021, 9999):
        assert c.is_day_forbidden(date(year, 12, 25))
        assert not c.is_day_forbidden(date(year, 12, 24))


def test_disabled_yearly_date_pairs_keep_order():
    c = DateConstraintsBuilder(disabled_yearly_dates=[(12, 26), date(1, 12, 24), (12, 25)]).build()
    assert c.disabled_yearly_dates == ((12, 26), (12, 24), (12, 25))


def test_disabled_yearly_feb_29_only_in_leap_years():
    c = DateConstraintsBuilder(disabled_yearly_dates=[(2, 29)]).build()
    assert c.is_day_forbidden(date(2020, 2, 29))
    assert not c.is_day_forbidden(date(2021, 2, 28))
    assert not c.is_day_forbidden(date(2021, 3, 1))


def test_disabled_unique_date():
    c = DateConstraintsBuilder(disabled_unique_dates=[date(2020, 1, 16)]).build()
    assert c.is_day_forbidden(date(2020, 1, 16))
    assert not c.is_day_forbidden(date(2021, 1, 16))
    assert not c.is_day_forbidden(date(2020, 1, 17))


# --- Aggregates ---

def test_month_forbidden_iff_every_day_forbidden_february():
    # days 1..28 disabled: non-leap February is fully forbidden, leap February keeps the 29th
    c = DateConstraintsBuilder(disabled_monthly_dates=range(1, 29)).build()
    assert c.is_month_forbidden(YearMonth(2021, 2))
    assert not c.is_month_forbidden(YearMonth(2020, 2))
    assert not c.is_day_forbidden(date(2020, 2, 29))

    c = DateConstraintsBuilder(disabled_monthly_dates=range(1, 30)).build()
    assert c.is_month_forbidden(YearMonth(2020, 2))
    assert not c.is_month_forbidden(YearMonth(2020, 3))
    assert not c.is_month_forbidden(YearMonth(2020, 4))

    for ym in (YearMonth(2020, 2), YearMonth(2021, 2), YearMonth(2020, 3)):
        expected = all(c.is_day_forbidden(d) for d in iter_month_days(ym.year, ym.month))
        assert c.is_month_forbidden(ym) == expected


def test_year_forbidden_iff_all_months_forbidden():
    eleven = DateConstraintsBuilder(disabled_months=range(1, 12)).build()
    twelve = DateConstraintsBuilder(disabled_months=range(1, 13)).build()
    for c, expected in ((eleven, False), (twelve, True)):
        for year in (1900, 2020, 2021):
            assert c.is_year_forbidden(year) == expected
            assert c.is_year_forbidden(year) == all(
                c.is_month_forbidden(YearMonth(year, m)) for m in range(1, 13)
            )


def test_year_group_forbidden():
    c = DateConstraintsBuilder(disabled_years=range(1980, 2000)).build()
    assert c.is_year_group_forbidden(1990)
    assert c.is_year_group_forbidden(1980)
    assert not c.is_year_group_forbidden(2000)
    assert not c.is_year_group_forbidden(1979)


def test_year_group_forbidden_by_bound():
    c = DateConstraintsBuilder(max_date=date(1979, 12, 31)).build()
    assert c.is_year_group_forbidden(1980)
    assert not c.is_year_group_forbidden(1979)

    c = DateConstraintsBuilder(min_date=date(2000, 1, 1)).build()
    assert c.is_year_group_forbidden(1999)
    assert not c.is_year_group_forbidden(2000)


def test_unrepresentable_periods_are_forbidden():
    c = DateConstraints()
    assert c.is_year_forbidden(0)
    assert c.is_year_forbidden(10000)
    assert c.is_month_forbidden(YearMonth(0, 12))
    assert c.is_month_forbidden(YearMonth(10000, 1))
    assert c.is_year_group_forbidden(10000)
    # group 0..19 still has selectable years 1..19
    assert not c.is_year_group_forbidden(5)


def test_rules_are_or_combined():
    """Every rule kind contributes independently, whatever the evaluation order."""
    random.seed(7)
    for _ in range(50):
        weekdays = set(random.sample(range(7), random.randint(0, 2)))
        months = set(random.sample(range(1, 13), random.randint(0, 2)))
        years = {random.randint(1990, 2010) for _ in range(random.randint(0, 2))}
        monthly = set(random.sample(range(1, 32), random.randint(0, 3)))
        yearly = [(random.randint(1, 12), random.randint(1, 28)) for _ in range(random.randint(0, 3))]
        unique = {date(2000, 1, 1) + timedelta(days=random.randint(0, 7000)) for _ in range(3)}
        lo = date(1990, 1, 1) + timedelta(days=random.randint(0, 2000))
        hi = lo + timedelta(days=random.randint(0, 5000))

        c = DateConstraintsBuilder(
            min_date=lo, max_date=hi,
            disabled_weekdays=weekdays, disabled_months=months, disabled_years=years,
            disabled_monthly_dates=monthly, disabled_yearly_dates=yearly, disabled_unique_dates=unique,
        ).build()

        for d in random_dates(200, date(1989, 1, 1).toordinal(), date(2012, 12, 31).toordinal()):
            expected = any([
                d < lo,
                d > hi,
                d.weekday() in weekdays,
                d.month in months,
                d.year in years,
                d.day in monthly,
                (d.month, d.day) in yearly,
                d in unique,
            ])
            assert c.is_day_forbidden(d) == expected


# --- Builder input validation ---

@pytest.mark.parametrize("field, value", [
    ("disabled_weekdays", ["Funday"]),
    ("disabled_weekdays", [7]),
    ("disabled_months", [13]),
    ("disabled_months", ["Smarch"]),
    ("disabled_monthly_dates", [0]),
    ("disabled_monthly_dates", [32]),
    ("disabled_yearly_dates", [(2, 30)]),
    ("disabled_yearly_dates", [(13, 1)]),
    ("disabled_unique_dates", ["2020-01-16"]),
    ("disabled_years", ["2021"]),
])
def test_invalid_raw_values_rejected(field, value):
    builder = DateConstraintsBuilder(**{field: value})
    errors = builder.check()
    assert len(errors) == 1
    assert isinstance(errors[0], InvalidConstraintError)
    with pytest.raises(InvalidConstraintError):
        builder.build()


def test_check_reports_every_error():
    builder = DateConstraintsBuilder(
        min_date=date(2020, 10, 15),
        max_date=date(2020, 10, 14),
        disabled_weekdays=["Funday"],
        disabled_monthly_dates=[40],
    )
    errors = builder.check()
    assert [type(e) for e in errors] == [MinAfterMaxError, InvalidConstraintError, InvalidConstraintError]


def test_built_constraints_are_frozen():
    c = DateConstraintsBuilder(disabled_years=[2021]).build()
    assert c.disabled_years == frozenset({2021})
    with pytest.raises(AttributeError):
        c.disabled_years = frozenset()
    assert not c.is_empty()
    assert DateConstraints().is_empty()


def test_generator_input_survives_check_then_build():
    builder = DateConstraintsBuilder(disabled_weekdays=(w for w in ["Sat", "Sun"]))
    assert builder.check() == []
    assert not builder.is_empty()
    c = builder.build()
    assert c.disabled_weekdays == frozenset({Weekday.SATURDAY, Weekday.SUNDAY})


def test_generator_assigned_after_construction():
    builder = DateConstraintsBuilder()
    builder.disabled_years = iter([2021])
    assert builder.check() == []
    assert builder.build().is_year_forbidden(2021)
