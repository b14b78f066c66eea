"""
datepicker.engines.config
-------------------------
PickerConfig is built once, validated at construction, and read-only
afterwards. PickerConfigBuilder is the mutable staging side of the two-phase
construction: collect raw fields, check every invariant in one pass, then
freeze.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from datepicker.core.engine import ConstraintProvider
from datepicker.core.errors import (
    ConfigError,
    ConflictingConstraintsError,
    InitialDateForbiddenError,
    InitialViewFinerThanSelectionError,
)
from datepicker.core.types import Month, ViewGranularity, Weekday, YearMonth
from datepicker.engines.constraints import DateConstraints, DateConstraintsBuilder, MonthDay, materialize_rules
from datepicker.engines.navigation import DEFAULT_MONTH_TITLE_FORMAT

logger = logging.getLogger(__name__)

GranularityLike = Union[ViewGranularity, str, int]


def _view_errors(initial_view_type: ViewGranularity, selection_type: ViewGranularity) -> List[ConfigError]:
    if initial_view_type > selection_type:
        return [InitialViewFinerThanSelectionError(
            f"initial_view_type {initial_view_type.name} can have at most "
            f"selection_type {selection_type.name} scale"
        )]
    return []


def _initial_date_errors(constraints: ConstraintProvider, initial_date: Optional[date]) -> List[ConfigError]:
    if initial_date is not None and constraints.is_day_forbidden(initial_date):
        return [InitialDateForbiddenError(
            f"The initial_date {initial_date.isoformat()} is forbidden by the date_constraints."
        )]
    return []


@dataclass(frozen=True)
class PickerConfig:
    """Configuration of the picker; pass it in at init and never modify it."""
    # possible constraints preventing the user from selecting some dates
    date_constraints: ConstraintProvider = field(default_factory=DateConstraints)
    # initializes the picker to this value
    initial_date: Optional[date] = None
    initial_view_type: ViewGranularity = ViewGranularity.DAYS
    # coarsest unit a selection is made in, e.g. only a year or only a month
    selection_type: ViewGranularity = ViewGranularity.DAYS
    # whether the dialog opens immediately after initialization
    initially_opened: bool = False
    # strftime pattern of the DAYS view title
    month_title_format: str = DEFAULT_MONTH_TITLE_FORMAT

    def __post_init__(self) -> None:
        errors = _view_errors(self.initial_view_type, self.selection_type)
        errors += _initial_date_errors(self.date_constraints, self.initial_date)
        if errors:
            raise errors[0]

    def is_day_forbidden(self, d: date) -> bool:
        return self.date_constraints.is_day_forbidden(d)

    def is_month_forbidden(self, ym: YearMonth) -> bool:
        return self.date_constraints.is_month_forbidden(ym)

    def is_year_forbidden(self, year: int) -> bool:
        return self.date_constraints.is_year_forbidden(year)

    def is_year_group_forbidden(self, year: int) -> bool:
        return self.date_constraints.is_year_group_forbidden(year)

    def guess_initial_period(self, today: Callable[[], date] = date.today) -> YearMonth:
        """YearMonth of initial_date, else of the (injected) current date."""
        if self.initial_date is not None:
            return YearMonth.from_date(self.initial_date)
        return YearMonth.from_date(today())


_CONSTRAINT_FIELDS = tuple(f.name for f in fields(DateConstraintsBuilder))


@dataclass
class PickerConfigBuilder:
    """
    Staging area for PickerConfig.

    Constraints are given either as a ready provider (`date_constraints`) or
    as the raw fields of DateConstraintsBuilder, not both.
    """
    date_constraints: Optional[ConstraintProvider] = None
    initial_date: Optional[date] = None
    initial_view_type: GranularityLike = ViewGranularity.DAYS
    selection_type: GranularityLike = ViewGranularity.DAYS
    initially_opened: bool = False
    month_title_format: str = DEFAULT_MONTH_TITLE_FORMAT

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

    def constraints_builder(self) -> DateConstraintsBuilder:
        materialize_rules(self)
        return DateConstraintsBuilder(**{name: getattr(self, name) for name in _CONSTRAINT_FIELDS})

    def _collect(self) -> Tuple[Dict[str, Any], List[ConfigError]]:
        errors: List[ConfigError] = []
        values: Dict[str, Any] = {
            "initial_date": self.initial_date,
            "initially_opened": bool(self.initially_opened),
            "month_title_format": self.month_title_format,
        }

        for name in ("initial_view_type", "selection_type"):
            try:
                values[name] = ViewGranularity.parse(getattr(self, name))
            except ValueError as e:
                errors.append(ConfigError(f"Invalid {name}: {e}"))

        staged = self.constraints_builder()
        if self.date_constraints is not None:
            if not staged.is_empty():
                errors.append(ConflictingConstraintsError(
                    "Give either date_constraints or raw constraint fields, not both."
                ))
            constraints: Optional[ConstraintProvider] = self.date_constraints
        else:
            constraint_values, constraint_errors = staged._collect()
            errors.extend(constraint_errors)
            constraints = None if constraint_errors else DateConstraints(**constraint_values)

        if "initial_view_type" in values and "selection_type" in values:
            errors.extend(_view_errors(values["initial_view_type"], values["selection_type"]))
        if constraints is not None:
            values["date_constraints"] = constraints
            errors.extend(_initial_date_errors(constraints, self.initial_date))
        return values, errors

    def check(self) -> List[ConfigError]:
        """Every broken invariant found in a single pass; empty when build() would succeed."""
        return self._collect()[1]

    def build(self) -> PickerConfig:
        values, errors = self._collect()
        if errors:
            logger.debug("Rejected picker config: %s", "; ".join(str(e) for e in errors))
            raise errors[0]
        config = PickerConfig(**values)
        logger.debug("Built %r", config)
        return config


def make_config(**kwargs: Any) -> PickerConfig:
    """Build a PickerConfig in one call; keywords are the PickerConfigBuilder fields."""
    return PickerConfigBuilder(**kwargs).build()
