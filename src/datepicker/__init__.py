"""datepicker public API.

Decision engine of a calendar date picker: which days, months, years and year
groups may be selected, and how the dialog navigates between them. Keep this
surface small: users should mostly interact with names re-exported here.
"""

from .api import (
    is_day_forbidden,
    is_month_forbidden,
    is_year_forbidden,
    is_year_group_forbidden,
    guess_initial_period,
)
from .core.engine import ConstraintProvider
from .core.errors import (
    DatePickerError,
    ConfigError,
    MinAfterMaxError,
    InitialViewFinerThanSelectionError,
    InitialDateForbiddenError,
    InvalidConstraintError,
    ConflictingConstraintsError,
)
from .core.time import (
    YEARS_IN_YEAR_GROUP,
    contains,
    days_in_month,
    year_group_start,
    year_group_end,
    year_group_range,
)
from .core.types import Month, ViewGranularity, Weekday, YearMonth
from .engines.constraints import DateConstraints, DateConstraintsBuilder
from .engines.config import PickerConfig, PickerConfigBuilder, make_config
from .engines.navigation import (
    larger_granularity,
    smaller_granularity,
    should_show_previous,
    should_show_next,
    step_previous,
    step_next,
    title_for,
)
from .engines.state import (
    PickerState,
    initial_state,
    update,
    DateSelected,
    PeriodSelected,
    OpenDialog,
    CloseDialog,
    StepPrevious,
    StepNext,
    TitleClicked,
    SelectionChanged,
)

__all__ = [
    "is_day_forbidden",
    "is_month_forbidden",
    "is_year_forbidden",
    "is_year_group_forbidden",
    "guess_initial_period",
    "ConstraintProvider",
    "DatePickerError",
    "ConfigError",
    "MinAfterMaxError",
    "InitialViewFinerThanSelectionError",
    "InitialDateForbiddenError",
    "InvalidConstraintError",
    "ConflictingConstraintsError",
    "YEARS_IN_YEAR_GROUP",
    "contains",
    "days_in_month",
    "year_group_start",
    "year_group_end",
    "year_group_range",
    "Month",
    "ViewGranularity",
    "Weekday",
    "YearMonth",
    "DateConstraints",
    "DateConstraintsBuilder",
    "PickerConfig",
    "PickerConfigBuilder",
    "make_config",
    "larger_granularity",
    "smaller_granularity",
    "should_show_previous",
    "should_show_next",
    "step_previous",
    "step_next",
    "title_for",
    "PickerState",
    "initial_state",
    "update",
    "DateSelected",
    "PeriodSelected",
    "OpenDialog",
    "CloseDialog",
    "StepPrevious",
    "StepNext",
    "TitleClicked",
    "SelectionChanged",
]
