"""
datepicker.engines.state
------------------------
The picker state machine as a pure reducer. The UI layer owns a PickerState,
feeds it one intent at a time through update(), renders the returned state and
forwards the returned notifications.

States are {YEARS, MONTHS, DAYS} x {dialog open, closed}. Selecting a unit at
selection_type selects its first selectable day and closes the dialog; selecting a
coarser unit narrows the view one level. Title clicks widen one level, up to
YEARS.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Optional, Tuple, Union

from datepicker.core.time import iter_month_days
from datepicker.core.types import ViewGranularity, YearMonth
from datepicker.engines.config import PickerConfig
from datepicker.engines.navigation import larger_granularity, smaller_granularity, step_next, step_previous

logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# Intents dispatched by the UI
# ---------------------------------------------------------

@dataclass(frozen=True)
class DateSelected:
    date: date

@dataclass(frozen=True)
class PeriodSelected:
    """A year (month=None) or a month of a year was picked."""
    year: int
    month: Optional[int] = None

    @property
    def granularity(self) -> ViewGranularity:
        return ViewGranularity.YEARS if self.month is None else ViewGranularity.MONTHS

@dataclass(frozen=True)
class OpenDialog:
    # optional (left, top) anchor of the dialog
    position: Optional[Tuple[str, str]] = None

@dataclass(frozen=True)
class CloseDialog:
    pass

@dataclass(frozen=True)
class StepPrevious:
    pass

@dataclass(frozen=True)
class StepNext:
    pass

@dataclass(frozen=True)
class TitleClicked:
    pass

Intent = Union[DateSelected, PeriodSelected, OpenDialog, CloseDialog, StepPrevious, StepNext, TitleClicked]


@dataclass(frozen=True)
class SelectionChanged:
    """Notification: the selected date changed."""
    date: date


@dataclass(frozen=True)
class PickerState:
    viewed: YearMonth
    view_type: ViewGranularity
    selected_date: Optional[date] = None
    dialog_opened: bool = False
    dialog_position: Optional[Tuple[str, str]] = None


def initial_state(config: PickerConfig, today: Callable[[], date] = date.today) -> PickerState:
    return PickerState(
        viewed=config.guess_initial_period(today),
        view_type=config.initial_view_type,
        selected_date=config.initial_date,
        dialog_opened=config.initially_opened,
    )


def _select(state: PickerState, d: date) -> Tuple[PickerState, Tuple[SelectionChanged, ...]]:
    logger.debug("Selected %s", d)
    new = replace(state, selected_date=d, viewed=YearMonth.from_date(d), dialog_opened=False)
    return new, (SelectionChanged(d),)


def _period_forbidden(config: PickerConfig, intent: PeriodSelected) -> bool:
    if intent.month is None:
        return config.is_year_forbidden(intent.year)
    return config.is_month_forbidden(YearMonth(intent.year, intent.month))


def _first_selectable_day(config: PickerConfig, intent: PeriodSelected) -> Optional[date]:
    months = range(1, 13) if intent.month is None else (intent.month,)
    for m in months:
        for d in iter_month_days(intent.year, m):
            if not config.is_day_forbidden(d):
                return d
    return None


def update(
    state: PickerState, intent: Intent, config: PickerConfig
) -> Tuple[PickerState, Tuple[SelectionChanged, ...]]:
    """Apply one intent; returns the next state and any notifications to forward."""
    if isinstance(intent, DateSelected):
        if config.is_day_forbidden(intent.date):
            logger.debug("Ignoring selection of forbidden day %s", intent.date)
            return state, ()
        return _select(state, intent.date)

    if isinstance(intent, PeriodSelected):
        if _period_forbidden(config, intent):
            logger.debug("Ignoring selection of forbidden period %r", intent)
            return state, ()
        viewed = YearMonth(intent.year, intent.month or 1)
        if intent.granularity >= config.selection_type:
            # the period stands for its first selectable day
            d = _first_selectable_day(config, intent)
            if d is None:
                return state, ()
            return _select(state, d)
        return replace(state, viewed=viewed, view_type=smaller_granularity(intent.granularity)), ()

    if isinstance(intent, OpenDialog):
        position = intent.position if intent.position is not None else state.dialog_position
        return replace(state, dialog_opened=True, dialog_position=position), ()

    if isinstance(intent, CloseDialog):
        return replace(state, dialog_opened=False), ()

    if isinstance(intent, StepPrevious):
        return replace(state, viewed=step_previous(state.view_type, state.viewed)), ()

    if isinstance(intent, StepNext):
        return replace(state, viewed=step_next(state.view_type, state.viewed)), ()

    if isinstance(intent, TitleClicked):
        wider = larger_granularity(state.view_type)
        if wider is None:
            return state, ()
        return replace(state, view_type=wider), ()

    raise TypeError(f"Unknown intent: {intent!r}")
