from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Union

from .time import (
    first_day_of_month,
    year_group_end,
    year_group_start,
)


class ViewGranularity(IntEnum):
    """Granularity of the dialog, ordered by specificity (YEARS < MONTHS < DAYS)."""
    YEARS = 1
    MONTHS = 2
    DAYS = 3

    @classmethod
    def parse(cls, value: Union[str, int, "ViewGranularity"]) -> "ViewGranularity":
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown view granularity '{value}'. Available: {[g.name.lower() for g in cls]}") from None
        return cls(value)


class Weekday(IntEnum):
    # same numbering as date.weekday()
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name[:3].title()

    @classmethod
    def parse(cls, value: Union[str, int, "Weekday"]) -> "Weekday":
        """Accept a Weekday, its number (Mon=0) or a label such as 'Sat' / 'saturday'."""
        if isinstance(value, str):
            key = value.strip().lower()
            for wd in cls:
                if key in (wd.name.lower(), wd.label.lower()):
                    return wd
            raise ValueError(f"Unknown weekday '{value}'")
        return cls(value)


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def label(self) -> str:
        return self.name[:3].title()

    @classmethod
    def parse(cls, value: Union[str, int, "Month"]) -> "Month":
        if isinstance(value, str):
            key = value.strip().lower()
            if key.isdigit():
                return cls(int(key))
            for m in cls:
                if key in (m.name.lower(), m.label.lower()):
                    return m
            raise ValueError(f"Unknown month '{value}'")
        return cls(value)


@dataclass(frozen=True, order=True)
class YearMonth:
    """
    A viewed period coarser than a day.

    The year is an unbounded int so that navigation can step past the range
    of datetime.date; such periods are simply never selectable.
    """
    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12; got {self.month}")

    @classmethod
    def from_date(cls, d: date) -> "YearMonth":
        return cls(d.year, d.month)

    def previous_month(self) -> "YearMonth":
        if self.month == 1:
            return YearMonth(self.year - 1, 12)
        return YearMonth(self.year, self.month - 1)

    def next_month(self) -> "YearMonth":
        if self.month == 12:
            return YearMonth(self.year + 1, 1)
        return YearMonth(self.year, self.month + 1)

    def previous_year(self) -> "YearMonth":
        return YearMonth(self.year - 1, self.month)

    def next_year(self) -> "YearMonth":
        return YearMonth(self.year + 1, self.month)

    def previous_year_group(self) -> "YearMonth":
        return YearMonth(year_group_start(self.year) - 1, self.month)

    def next_year_group(self) -> "YearMonth":
        return YearMonth(year_group_end(self.year) + 1, self.month)

    def first_day_of_month(self) -> date:
        return first_day_of_month(self.year, self.month)

    def contains(self, d: date) -> bool:
        return self.year == d.year and self.month == d.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
