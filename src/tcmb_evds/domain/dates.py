# src/tcmb_evds/domain/dates.py
"""
Dates - Calendar Dates and Date Selectors

This module contains the date value objects used by every EVDS series
request:
- CalendarDate: one validated Gregorian day parsed from DD-MM-YYYY text
- DateSelector: a single day or an ordered start/end range
- LEGACY_NOTATION_CUTOFF: the Turkish lira redenomination date

Files that USE this module:
- tcmb_evds.domain.series (legacy notation cutoff checks)
- tcmb_evds.application.request_builder (renders startDate/endDate)
- tcmb_evds.app (parses dates given on the command line)
- tests.test_dates (unit tests)

Files that this module USES:
- tcmb_evds.domain.errors (DateError subclasses)
- tcmb_evds.shared.validators (layout and calendar checks)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import datetime as _dt  # Conversions to and from standard library dates
from dataclasses import dataclass  # Decorator for creating data classes

from tcmb_evds.domain.errors import (
    InvalidCalendarDateError,  # Numeric components do not form a real day
    InvalidDateRangeError,  # Range start after range end
    MalformedDateError,  # Text does not match DD-MM-YYYY
)
from tcmb_evds.shared.validators import is_valid_calendar_date, split_date_text

DATE_TEXT_FORMAT = "DD-MM-YYYY"
RANGE_TEXT_SEPARATOR = ","


@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    A single validated calendar day.

    Field order (year, month, day) makes comparisons chronological.

    Attributes:
        year: Four-digit year
        month: Month number (1-12)
        day: Day of month
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not is_valid_calendar_date(self.day, self.month, self.year):
            raise InvalidCalendarDateError(
                f"{self.day:02d}-{self.month:02d}-{self.year:04d} is not a valid calendar date"
            )

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """
        Parse a date written as DD-MM-YYYY.

        Args:
            text: Date text, e.g. "13-12-2011"

        Returns:
            Validated CalendarDate

        Raises:
            MalformedDateError: If the text does not follow DD-MM-YYYY
            InvalidCalendarDateError: If the components do not form a real date
        """
        parts = split_date_text(text)
        if parts is None:
            raise MalformedDateError(f"Expected {DATE_TEXT_FORMAT}, got {text!r}")
        day, month, year = parts
        return cls(year=year, month=month, day=day)

    @classmethod
    def from_date(cls, value: _dt.date) -> "CalendarDate":
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> _dt.date:
        return _dt.date(self.year, self.month, self.day)

    def to_text(self) -> str:
        """Render as DD-MM-YYYY, the layout EVDS expects."""
        return f"{self.day:02d}-{self.month:02d}-{self.year:04d}"

    def __str__(self) -> str:
        return self.to_text()


# Redenomination of the Turkish lira: six zeros dropped, "YTL" notation begins.
LEGACY_NOTATION_CUTOFF = CalendarDate(year=2005, month=1, day=1)


@dataclass(frozen=True)
class DateSelector:
    """
    Date scope of a request: one day or an inclusive range.

    Use DateSelector.single() or DateSelector.range() to construct.
    A single-day selector has start == end and is_range False.

    Attributes:
        start: First day covered
        end: Last day covered
        is_range: Whether the selector was built as a range
    """
    start: CalendarDate
    end: CalendarDate
    is_range: bool = False

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidDateRangeError(
                f"Range start {self.start} is after range end {self.end}"
            )
        if not self.is_range and self.start != self.end:
            raise InvalidDateRangeError("A single-date selector needs equal start and end")

    @classmethod
    def single(cls, date: CalendarDate) -> "DateSelector":
        return cls(start=date, end=date, is_range=False)

    @classmethod
    def range(cls, start: CalendarDate, end: CalendarDate) -> "DateSelector":
        """
        Build an inclusive date range.

        Args:
            start: First day of the range
            end: Last day of the range (may equal start)

        Returns:
            DateSelector covering start..end

        Raises:
            InvalidDateRangeError: If start is after end
        """
        return cls(start=start, end=end, is_range=True)

    @classmethod
    def parse(cls, text: str) -> "DateSelector":
        """
        Parse "DD-MM-YYYY" or "DD-MM-YYYY, DD-MM-YYYY" into a selector.

        Raises:
            MalformedDateError: If the text holds neither one nor two dates
            InvalidCalendarDateError: If a date is not a real day
            InvalidDateRangeError: If the first date is after the second
        """
        if not isinstance(text, str):
            raise MalformedDateError(f"Expected date text, got {text!r}")
        parts = [part.strip() for part in text.split(RANGE_TEXT_SEPARATOR)]
        if len(parts) == 1:
            return cls.single(CalendarDate.parse(parts[0]))
        if len(parts) == 2:
            return cls.range(CalendarDate.parse(parts[0]), CalendarDate.parse(parts[1]))
        raise MalformedDateError(f"Expected one or two dates, got {text!r}")

    def covers_any_before(self, date: CalendarDate) -> bool:
        return self.start < date

    def lies_entirely_on_or_after(self, date: CalendarDate) -> bool:
        return self.start >= date

    def straddles(self, date: CalendarDate) -> bool:
        """True if some covered days fall before `date` and some on or after it."""
        return self.start < date <= self.end

    def __str__(self) -> str:
        if self.is_range:
            return f"{self.start}{RANGE_TEXT_SEPARATOR} {self.end}"
        return str(self.start)
