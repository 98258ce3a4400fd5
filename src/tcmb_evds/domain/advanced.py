# src/tcmb_evds/domain/advanced.py
"""
Advanced Query Options - Frequency, Aggregation and Formula Selectors

EVDS can resample and transform a series before returning it. This module
holds the three closed enumerations that drive it plus the mode selector of
the data group listing operation.

Each option is validated on its own; combinations are left to the remote
service, which reports unsupported ones as an HTTP error.

Files that USE this module:
- tcmb_evds.application.request_builder (renders frequency/aggregationTypes/formulas)
- tcmb_evds.application.evds_service (advanced operations)
- tcmb_evds.app (parses options from the command line)
- tests.test_advanced (unit tests)

Files that this module USES:
- tcmb_evds.domain.errors (UnsupportedValueError, EmptyRawSeriesError)
- tcmb_evds.domain.series (DataGroupCode)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Closed enumerations with wire codes
from typing import Optional, Type, TypeVar, Union  # Type hints

from tcmb_evds.domain.errors import EmptyRawSeriesError, UnsupportedValueError
from tcmb_evds.domain.series import DataGroupCode


class DataFrequency(Enum):
    DAILY = "1"
    BUSINESS = "2"
    WEEKLY = "3"
    SEMI_MONTHLY = "4"
    MONTHLY = "5"
    QUARTERLY = "6"
    SEMI_ANNUAL = "7"
    ANNUAL = "8"


class AggregationType(Enum):
    AVERAGE = "avg"
    MIN = "min"
    MAX = "max"
    FIRST = "first"
    LAST = "last"
    SUM = "sum"


class Formula(Enum):
    LEVEL = "0"
    PERCENTAGE_CHANGE = "1"
    DIFFERENCE = "2"
    YEAR_TO_YEAR_PERCENTAGE_CHANGE = "3"
    YEAR_TO_YEAR_DIFFERENCE = "4"
    PERCENTAGE_CHANGE_FROM_END_OF_PREVIOUS_YEAR = "5"
    DIFFERENCE_FROM_END_OF_PREVIOUS_YEAR = "6"
    MOVING_AVERAGE = "7"
    MOVING_SUM = "8"


class DataGroupMode(Enum):
    """Scope of the data group listing (datagroups/ endpoint)."""
    ALL = "0"
    CATEGORY = "1"
    DATA_GROUP = "2"


E = TypeVar("E", bound=Enum)


def parse_option(enum_cls: Type[E], value: Union[E, str, int], field: str) -> E:
    """
    Resolve an option from a member, its name, or its wire code.

    Args:
        enum_cls: Enumeration to resolve against
        value: Member, member name (any case), or wire code ("5", 5, "avg")
        field: Option name reported on failure

    Returns:
        The matching enum member

    Raises:
        UnsupportedValueError: If value is not part of the enumeration
    """
    if isinstance(value, enum_cls):
        return value
    # bool is an int subclass; True must not resolve to code "1"
    text = None
    if isinstance(value, int) and not isinstance(value, bool):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    if text is not None:
        for member in enum_cls:
            if member.value == text.lower() or member.name == text.upper():
                return member
    raise UnsupportedValueError(field, value)


@dataclass(frozen=True)
class AdvancedQueryOptions:
    """
    Frequency formulas applied to a series by the remote service.

    Attributes:
        frequency: Resampling frequency
        aggregation: Aggregation used when resampling
        formula: Transformation applied to the resampled values
    """
    frequency: DataFrequency
    aggregation: AggregationType = AggregationType.AVERAGE
    formula: Formula = Formula.LEVEL

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequency", parse_option(DataFrequency, self.frequency, "frequency"))
        object.__setattr__(self, "aggregation", parse_option(AggregationType, self.aggregation, "aggregation"))
        object.__setattr__(self, "formula", parse_option(Formula, self.formula, "formula"))


@dataclass(frozen=True)
class DataGroupListing:
    """
    Scope of a data group listing request.

    Attributes:
        mode: ALL, CATEGORY (code is a category id) or DATA_GROUP
        code: Category id or data group code; required unless mode is ALL,
            dropped when it is
    """
    mode: DataGroupMode = DataGroupMode.ALL
    code: Optional[DataGroupCode] = None

    def __post_init__(self) -> None:
        mode = parse_option(DataGroupMode, self.mode, "mode")
        object.__setattr__(self, "mode", mode)
        if mode is DataGroupMode.ALL:
            object.__setattr__(self, "code", None)
            return
        if self.code is None:
            raise EmptyRawSeriesError(f"Data group listing mode {mode.name} needs a code")
        if not isinstance(self.code, DataGroupCode):
            object.__setattr__(self, "code", DataGroupCode(self.code))
