"""Domain models for compliance progress."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class DayStatus(StrEnum):
    """Classification of a day's intake against the target window."""

    COMPLIANT = "compliant"
    NON_COMPLIANT = "non_compliant"
    NO_DATA = "no_data"


@dataclass(frozen=True)
class DayProgress:
    """Status of a single calendar day."""

    day: date
    status: DayStatus
    calories: float | None


@dataclass(frozen=True)
class MonthProgress:
    """Day statuses for a month with per-status counts."""

    year: int
    month: int
    lower_bound: float
    upper_bound: float
    days: list[DayProgress]
    compliant_days: int
    non_compliant_days: int
    no_data_days: int
