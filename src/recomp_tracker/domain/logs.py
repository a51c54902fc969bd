"""Domain models for daily food logs."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from recomp_tracker.domain.foods import FoodUnit


@dataclass(frozen=True)
class LogEntry:
    """A food logged on a day; ``quantity`` is in the food's storage basis."""

    id: UUID
    user_id: UUID
    day: date
    food_name: str
    quantity: float


@dataclass(frozen=True)
class DailyTotals:
    """Nutrition totals for one user-day."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fats_g: float = 0.0

    def __add__(self, other: "DailyTotals") -> "DailyTotals":
        return DailyTotals(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fats_g=self.fats_g + other.fats_g,
        )


@dataclass(frozen=True)
class DailyTotalsRow:
    """Cached totals for a day, as listed for calendar views."""

    day: date
    totals: DailyTotals | None


@dataclass(frozen=True)
class EntryView:
    """A stored quantity translated back into the unit the user logged."""

    display_units: float
    unit: FoodUnit
    nutrients: DailyTotals


@dataclass(frozen=True)
class DescribedEntry:
    """Log entry paired with its display view."""

    entry: LogEntry
    view: EntryView
    food_found: bool = True


@dataclass(frozen=True)
class DailyLog:
    """A day's entries with their rounded totals."""

    day: date
    entries: list[DescribedEntry]
    totals: DailyTotals
    missing_foods: list[str] = field(default_factory=list)
