"""Nutrient aggregation over logged entries."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from recomp_tracker.domain.foods import FoodDefinition
from recomp_tracker.domain.logs import DailyTotals, LogEntry
from recomp_tracker.services.targets import round_half_up
from recomp_tracker.services.units import UnitConverter

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AggregateResult:
    """Unrounded totals plus the food names that could not be resolved."""

    totals: DailyTotals
    missing_foods: list[str] = field(default_factory=list)


@dataclass
class NutrientAggregator:
    """Sums per-entry nutrients into daily totals."""

    converter: UnitConverter

    def entry_nutrients(
        self, food: FoodDefinition | None, stored_quantity: float
    ) -> DailyTotals:
        """Nutrients for a single entry; unknown foods contribute nothing."""
        if food is None:
            _logger.warning(
                "Entry with quantity %s has no food definition; it counts as zero",
                stored_quantity,
            )
            return DailyTotals()
        return self.converter.nutrients(food, stored_quantity)

    def aggregate(
        self, entries: Iterable[tuple[FoodDefinition | None, float]]
    ) -> DailyTotals:
        """Sum nutrients over ``(food, stored_quantity)`` pairs without rounding."""
        total = DailyTotals()
        for food, stored_quantity in entries:
            total = total + self.entry_nutrients(food, stored_quantity)
        return total

    def aggregate_log(
        self, entries: Iterable[LogEntry], foods: Mapping[str, FoodDefinition]
    ) -> AggregateResult:
        """Resolve entry food names against ``foods`` and sum them."""
        pairs: list[tuple[FoodDefinition | None, float]] = []
        missing: list[str] = []
        for entry in entries:
            food = foods.get(entry.food_name)
            if food is None:
                _logger.warning(
                    "Food %r not found in catalog; entry %s counts as zero",
                    entry.food_name,
                    entry.id,
                )
                missing.append(entry.food_name)
                continue
            pairs.append((food, entry.quantity))
        return AggregateResult(totals=self.aggregate(pairs), missing_foods=missing)


def round_totals(totals: DailyTotals) -> DailyTotals:
    """Round totals to whole numbers for caching and display."""
    return DailyTotals(
        calories=round_half_up(totals.calories),
        protein_g=round_half_up(totals.protein_g),
        carbs_g=round_half_up(totals.carbs_g),
        fats_g=round_half_up(totals.fats_g),
    )
