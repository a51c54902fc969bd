"""Unit conversion between entered quantities and stored quantities."""

import logging
from dataclasses import dataclass

from recomp_tracker.domain.foods import (
    FoodDefinition,
    FoodUnit,
    GramBasis,
    NutrientRates,
    OilBasis,
    PieceBasis,
    StorageBasis,
    UnitSizeBasis,
)
from recomp_tracker.domain.logs import DailyTotals, EntryView

TEASPOON_GRAMS = 5.0
TABLESPOON_GRAMS = 15.0

_logger = logging.getLogger(__name__)


@dataclass
class UnitConverter:
    """Converts logged quantities to grams or piece counts and back."""

    oil_food_name: str = "Oil"

    def resolve_basis(
        self, food: FoodDefinition, entered_unit: FoodUnit | None = None
    ) -> StorageBasis:
        """Decide how a food's stored quantity is measured.

        Rules are checked in order; the gram basis is the fallback.
        """
        if food.name == self.oil_food_name:
            if entered_unit == FoodUnit.TABLESPOON:
                return OilBasis(FoodUnit.TABLESPOON)
            return OilBasis(FoodUnit.TEASPOON)
        if food.unit == FoodUnit.PIECE and food.per_piece and not food.unit_size:
            return PieceBasis(food.unit)
        if food.unit_size and food.unit != FoodUnit.GRAM:
            return UnitSizeBasis(food.unit, food.unit_size)
        if food.unit != FoodUnit.GRAM:
            _logger.warning(
                "Food %r uses unit %s without a unit size or per-piece values; "
                "treating quantity as grams",
                food.name,
                food.unit,
            )
            return GramBasis(malformed=True)
        return GramBasis()

    def accepts_unit(
        self, food: FoodDefinition, entered_unit: FoodUnit | None
    ) -> bool:
        """Whether a quantity for ``food`` may be entered in ``entered_unit``.

        Oil takes either spoon; every other food only its own unit.
        """
        if entered_unit is None or entered_unit == food.unit:
            return True
        return food.name == self.oil_food_name and entered_unit in (
            FoodUnit.TEASPOON,
            FoodUnit.TABLESPOON,
        )

    def to_stored_quantity(
        self,
        food: FoodDefinition,
        entered_quantity: float,
        entered_unit: FoodUnit | None = None,
    ) -> float:
        """Convert what the user entered into the quantity to store."""
        basis = self.resolve_basis(food, entered_unit)
        match basis:
            case OilBasis(unit=unit):
                return entered_quantity * _oil_unit_grams(unit)
            case UnitSizeBasis(unit_size=unit_size):
                return entered_quantity * unit_size
            case _:
                return entered_quantity

    def describe(self, food: FoodDefinition, stored_quantity: float) -> EntryView:
        """Translate a stored quantity back into display units and nutrients."""
        basis = self.resolve_basis(food)
        if isinstance(basis, OilBasis):
            basis = OilBasis(infer_oil_unit(stored_quantity))
        return EntryView(
            display_units=display_units(basis, stored_quantity),
            unit=_display_unit(basis),
            nutrients=basis_nutrients(basis, food, stored_quantity),
        )

    def nutrients(self, food: FoodDefinition, stored_quantity: float) -> DailyTotals:
        """Return nutrients for a stored quantity of a food."""
        return basis_nutrients(self.resolve_basis(food), food, stored_quantity)


def infer_oil_unit(stored_grams: float) -> FoodUnit:
    """Guess which spoon an oil entry was logged with.

    The stored grams do not record the spoon, so this is lossy: 15 g may have
    been entered as 1 tbsp or 3 tsp and always reads back as tablespoons.
    """
    if stored_grams >= TABLESPOON_GRAMS and stored_grams % TABLESPOON_GRAMS == 0:
        return FoodUnit.TABLESPOON
    return FoodUnit.TEASPOON


def display_units(basis: StorageBasis, stored_quantity: float) -> float:
    """Number of units the stored quantity represents."""
    match basis:
        case OilBasis(unit=unit):
            return stored_quantity / _oil_unit_grams(unit)
        case UnitSizeBasis(unit_size=unit_size):
            return stored_quantity / unit_size
        case _:
            return stored_quantity


def basis_nutrients(
    basis: StorageBasis, food: FoodDefinition, stored_quantity: float
) -> DailyTotals:
    """Nutrients for a stored quantity, using the rate table its basis implies."""
    if isinstance(basis, PieceBasis):
        return scale_rates(food.per_piece, stored_quantity)
    return scale_rates(food.per_100g, stored_quantity / 100)


def scale_rates(rates: NutrientRates | None, factor: float) -> DailyTotals:
    """Multiply a rate table by ``factor``; missing rates count as zero."""
    if rates is None:
        return DailyTotals()
    return DailyTotals(
        calories=rates.calories * factor,
        protein_g=rates.protein_g * factor,
        carbs_g=rates.carbs_g * factor,
        fats_g=rates.fats_g * factor,
    )


def _oil_unit_grams(unit: FoodUnit) -> float:
    if unit == FoodUnit.TABLESPOON:
        return TABLESPOON_GRAMS
    return TEASPOON_GRAMS


def _display_unit(basis: StorageBasis) -> FoodUnit:
    if isinstance(basis, GramBasis):
        return FoodUnit.GRAM
    return basis.unit
