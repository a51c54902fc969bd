"""Domain models for food definitions and their storage basis."""

from dataclasses import dataclass
from enum import StrEnum


class FoodUnit(StrEnum):
    """Unit a food is logged in."""

    GRAM = "g"
    PIECE = "piece"
    TEASPOON = "tsp"
    TABLESPOON = "tbsp"
    SLICE = "slice"


@dataclass(frozen=True)
class NutrientRates:
    """Nutrients for a fixed amount of food (100 g or one piece)."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fats_g: float = 0.0


@dataclass(frozen=True)
class FoodDefinition:
    """A catalog food, identified by its name."""

    name: str
    unit: FoodUnit = FoodUnit.GRAM
    per_100g: NutrientRates | None = None
    per_piece: NutrientRates | None = None
    unit_size: float | None = None
    notes: str | None = None
    is_custom: bool = False


@dataclass(frozen=True)
class GramBasis:
    """Stored quantity is grams; per-100g rates apply.

    ``malformed`` marks foods that only landed here because their non-gram
    unit has neither a unit size nor per-piece rates.
    """

    malformed: bool = False


@dataclass(frozen=True)
class UnitSizeBasis:
    """Stored quantity is grams converted from ``unit_size`` grams per unit."""

    unit: FoodUnit
    unit_size: float


@dataclass(frozen=True)
class PieceBasis:
    """Stored quantity is a piece count; per-piece rates apply."""

    unit: FoodUnit = FoodUnit.PIECE


@dataclass(frozen=True)
class OilBasis:
    """Stored quantity is grams of oil measured in teaspoons or tablespoons."""

    unit: FoodUnit = FoodUnit.TEASPOON


StorageBasis = GramBasis | UnitSizeBasis | PieceBasis | OilBasis
