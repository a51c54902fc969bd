"""Food catalog: bundled foods merged with each user's custom foods."""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol
from uuid import UUID

from recomp_tracker.domain.errors import FoodNotFoundError
from recomp_tracker.domain.foods import FoodDefinition, FoodUnit, NutrientRates

DEFAULT_FOODS_PATH = Path(__file__).resolve().parents[1] / "data" / "foods.json"

_logger = logging.getLogger(__name__)


class CustomFoodRepository(Protocol):
    """Persistence interface for user-defined foods."""

    def list_custom_foods(self, user_id: UUID) -> list[FoodDefinition]:
        """Return the user's custom foods."""

    def create_custom_food(
        self, user_id: UUID, food: FoodDefinition
    ) -> FoodDefinition:
        """Persist a custom food and return it."""


@dataclass
class FoodCatalog:
    """Name-keyed lookup over static and custom foods."""

    foods: dict[str, FoodDefinition] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        static_foods: Iterable[FoodDefinition],
        custom_foods: Iterable[FoodDefinition] = (),
    ) -> "FoodCatalog":
        """Load static foods first, then overlay custom foods by name."""
        foods: dict[str, FoodDefinition] = {}
        for food in static_foods:
            foods[food.name] = food
        for food in custom_foods:
            foods[food.name] = food
        return cls(foods)

    def get(self, name: str) -> FoodDefinition | None:
        """Return a food by name, if present."""
        return self.foods.get(name)

    def require(self, name: str) -> FoodDefinition:
        """Return a food by name or raise ``FoodNotFoundError``."""
        food = self.foods.get(name)
        if food is None:
            raise FoodNotFoundError(name)
        return food

    def list_foods(self) -> list[FoodDefinition]:
        """Return all foods sorted by name."""
        return sorted(self.foods.values(), key=lambda food: food.name.lower())

    def __contains__(self, name: object) -> bool:
        return name in self.foods

    def __len__(self) -> int:
        return len(self.foods)


@dataclass
class FoodCatalogService:
    """Builds per-user catalogs and records custom foods."""

    static_foods: list[FoodDefinition]
    repository: CustomFoodRepository

    def catalog_for(self, user_id: UUID) -> FoodCatalog:
        """Return the merged catalog for a user."""
        return FoodCatalog.build(
            self.static_foods, self.repository.list_custom_foods(user_id)
        )

    def add_custom_food(self, user_id: UUID, food: FoodDefinition) -> FoodDefinition:
        """Create a custom food; it overrides a static food of the same name."""
        created = self.repository.create_custom_food(user_id, food)
        _logger.info("Custom food added: user_id=%s name=%s", user_id, created.name)
        return created


def load_static_foods(path: Path | str | None = None) -> list[FoodDefinition]:
    """Read the bundled food list (or a replacement file)."""
    resolved = Path(path) if path else DEFAULT_FOODS_PATH
    rows = json.loads(resolved.read_text(encoding="utf-8"))
    return [food_from_row(row) for row in rows]


def food_from_row(row: dict[str, object], is_custom: bool = False) -> FoodDefinition:
    """Build a food from a flat row of ``*_per_100g`` / ``*_per_piece`` columns."""
    return FoodDefinition(
        name=str(row["name"]),
        unit=FoodUnit(str(row.get("unit") or FoodUnit.GRAM)),
        per_100g=_rates_from_row(row, "per_100g"),
        per_piece=_rates_from_row(row, "per_piece"),
        unit_size=_optional_float(row.get("unit_size")),
        notes=str(row["notes"]) if row.get("notes") else None,
        is_custom=is_custom,
    )


def food_to_row(food: FoodDefinition) -> dict[str, object]:
    """Flatten a food into the column layout read by ``food_from_row``."""
    row: dict[str, object] = {
        "name": food.name,
        "unit": food.unit.value,
        "unit_size": food.unit_size,
        "notes": food.notes,
    }
    for suffix, rates in (("per_100g", food.per_100g), ("per_piece", food.per_piece)):
        row[f"calories_{suffix}"] = rates.calories if rates else None
        row[f"protein_{suffix}"] = rates.protein_g if rates else None
        row[f"carbs_{suffix}"] = rates.carbs_g if rates else None
        row[f"fats_{suffix}"] = rates.fats_g if rates else None
    return row


def _rates_from_row(row: dict[str, object], suffix: str) -> NutrientRates | None:
    values = {
        name: _optional_float(row.get(f"{name}_{suffix}"))
        for name in ("calories", "protein", "carbs", "fats")
    }
    if all(value is None for value in values.values()):
        return None
    return NutrientRates(
        calories=values["calories"] or 0.0,
        protein_g=values["protein"] or 0.0,
        carbs_g=values["carbs"] or 0.0,
        fats_g=values["fats"] or 0.0,
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str) and value:
        try:
            return float(value)
        except ValueError:
            return None
    return None
