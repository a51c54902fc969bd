"""Pydantic models for API request payloads."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from recomp_tracker.domain.foods import FoodDefinition, FoodUnit, NutrientRates
from recomp_tracker.domain.profiles import ActivityLevel, Gender, Profile


class ProfileRequest(BaseModel):
    """Body-composition inputs submitted from setup or settings."""

    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    age: int = Field(gt=0)
    gender: Gender
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    body_fat_percent: float | None = Field(default=None, gt=0, lt=100)

    def to_profile(self, user_id: UUID) -> Profile:
        """Convert the payload into a domain profile."""
        return Profile(
            user_id=user_id,
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age=self.age,
            gender=self.gender,
            activity_level=self.activity_level,
            body_fat_percent=self.body_fat_percent,
        )


class NutrientValues(BaseModel):
    """Nutrients per 100 g or per piece."""

    calories: float = Field(ge=0)
    protein_g: float = Field(default=0.0, ge=0)
    carbs_g: float = Field(default=0.0, ge=0)
    fats_g: float = Field(default=0.0, ge=0)

    def to_rates(self) -> NutrientRates:
        """Convert to domain rates."""
        return NutrientRates(
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fats_g=self.fats_g,
        )


class CustomFoodRequest(BaseModel):
    """A user-defined food."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    unit: FoodUnit = FoodUnit.GRAM
    per_100g: NutrientValues | None = None
    per_piece: NutrientValues | None = None
    unit_size: float | None = Field(default=None, gt=0)
    notes: str | None = None

    @model_validator(mode="after")
    def check_unit_metadata(self) -> "CustomFoodRequest":
        """Require the metadata each unit needs for conversion."""
        if self.per_100g is None and self.per_piece is None:
            raise ValueError("Provide per_100g or per_piece values")
        if self.unit == FoodUnit.PIECE and self.per_piece is not None:
            if self.unit_size is not None:
                raise ValueError("Piece foods with per-piece values take no unit_size")
            return self
        if self.per_100g is None:
            raise ValueError("per_100g values are required for this unit")
        if self.unit != FoodUnit.GRAM and self.unit_size is None:
            raise ValueError(f"unit_size is required for unit {self.unit.value}")
        return self

    def to_food(self) -> FoodDefinition:
        """Convert the payload into a domain food."""
        return FoodDefinition(
            name=self.name,
            unit=self.unit,
            per_100g=self.per_100g.to_rates() if self.per_100g else None,
            per_piece=self.per_piece.to_rates() if self.per_piece else None,
            unit_size=self.unit_size,
            notes=self.notes,
            is_custom=True,
        )


class EntryRequest(BaseModel):
    """A food quantity as entered by the user."""

    model_config = ConfigDict(str_strip_whitespace=True)

    food_name: str = Field(min_length=1)
    quantity: float = Field(gt=0)
    unit: FoodUnit | None = None
