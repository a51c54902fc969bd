"""Domain models for body profiles."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID


class Gender(StrEnum):
    """Gender used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(StrEnum):
    """Self-reported activity level.

    Collected and stored, but the maintenance formula applies one shared
    activity multiplier regardless of the level.
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"


@dataclass(frozen=True)
class TargetSnapshot:
    """Targets captured when the profile was last saved."""

    calories: float
    protein_g: float
    fats_g: float
    carbs_g: float


@dataclass(frozen=True)
class Profile:
    """Body-composition inputs for one user."""

    user_id: UUID
    weight_kg: float
    height_cm: float
    age: int
    gender: Gender
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    body_fat_percent: float | None = None
    targets: TargetSnapshot | None = None
