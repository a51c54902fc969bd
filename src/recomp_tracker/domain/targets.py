"""Domain models for recomp targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecompTargets:
    """Calorie and macro targets derived from a profile."""

    bmr: int
    maintenance: int
    upper_bound_calories: float
    recomp_calories: float
    deficit_percentage: float
    protein_g: int
    fats_g: int
    carbs_g: int
    protein_calories: float
    fat_calories: float
    carb_calories: float


@dataclass(frozen=True)
class IntakeEstimate:
    """Expected intake range above the macro floor and the resulting deficit."""

    expected_min: float
    expected_max: float
    expected_intake: int
    effective_deficit: int
    effective_deficit_percent: float
