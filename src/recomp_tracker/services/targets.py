"""Recomp target calculations.

Targets are derived in a fixed order:

1. BMR via Mifflin-St Jeor.
2. Maintenance = BMR x activity multiplier, rounded.
3. Upper bound = maintenance - subtract value.
4. Protein and fat grams from per-kg ratios.
5. Carbs fill the calories left under the upper bound, capped at a maximum.
6. Recomp calories = calories implied by the three macro targets.

All formulas are pure; constants come from ``RecompConfig``.
"""

import math

from recomp_tracker.config import RecompConfig
from recomp_tracker.domain.profiles import ActivityLevel, Gender, Profile
from recomp_tracker.domain.targets import IntakeEstimate, RecompTargets


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def round_percent(ratio: float) -> float:
    """Convert a ratio to a percentage with two decimals."""
    return round_half_up(ratio * 100 * 100) / 100


def calculate_bmr(weight_kg: float, height_cm: float, age: int, gender: Gender) -> float:
    """Calculate Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Male:   BMR = 10 x weight(kg) + 6.25 x height(cm) - 5 x age(y) + 5
    Female: BMR = 10 x weight(kg) + 6.25 x height(cm) - 5 x age(y) - 161
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if gender == Gender.MALE:
        return base + 5
    return base - 161


def calculate_maintenance(bmr: float, config: RecompConfig) -> int:
    """Maintenance calories from the shared activity multiplier."""
    return round_half_up(bmr * config.activity_multiplier)


def calculate_upper_bound(maintenance: float, config: RecompConfig) -> float:
    """Calorie ceiling used to size the carb allowance."""
    return maintenance - config.subtract_value


def calculate_deficit_percentage(maintenance: float, recomp_calories: float) -> float:
    """Deficit % = (maintenance - recomp) / maintenance x 100, two decimals."""
    return round_percent((maintenance - recomp_calories) / maintenance)


def calculate_protein(
    weight_kg: float, config: RecompConfig, ratio: float | None = None
) -> int:
    """Protein grams from a per-kg ratio, defaulting to the configured ratio."""
    protein_ratio = config.protein_ratio_per_kg if ratio is None else ratio
    return round_half_up(weight_kg * protein_ratio)


def calculate_fats(
    weight_kg: float, config: RecompConfig, ratio: float | None = None
) -> int:
    """Fat grams from a per-kg ratio, defaulting to the configured ratio."""
    fat_ratio = config.fat_ratio_per_kg if ratio is None else ratio
    return round_half_up(weight_kg * fat_ratio)


def calculate_carbs(
    total_calories: float, protein_g: float, fats_g: float, config: RecompConfig
) -> int:
    """Carb grams from the calories left after protein and fat, capped.

    There is no floor: when protein and fat exceed the calorie budget the
    result is negative.
    """
    protein_calories = protein_g * config.protein_calories_per_gram
    fat_calories = fats_g * config.fat_calories_per_gram
    remaining = total_calories - protein_calories - fat_calories
    calculated = round_half_up(remaining / config.carbs_calories_per_gram)
    return min(calculated, config.carbs_max)


def compute_targets(  # noqa: PLR0913, ARG001
    weight_kg: float,
    height_cm: float,
    age: int,
    gender: Gender,
    activity_level: ActivityLevel,
    config: RecompConfig,
    protein_ratio: float | None = None,
    fat_ratio: float | None = None,
) -> RecompTargets:
    """Calculate all recomp targets for a body profile.

    ``activity_level`` does not change the multiplier; every level shares
    ``config.activity_multiplier``.
    """
    bmr = calculate_bmr(weight_kg, height_cm, age, gender)
    maintenance = calculate_maintenance(bmr, config)
    upper_bound = calculate_upper_bound(maintenance, config)

    protein = calculate_protein(weight_kg, config, protein_ratio)
    fats = calculate_fats(weight_kg, config, fat_ratio)
    carbs = calculate_carbs(upper_bound, protein, fats, config)

    protein_calories = protein * config.protein_calories_per_gram
    fat_calories = fats * config.fat_calories_per_gram
    carb_calories = carbs * config.carbs_calories_per_gram

    # Below the upper bound whenever carbs hit the cap.
    recomp_calories = protein_calories + fat_calories + carb_calories

    return RecompTargets(
        bmr=round_half_up(bmr),
        maintenance=maintenance,
        upper_bound_calories=upper_bound,
        recomp_calories=recomp_calories,
        deficit_percentage=calculate_deficit_percentage(maintenance, recomp_calories),
        protein_g=protein,
        fats_g=fats,
        carbs_g=carbs,
        protein_calories=protein_calories,
        fat_calories=fat_calories,
        carb_calories=carb_calories,
    )


def targets_for_profile(profile: Profile, config: RecompConfig) -> RecompTargets:
    """Calculate targets for a stored profile."""
    return compute_targets(
        weight_kg=profile.weight_kg,
        height_cm=profile.height_cm,
        age=profile.age,
        gender=profile.gender,
        activity_level=profile.activity_level,
        config=config,
    )


def estimate_intake(targets: RecompTargets, config: RecompConfig) -> IntakeEstimate:
    """Expected intake above the macro floor and the deficit it implies.

    This deficit differs from ``RecompTargets.deficit_percentage``, which is
    measured against the macro floor itself.
    """
    expected_min = targets.recomp_calories + config.intake_buffer_min
    expected_max = targets.recomp_calories + config.intake_buffer_max
    expected_intake = round_half_up((expected_min + expected_max) / 2)
    effective_deficit = targets.maintenance - expected_intake
    return IntakeEstimate(
        expected_min=expected_min,
        expected_max=expected_max,
        expected_intake=expected_intake,
        effective_deficit=effective_deficit,
        effective_deficit_percent=round_percent(
            effective_deficit / targets.maintenance
        ),
    )
