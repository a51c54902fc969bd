"""Daily compliance classification."""

from recomp_tracker.domain.progress import DayStatus
from recomp_tracker.domain.targets import RecompTargets


def classify(
    day_total_calories: float | None, lower_bound: float, upper_bound: float
) -> DayStatus:
    """Classify a day's calories against an inclusive target window."""
    if day_total_calories is None:
        return DayStatus.NO_DATA
    if lower_bound <= day_total_calories <= upper_bound:
        return DayStatus.COMPLIANT
    return DayStatus.NON_COMPLIANT


def bounds_for(targets: RecompTargets) -> tuple[float, float]:
    """Return the (macro floor, upper bound) compliance window."""
    return targets.recomp_calories, targets.upper_bound_calories
