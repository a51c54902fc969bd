"""Tests for compliance classification."""

from recomp_tracker.config import RecompConfig
from recomp_tracker.domain.profiles import ActivityLevel, Gender
from recomp_tracker.domain.progress import DayStatus
from recomp_tracker.services.compliance import bounds_for, classify
from recomp_tracker.services.targets import compute_targets


def test_classify_no_data() -> None:
    assert classify(None, 1500, 2000) == DayStatus.NO_DATA


def test_classify_inside_and_outside() -> None:
    assert classify(1800, 1500, 2000) == DayStatus.COMPLIANT
    assert classify(2100, 1500, 2000) == DayStatus.NON_COMPLIANT
    assert classify(1499, 1500, 2000) == DayStatus.NON_COMPLIANT


def test_classify_bounds_are_inclusive() -> None:
    assert classify(1500, 1500, 2000) == DayStatus.COMPLIANT
    assert classify(2000, 1500, 2000) == DayStatus.COMPLIANT


def test_zero_calories_is_data() -> None:
    assert classify(0, 1500, 2000) == DayStatus.NON_COMPLIANT


def test_bounds_for_targets(config: RecompConfig) -> None:
    targets = compute_targets(70, 175, 30, Gender.MALE, ActivityLevel.LIGHT, config)

    assert bounds_for(targets) == (1972, 1973)
