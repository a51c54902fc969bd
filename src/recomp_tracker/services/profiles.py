"""Profile service."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from recomp_tracker.config import RecompConfig
from recomp_tracker.domain.errors import ProfileNotFoundError
from recomp_tracker.domain.profiles import Profile, TargetSnapshot
from recomp_tracker.domain.targets import IntakeEstimate, RecompTargets
from recomp_tracker.services.targets import estimate_intake, targets_for_profile

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the user's profile if set."""

    def save_profile(self, profile: Profile) -> Profile:
        """Create or replace the user's profile."""


@dataclass
class ProfileService:
    """Service for profiles and the targets derived from them."""

    repository: ProfileRepository
    config: RecompConfig

    def save_profile(self, profile: Profile) -> Profile:
        """Store a profile together with a snapshot of its current targets."""
        targets = targets_for_profile(profile, self.config)
        snapshot = TargetSnapshot(
            calories=targets.recomp_calories,
            protein_g=targets.protein_g,
            fats_g=targets.fats_g,
            carbs_g=targets.carbs_g,
        )
        saved = self.repository.save_profile(replace(profile, targets=snapshot))
        _logger.info(
            "Profile saved: user_id=%s maintenance=%s recomp_calories=%s",
            profile.user_id,
            targets.maintenance,
            targets.recomp_calories,
        )
        return saved

    def get_profile(self, user_id: UUID) -> Profile:
        """Return the user's profile or raise ``ProfileNotFoundError``."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    def get_targets(self, user_id: UUID) -> RecompTargets:
        """Compute targets from the current profile and config.

        The snapshot stored with the profile is not consulted.
        """
        return targets_for_profile(self.get_profile(user_id), self.config)

    def get_intake_estimate(self, user_id: UUID) -> IntakeEstimate:
        """Return the expected intake and effective deficit for the user."""
        return estimate_intake(self.get_targets(user_id), self.config)
