"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from recomp_tracker.domain.profiles import (
    ActivityLevel,
    Gender,
    Profile,
    TargetSnapshot,
)
from recomp_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for user profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("user_profiles")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def save_profile(self, profile: Profile) -> Profile:
        """Insert or update the profile row for the user."""
        snapshot = profile.targets
        response = (
            self.client.table("user_profiles")
            .upsert(
                {
                    "user_id": str(profile.user_id),
                    "weight_kg": profile.weight_kg,
                    "height_cm": profile.height_cm,
                    "age": profile.age,
                    "gender": profile.gender.value,
                    "activity_level": profile.activity_level.value,
                    "body_fat_percent": profile.body_fat_percent,
                    "target_calories": snapshot.calories if snapshot else None,
                    "target_protein": snapshot.protein_g if snapshot else None,
                    "target_fats": snapshot.fats_g if snapshot else None,
                    "target_carbs": snapshot.carbs_g if snapshot else None,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> Profile:
    targets = None
    if row.get("target_calories") is not None:
        targets = TargetSnapshot(
            calories=float(row["target_calories"]),
            protein_g=float(row.get("target_protein") or 0.0),
            fats_g=float(row.get("target_fats") or 0.0),
            carbs_g=float(row.get("target_carbs") or 0.0),
        )
    body_fat = row.get("body_fat_percent")
    return Profile(
        user_id=UUID(str(row["user_id"])),
        weight_kg=float(row["weight_kg"]),
        height_cm=float(row["height_cm"]),
        age=int(row["age"]),
        gender=Gender(str(row["gender"])),
        activity_level=ActivityLevel(str(row.get("activity_level") or "moderate")),
        body_fat_percent=float(body_fat) if body_fat is not None else None,
        targets=targets,
    )
