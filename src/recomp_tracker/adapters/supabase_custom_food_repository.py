"""Supabase repository for custom foods."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from recomp_tracker.domain.foods import FoodDefinition
from recomp_tracker.services.catalog import (
    CustomFoodRepository,
    food_from_row,
    food_to_row,
)


@dataclass
class SupabaseCustomFoodRepository(CustomFoodRepository):
    """Supabase-backed repository for user-defined foods."""

    client: Client

    def list_custom_foods(self, user_id: UUID) -> list[FoodDefinition]:
        """Return custom foods for a user, oldest first."""
        response = (
            self.client.table("custom_foods")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [food_from_row(row, is_custom=True) for row in response.data or []]

    def create_custom_food(
        self, user_id: UUID, food: FoodDefinition
    ) -> FoodDefinition:
        """Insert a custom food and return it."""
        response = (
            self.client.table("custom_foods")
            .insert({"user_id": str(user_id), **food_to_row(food)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create custom food")
        return food_from_row(response.data[0], is_custom=True)
