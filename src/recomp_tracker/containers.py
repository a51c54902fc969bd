"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from recomp_tracker.adapters.supabase_custom_food_repository import (
    SupabaseCustomFoodRepository,
)
from recomp_tracker.adapters.supabase_daily_log_repository import (
    SupabaseDailyLogRepository,
)
from recomp_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from recomp_tracker.config import Settings
from recomp_tracker.services.aggregation import NutrientAggregator
from recomp_tracker.services.catalog import FoodCatalogService, load_static_foods
from recomp_tracker.services.daily_logs import DailyLogService
from recomp_tracker.services.profiles import ProfileService
from recomp_tracker.services.progress import ProgressService
from recomp_tracker.services.units import UnitConverter


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    catalog_service: FoodCatalogService
    daily_log_service: DailyLogService
    progress_service: ProgressService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    custom_food_repository = SupabaseCustomFoodRepository(supabase_client)
    daily_log_repository = SupabaseDailyLogRepository(supabase_client)

    config = resolved_settings.recomp
    converter = UnitConverter(oil_food_name=config.oil_food_name)
    profile_service = ProfileService(profile_repository, config)
    catalog_service = FoodCatalogService(
        static_foods=load_static_foods(resolved_settings.foods_path),
        repository=custom_food_repository,
    )
    daily_log_service = DailyLogService(
        catalog_service=catalog_service,
        aggregator=NutrientAggregator(converter),
        repository=daily_log_repository,
    )
    progress_service = ProgressService(
        profile_service=profile_service,
        daily_log_service=daily_log_service,
    )
    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        catalog_service=catalog_service,
        daily_log_service=daily_log_service,
        progress_service=progress_service,
    )
