"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class RecompConfig(BaseSettings):
    """Constants for the recomp target formulas, read once per process."""

    activity_multiplier: float = 1.5
    subtract_value: float = 500
    protein_ratio_per_kg: float = 2.2
    protein_calories_per_gram: float = 4
    fat_ratio_per_kg: float = 0.8
    fat_calories_per_gram: float = 9
    carbs_calories_per_gram: float = 4
    carbs_max: int = 300
    intake_buffer_min: float = 100
    intake_buffer_max: float = 200
    oil_food_name: str = "Oil"

    model_config = SettingsConfigDict(
        env_prefix="RECOMP_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    foods_path: str | None = None
    recomp: RecompConfig = Field(default_factory=RecompConfig)
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

