"""Application configuration and settings management."""

from typing import Annotated, Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Permutation search grows factorially; this ceiling is not configurable.
MAX_EXACT_PICKUPS = 10


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="HIKER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    max_animals_per_hike: int = Field(default=8, ge=1)
    max_hikes_per_day: int = Field(default=2, ge=1)
    exact_route_max_pickups: int = Field(
        default=MAX_EXACT_PICKUPS,
        ge=1,
        le=MAX_EXACT_PICKUPS,
        description="Largest group routed by exhaustive permutation search.",
    )
    route_strategy: Literal["exact", "nearest_neighbor"] = Field(
        default="exact",
        description="Preferred pickup ordering strategy for each hike.",
    )
    preferred_trail_regions: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(),
        description="Restrict trail suggestions to these regions when any match.",
    )

    @field_validator("preferred_trail_regions", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
