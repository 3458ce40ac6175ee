"""Simple configuration management for heatgrid rendering."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .colors import COLOR_MAPPERS


class Settings(BaseSettings):
    """Library settings."""

    # Logging
    log_level: str = Field(default="WARNING")

    # Rendering
    default_color_mapper: str = Field(
        default="greyscale",
        description="Color mapper used by render_to_file when none is given",
    )
    max_block_size: Optional[int] = Field(
        default=None,
        ge=1,
        description="Optional upper bound on block sizes; unbounded when unset",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @field_validator("default_color_mapper")
    @classmethod
    def check_color_mapper(cls, value: str) -> str:
        if value not in COLOR_MAPPERS:
            raise ValueError(
                f"Unknown color mapper '{value}', expected one of {sorted(COLOR_MAPPERS)}"
            )
        return value

    class Config:
        env_prefix = "HEATGRID_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached library settings."""
    return Settings()


def reload_settings() -> Settings:
    """Reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
