"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WheelSettings(BaseSettings):
    """Spin simulation tunables."""

    model_config = SettingsConfigDict(env_prefix="HABITARCADE_WHEEL_", extra="ignore")

    # One simulation step per tick interval
    tick_interval_ms: float = Field(default=20.0, gt=0.0)
    decay_factor: float = Field(default=0.99, gt=0.0, lt=1.0)
    stop_threshold: float = Field(default=0.1, gt=0.0)

    # Initial velocity range in degrees per tick, [min, max)
    min_velocity: float = Field(default=10.0, gt=0.0)
    max_velocity: float = Field(default=20.0, gt=0.0)

    @model_validator(mode="after")
    def _check_velocity_range(self) -> "WheelSettings":
        if self.max_velocity < self.min_velocity:
            raise ValueError("max_velocity must not be below min_velocity")
        return self


class DisplaySettings(BaseSettings):
    """Drawing surface settings."""

    model_config = SettingsConfigDict(env_prefix="HABITARCADE_DISPLAY_", extra="ignore")

    width: int = Field(default=300, gt=0)
    height: int = Field(default=300, gt=0)
    fps: int = Field(default=50, gt=0)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="HABITARCADE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    env: Literal["simulator", "headless"] = "simulator"
    debug: bool = False

    # Simulator window
    window_width: int = 900
    window_height: int = 640
    window_scale: int = 1

    # Headless session length
    headless_spins: int = Field(default=3, ge=1)

    # Nested settings
    wheel: WheelSettings = Field(default_factory=WheelSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @property
    def is_simulator(self) -> bool:
        """Check if running the desktop simulator."""
        return self.env == "simulator"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
