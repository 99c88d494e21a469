"""Configuration management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from GEOLAB_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="GEOLAB_", env_file=".env", extra="ignore")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="console", description="Log format (console or json)")

    # Sample data
    sample_seed: int = Field(default=42, description="Seed for the sample dataset jitter")

    # Analysis
    random_seed: Optional[int] = Field(
        default=None, description="Seed for RANDOM_* tools, None draws fresh entropy"
    )
    kmeans_random_state: int = Field(default=0, description="Random state for k-means")
    distance_matrix_warn_points: int = Field(
        default=500, description="Point count above which the pairwise scan is logged"
    )


settings = Settings()
