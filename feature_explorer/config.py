"""Configuration for the feature explorer.

Values come from (highest priority first) explicit overrides, environment
variables prefixed ``FEATURE_EXPLORER_``, a ``.env`` file, then defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

IMAGE_PATH_TEMPLATE = "https://{host}/highest_activating_images/{index}.png"


class ExplorerSettings(BaseSettings):
    """Runtime settings for loading data and serving the app."""

    model_config = SettingsConfigDict(
        env_prefix="FEATURE_EXPLORER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Data
    data_source: str = Field(
        default="data/features.json",
        description="Path or http(s) URL of the features JSON document",
    )
    fetch_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
    image_host: str = Field(
        default="d1kcxzhfa4ovsd.cloudfront.net",
        description="Host serving highest-activating images",
    )

    # Presentation
    wrap_width: int = Field(default=50, ge=1, description="Hover text line budget")
    axis_padding: float = Field(default=5.0, ge=0, description="Axis margin around points")
    warmup_ms: int = Field(
        default=1000, ge=0,
        description="Delay before plot clicks are honoured after a redraw",
    )
    point_size: int = Field(default=6, ge=1)

    # Server
    host: str = "127.0.0.1"
    port: int = Field(default=8050, ge=1, le=65535)
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    def image_url(self, index: int) -> str:
        """URL of the highest-activating image for feature *index*."""
        return IMAGE_PATH_TEMPLATE.format(host=self.image_host, index=index)


def load_settings(**overrides) -> ExplorerSettings:
    """Build settings, ignoring overrides that are ``None``."""
    return ExplorerSettings(**{k: v for k, v in overrides.items() if v is not None})
