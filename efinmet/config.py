"""Configuration settings for the EFIN METAR service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("efinmet.config")

DEFAULT_METAR_URL = (
    "https://www.ilmailusaa.fi/backend.php?"
    "{%22mode%22:%22metar%22,%22radius%22:%22100%22,"
    "%22points%22:[{%22_area%22:%221%22}]}"
)
DEFAULT_TRAFFIC_URL = "https://data.vatsim.net/v3/vatsim-data.json"


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    efinmet_env: str = os.getenv("EFINMET_ENV", "local")
    log_level: str = os.getenv("EFINMET_LOG_LEVEL", "INFO")

    # METAR feed
    metar_url: str = os.getenv("METAR_URL", DEFAULT_METAR_URL)
    metar_timeout: float = float(os.getenv("METAR_TIMEOUT", "10.0"))

    # VATSIM traffic feed
    traffic_url: str = os.getenv("TRAFFIC_URL", DEFAULT_TRAFFIC_URL)
    traffic_timeout: float = float(os.getenv("TRAFFIC_TIMEOUT", "10.0"))

    # Refresh loop
    enable_refresher: bool = _get_bool("ENABLE_REFRESHER", default=True)
    refresh_interval_seconds: float = float(
        os.getenv("REFRESH_INTERVAL_SECONDS", "30.0")
    )


settings = Settings()

if settings.refresh_interval_seconds <= 0:
    logger.warning(
        "Invalid refresh interval %s; falling back to 30 seconds",
        settings.refresh_interval_seconds,
    )
    settings.refresh_interval_seconds = 30.0

__all__ = ["settings", "Settings", "DEFAULT_METAR_URL", "DEFAULT_TRAFFIC_URL"]
