"""Configuration helpers for Foursquare credentials and environment variables."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.foursquare.com/v2"
DEFAULT_API_VERSION = "20140806"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(slots=True)
class ApiSettings:
    """Centralised container for the Foursquare credentials."""

    foursquare_client_id: Optional[str] = None
    foursquare_client_secret: Optional[str] = None
    foursquare_access_token: Optional[str] = None
    foursquare_api_version: str = DEFAULT_API_VERSION
    foursquare_base_url: str = DEFAULT_API_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ApiSettings":
        """Load settings from the process environment and an optional `.env` file."""

        load_dotenv()
        return cls(
            foursquare_client_id=os.getenv("FOURSQUARE_CLIENT_ID"),
            foursquare_client_secret=os.getenv("FOURSQUARE_CLIENT_SECRET"),
            foursquare_access_token=os.getenv("FOURSQUARE_ACCESS_TOKEN"),
            foursquare_api_version=os.getenv("FOURSQUARE_API_VERSION", DEFAULT_API_VERSION),
            foursquare_base_url=os.getenv("FOURSQUARE_API_URL", DEFAULT_API_URL),
            log_level=os.getenv("FOURSQUARE_LOG_LEVEL", "INFO"),
        )

    def ensure(self, field: str) -> str:
        """Return the requested field and fail fast if it is missing."""

        value = getattr(self, field)
        if not value:
            raise RuntimeError(f"Missing configuration value: {field}")
        return value


def configure_logging(settings: ApiSettings) -> None:
    """Install the root logging handler at the configured level."""

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
