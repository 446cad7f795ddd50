"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

SEARCH_BACKENDS = ("google", "serpapi")


@dataclass(frozen=True)
class Settings:
    zeroentropy_api_key: str = ""
    arcade_api_key: str = ""
    arcade_user_id: str = "smart-marketplace-user"
    datalog_api_key: str = ""
    google_api_key: str = ""
    google_cse_id: str = ""
    serpapi_api_key: str = ""
    search_backend: str = "google"
    port: int = 5001
    request_timeout: float = 15.0
    default_location: str = "San Francisco, CA"
    max_upload_mb: int = 10
    cors_origins: Tuple[str, ...] = ("*",)


def is_configured(value: Optional[str]) -> bool:
    """False for empty values and untouched ``your_..._here`` template placeholders."""
    if not value:
        return False
    value = value.strip()
    return bool(value) and not (value.startswith("your_") and value.endswith("_here"))


def _parse_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    search_backend = os.getenv("SEARCH_BACKEND", "google").strip().lower()
    if search_backend not in SEARCH_BACKENDS:
        logger.warning("Unknown SEARCH_BACKEND=%s; falling back to google.", search_backend)
        search_backend = "google"

    settings = Settings(
        zeroentropy_api_key=os.getenv("ZEROENTROPY_API_KEY", ""),
        arcade_api_key=os.getenv("ARCADE_API_KEY", ""),
        arcade_user_id=os.getenv("ARCADE_USER_ID", "smart-marketplace-user"),
        datalog_api_key=os.getenv("DATALOG_API_KEY", ""),
        google_api_key=os.getenv("GOOGLE_API_KEY", ""),
        google_cse_id=os.getenv("GOOGLE_CSE_ID", ""),
        serpapi_api_key=os.getenv("SERPAPI_API_KEY", ""),
        search_backend=search_backend,
        port=int(os.getenv("PORT", "5001")),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT_SECONDS", "15")),
        default_location=os.getenv("DEFAULT_LOCATION", "").strip() or "San Francisco, CA",
        max_upload_mb=int(os.getenv("MAX_UPLOAD_MB", "10")),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "")),
    )

    for name, value in (
        ("ZEROENTROPY_API_KEY", settings.zeroentropy_api_key),
        ("ARCADE_API_KEY", settings.arcade_api_key),
        ("DATALOG_API_KEY", settings.datalog_api_key),
    ):
        if not is_configured(value):
            logger.warning("%s is not configured; synthetic analysis will be used.", name)

    if search_backend == "google" and not (
        is_configured(settings.google_api_key) and is_configured(settings.google_cse_id)
    ):
        logger.warning("GOOGLE_API_KEY/GOOGLE_CSE_ID are not configured; web search will use synthetic results.")
    if search_backend == "serpapi" and not is_configured(settings.serpapi_api_key):
        logger.warning("SERPAPI_API_KEY is not configured; web search will use synthetic results.")

    return settings
