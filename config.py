import os
from dataclasses import dataclass, field
from typing import List, Optional

from errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    mongodb_uri: str
    database_name: str = "portfolio"
    openweather_api_key: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    port: int = 8000
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read the environment once. A missing MONGODB_URI stops startup."""
    uri = (os.getenv("MONGODB_URI") or "").strip()
    if not uri:
        raise ConfigurationError('Invalid/Missing environment variable: "MONGODB_URI"')

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    try:
        port = int(os.getenv("PORT", 8000))
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got {os.getenv('PORT')!r}")

    return Settings(
        mongodb_uri=uri,
        database_name=os.getenv("DATABASE_NAME") or "portfolio",
        openweather_api_key=os.getenv("OPENWEATHER_API_KEY") or None,
        cors_origins=origins or ["*"],
        port=port,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
