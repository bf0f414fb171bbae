"""
Application settings.

Values come from environment variables (or a local .env file) and fall back
to the defaults below. Import the shared instance:

    from config import settings
"""
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LOG_LEVEL: str = "INFO"

    # ------------------------------------------------------------------
    # Providers
    # ------------------------------------------------------------------
    NASA_POWER_URL: str = "https://power.larc.nasa.gov/api/temporal/monthly/point"
    OPEN_METEO_FLOOD_URL: str = "https://flood-api.open-meteo.com/v1/flood"
    OPEN_METEO_FORECAST_URL: str = "https://api.open-meteo.com/v1/forecast"
    OPEN_METEO_AGRO_URL: str = "https://api.open-meteo.com/v1/agrometeorology"
    OPEN_METEO_GEOCODING_URL: str = "https://geocoding-api.open-meteo.com/v1/search"
    PROVIDER_TIMEOUT_SECONDS: float = 20.0
    USER_AGENT: str = "AgriScore/1.0"

    # Multi-year window used for crop suggestions
    CLIMATE_START_YEAR: int = 2023
    CLIMATE_END_YEAR: int = 2025

    # ------------------------------------------------------------------
    # Provider payload cache
    # ------------------------------------------------------------------
    CACHE_MAX_ITEMS: int = 256
    CACHE_TTL_SECONDS: int = 900

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]


settings = Settings()
