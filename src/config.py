"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Overpass geodata API
    overpass_url: str = "https://overpass-api.de/api/interpreter"
    http_timeout_seconds: float = 30.0  # must exceed the 25 s query timeout

    # Viewer defaults
    default_district: str = "Dehradun"
    default_zoom: int = 11

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
