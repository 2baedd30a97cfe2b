"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Bind address used by ``python -m app``.
        port: Bind port used by ``python -m app``.
        pokeapi_base_url: Root of the species metadata API.
        funtranslations_base_url: Root of the translation API.
        upstream_timeout_seconds: Timeout applied to every upstream call.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Pokedex"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8080

    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    funtranslations_base_url: str = "https://api.funtranslations.com"
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)


settings = Settings()
