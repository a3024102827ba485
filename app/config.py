"""Application settings loaded from the environment (and an optional .env file)."""
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, frozen=True)

    # Upstream PokeAPI base URL, e.g. https://pokeapi.co/api/v2/
    api_poke: str = "https://pokeapi.co/api/v2/"

    # Single origin allowed by the CORS policy
    cors_origin: str = "http://localhost:3000"

    # Seconds; None leaves upstream calls without a timeout
    upstream_timeout: float | None = None

    log_level: str = "INFO"
    debug: bool = False

    @field_validator("api_poke")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Relative paths like 'type/4' are resolved against the base, so it must end in '/'."""
        return v if v.endswith("/") else f"{v}/"


@lru_cache
def get_settings() -> Settings:
    return Settings()
