"""Module: config."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # SQLAlchemy connection string; PostgreSQL in deployment, SQLite locally.
    database_url: str = "sqlite:///./petclinic.db"
    # Signs the session cookie that carries flash messages between redirects.
    secret_key: str = "change-me"
    owners_page_size: int = 5
    vets_page_size: int = 5
    log_level: str = "INFO"
    # "production" switches logs to JSON lines.
    environment: str = "development"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return str(v).upper()

    @property
    def use_json_logs(self) -> bool:
        return self.environment == "production"

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_file = ".env"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
