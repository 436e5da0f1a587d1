"""Application configuration."""
from collections import Counter
from functools import lru_cache
import math

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


def _check_signing_secret(value: str, env_name: str) -> str:
    """Fail closed if a signing secret is weak or placeholder quality."""
    if not value:
        raise ValueError(f"{env_name} must be set.")

    if len(value) < 32:
        raise ValueError(f"{env_name} must be at least 32 characters.")

    weak_values = {"changeme", "changeme-in-production", "secret", "password", "test"}
    lowered = value.lower()
    if lowered in weak_values or "changeme" in lowered:
        raise ValueError(f"{env_name} must not be a placeholder value.")

    counts = Counter(value)
    entropy_per_char = -sum((count / len(value)) * math.log2(count / len(value)) for count in counts.values())
    estimated_entropy_bits = entropy_per_char * len(value)
    if estimated_entropy_bits < 100:
        raise ValueError(f"{env_name} entropy is too low; use a cryptographically random value.")

    return value


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Admin Panel"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Database
    database_url: str = "sqlite:///./data/admin_panel.db"

    # Auth
    access_secret_key: str
    refresh_secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30
    refresh_token_expire_days: int = 7

    # Pagination
    default_page_size: int = 8

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @field_validator("access_secret_key")
    @classmethod
    def validate_access_secret_key(cls, value: str) -> str:
        return _check_signing_secret(value, "ACCESS_SECRET_KEY")

    @field_validator("refresh_secret_key")
    @classmethod
    def validate_refresh_secret_key(cls, value: str) -> str:
        return _check_signing_secret(value, "REFRESH_SECRET_KEY")

    @model_validator(mode="after")
    def validate_distinct_secrets(self) -> "Settings":
        """Access and refresh tokens must not share a signing key."""
        if self.access_secret_key == self.refresh_secret_key:
            raise ValueError("ACCESS_SECRET_KEY and REFRESH_SECRET_KEY must differ.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
