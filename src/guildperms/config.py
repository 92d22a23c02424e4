"""Package configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import RedisDsn, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from guildperms.core.constants import (
    DEFAULT_REDIS_MAX_CONNECTIONS,
    DEFAULT_SNAPSHOT_KEY_PREFIX,
)


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # Logging
    log_level: str = "INFO"

    # Snapshot store
    redis_url: RedisDsn = RedisDsn("redis://localhost:6379")
    redis_max_connections: int = DEFAULT_REDIS_MAX_CONNECTIONS
    snapshot_key_prefix: str = DEFAULT_SNAPSHOT_KEY_PREFIX

    # Problem Details type URIs
    error_docs_base_url: str = "https://api.example.com"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
