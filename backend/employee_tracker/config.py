"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from employee_tracker.core.exceptions import ConfigurationError

REQUIRED_SETTINGS = ("db_host", "db_user", "db_password", "db_name")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    # Store connection (all required)
    db_host: str = Field(..., min_length=1)
    db_user: str = Field(..., min_length=1)
    db_password: str = Field(..., min_length=1)
    db_name: str = Field(..., min_length=1)

    db_port: int = 3306
    db_driver: str = "mysql+aiomysql"

    # Logging
    log_level: str = "INFO"

    @property
    def is_sqlite(self) -> bool:
        return self.db_driver.startswith("sqlite")

    @property
    def url(self) -> URL:
        """
        Engine URL for the configured driver.

        The database name is left out for server stores: the database is
        created and selected after connecting. SQLite drivers use the
        database name as the file path.
        """
        if self.is_sqlite:
            return URL.create(self.db_driver, database=self.db_name)
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
        )


def load_settings(env_file: Optional[str] = None, **overrides) -> Settings:
    """
    Build and validate settings.

    Raises:
        ConfigurationError: If a required setting is missing or empty
    """
    try:
        if env_file is not None:
            return Settings(_env_file=env_file, **overrides)
        return Settings(**overrides)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        missing = [f.upper() for f in fields if f in REQUIRED_SETTINGS] or fields
        raise ConfigurationError(
            "Store configuration must define the following settings: "
            + ", ".join(missing)
        ) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()
