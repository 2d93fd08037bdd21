"""
QuickBite settings, loaded from environment variables or a .env file.
"""

import logging
from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Deployment environments"""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Runtime configuration for the menu catalog service"""

    app_name: str = Field(default="QuickBite", description="Service name reported by /health-check")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False, description="FastAPI debug tracebacks")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)

    # Menu catalog store
    database_url: str = Field(
        default="sqlite:///./quickbite.db",
        description="SQLAlchemy URL; sqlite:// keeps the catalog in memory",
    )
    db_echo: bool = Field(default=False, description="Log every SQL statement")
    db_init_attempts: int = Field(
        default=3, ge=1, description="Schema creation attempts before startup aborts"
    )
    db_init_delay_sec: float = Field(default=2.0, ge=0)
    seed_on_startup: bool = Field(
        default=True, description="Insert the sample menu when the catalog is empty"
    )

    log_level: str = Field(default="INFO")
    log_format: str = Field(default="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Browser clients of the catalog API
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"]
    )

    api_title: str = Field(default="QuickBite API")
    api_description: str = Field(default="Restaurant menu catalog service")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT


settings = Settings()
