"""
Configuration management with environment variable support and validation.

Design principles:
- Validation at startup (fail fast)
- Type safety with Pydantic
- Environment overrides for everything a deployment may need to change
"""

import os
from functools import lru_cache
from typing import Literal, cast

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_WINDOW_SIZE = 14

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StorageConfig(BaseModel):
    """Where the check-in history is persisted."""

    history_path: str = Field(
        default="./data/history.json", description="JSON file acting as the key-value store"
    )
    storage_key: str = Field(
        default="innerPeaceQuizHistory", description="Key holding the history records"
    )

    @field_validator("storage_key")
    def validate_storage_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("storage key must not be blank")
        return v


class ProgressConfig(BaseModel):
    """Trend display settings."""

    window_size: int = Field(
        default=DEFAULT_WINDOW_SIZE,
        gt=0,
        le=365,
        description="Number of recent entries shown on the chart",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="INFO", description="Logging level")
    format: Literal["json", "console"] = Field(default="json", description="Logging format")


class AppConfig(BaseModel):
    """Main application configuration combining all subsystems."""

    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")

    storage: StorageConfig = Field(default_factory=StorageConfig)
    progress: ProgressConfig = Field(default_factory=ProgressConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def debug_only_in_dev(self) -> "AppConfig":
        """Ensure debug mode is only allowed in development environment."""
        if self.debug and self.environment != "development":
            raise ValueError("debug mode is only allowed in development environment")
        return self


def load_config_from_env() -> AppConfig:
    """Load configuration from environment variables with validation."""

    def _env_to_literal(val: str) -> Literal["development", "staging", "production"]:
        v = val.strip().lower()
        if v in {"dev", "development"}:
            return "development"
        if v in {"stage", "staging"}:
            return "staging"
        return "production"

    def _level_to_literal(val: str) -> LogLevel:
        v = val.strip().upper()
        return cast(LogLevel, v if v in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else "INFO")

    environment = _env_to_literal(os.getenv("ENVIRONMENT", "development"))
    debug = environment == "development"

    storage_config = StorageConfig(
        history_path=os.getenv("HISTORY_PATH", "./data/history.json"),
        storage_key=os.getenv("HISTORY_STORAGE_KEY", "innerPeaceQuizHistory"),
    )

    progress_config = ProgressConfig(
        window_size=int(os.getenv("PROGRESS_WINDOW_SIZE", str(DEFAULT_WINDOW_SIZE))),
    )

    logging_config = LoggingConfig(
        level=_level_to_literal(os.getenv("LOG_LEVEL", "INFO")),
        format="console" if debug else "json",
    )

    return AppConfig(
        environment=environment,
        debug=debug,
        storage=storage_config,
        progress=progress_config,
        logging=logging_config,
    )


@lru_cache
def get_config() -> AppConfig:
    """Get cached application configuration."""
    return load_config_from_env()


def validate_config() -> None:
    """Validate configuration at startup."""
    try:
        config = get_config()
        print(f"✅ Configuration loaded for {config.environment} environment")
        print(f"✅ History stored at {config.storage.history_path}")
    except Exception as e:
        print(f"❌ Configuration validation failed: {e}")
        raise


def print_config_summary() -> None:
    """Print configuration summary for debugging."""
    config = get_config()

    print("\n🔧 CONFIGURATION SUMMARY")
    print(f"Environment: {config.environment}")
    print(f"Debug Mode: {config.debug}")
    print(f"Log Level: {config.logging.level}")

    print("\n💾 STORAGE CONFIGURATION")
    print(f"History Path: {config.storage.history_path}")
    print(f"Storage Key: {config.storage.storage_key}")

    print("\n📈 PROGRESS CONFIGURATION")
    print(f"Window Size: {config.progress.window_size} entries")


if __name__ == "__main__":
    validate_config()
    print_config_summary()
