"""
Configuration management using Pydantic Settings.

Loads configuration from environment variables with ECHO_ prefix.
"""
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ECHO_",
        case_sensitive=False,
        extra="ignore"
    )

    # Listener
    host: str = "127.0.0.1"
    port: int = 8080

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_dir: Path | None = None

    # Shutdown drain window, seconds
    shutdown_timeout: float = 5.0

    # Largest request body accepted by the listener
    max_body_size: int = 10 * 1024 * 1024

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of {valid_levels}")
        return v_upper

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port is in valid range (0 picks an ephemeral port)."""
        if not 0 <= v <= 65535:
            raise ValueError("Port must be between 0 and 65535")
        return v

    @field_validator("shutdown_timeout")
    @classmethod
    def validate_shutdown_timeout(cls, v: float) -> float:
        if v < 0:
            raise ValueError("shutdown_timeout cannot be negative")
        return v

    @field_validator("max_body_size")
    @classmethod
    def validate_max_body_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_body_size must be positive")
        return v

    def ensure_directories(self) -> None:
        """Create the log directory if one is configured."""
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get or create settings singleton instance.

    Raises:
        ConfigurationError: If environment or .env values fail validation
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}",
                context={"errors": [".".join(map(str, err["loc"])) for err in e.errors()]}
            ) from e
    return _settings
