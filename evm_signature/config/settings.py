"""
Configuration settings module for evm_signature.
Reads EVM_SIGNATURE_* environment variables and an optional .env file
(parsed by pydantic-settings through python-dotenv) without touching
os.environ.
"""
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class EvmSignatureSettings(BaseSettings):
    """Settings for the evm_signature helpers."""

    model_config = SettingsConfigDict(
        env_prefix="EVM_SIGNATURE_",
        env_file=".env",
        extra="ignore",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Logging level")
    LOG_FILE: Optional[str] = Field(None, description="Log file path")

    # Length handling
    STRICT_LENGTHS: bool = Field(
        False,
        description="Reject unexpected input lengths in address derivation and block padding",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the log level is one loguru knows."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


def get_settings() -> EvmSignatureSettings:
    """Get application settings instance."""
    try:
        return EvmSignatureSettings()
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


# Export settings instance
settings = get_settings()
