"""Configuration settings for signature handling."""

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

# Configuration Constants
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_LOG_FORMAT = "ETH_SIGNATURE_LOG_FORMAT"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"


class SignatureConfig(BaseModel):
    """Logging settings for applications embedding this package."""

    model_config = ConfigDict(frozen=True)

    log_level: str = DEFAULT_LOG_LEVEL
    log_format: Literal["console", "json"] = DEFAULT_LOG_FORMAT

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the level is one of the standard logging level names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {v!r}"
            raise ValueError(msg)
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls) -> "SignatureConfig":
        """
        Create configuration from environment variables.

        Returns:
            SignatureConfig: Configuration instance with values from environment variables.

        Example:
            ```python
            config = SignatureConfig.from_env()
            configure_logging(config)
            ```
        """
        return cls(
            log_level=os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            log_format=os.getenv(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT).strip().lower(),
        )


@lru_cache(maxsize=1)
def get_config() -> SignatureConfig:
    """Get the process-wide configuration, read once from the environment."""
    return SignatureConfig.from_env()
