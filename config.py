"""
Configuration module for environment variable validation and type-safe config.

The resource provider handlers read their settings from the Lambda
environment. Values are validated when the configuration is first built.
"""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """Type-safe configuration object with validated environment variables."""

    aws_region: str = "us-east-1"
    log_level: str = "INFO"
    callback_delay_seconds: int = 5

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ValueError: If environment variables are invalid.
        """
        aws_region = os.environ.get("AWS_REGION", "us-east-1")
        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        # Validate log level
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level not in valid_log_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_log_levels}, got: {log_level}"
            )

        raw_delay = os.environ.get("CALLBACK_DELAY_SECONDS", "5")
        try:
            callback_delay_seconds = int(raw_delay)
        except ValueError:
            raise ValueError(
                f"CALLBACK_DELAY_SECONDS must be an integer, got: {raw_delay}"
            )
        if callback_delay_seconds < 0:
            raise ValueError(
                "CALLBACK_DELAY_SECONDS must not be negative, "
                f"got: {callback_delay_seconds}"
            )

        return cls(
            aws_region=aws_region,
            log_level=log_level,
            callback_delay_seconds=callback_delay_seconds,
        )


# Global config instance, built on first use
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ValueError: If environment variables are invalid.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config
