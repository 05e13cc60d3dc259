"""Runtime configuration for the analytics layer."""

import logging
import sys
from typing import Optional
from pydantic_settings import BaseSettings

from .thresholds import AnalyticsThresholds, load_thresholds


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Config(BaseSettings):
    """Application configuration from environment variables."""

    log_level: str = "INFO"
    analytics_thresholds_path: Optional[str] = None

    model_config = {"env_file": ".env", "case_sensitive": False}


def validate_config() -> Config:
    """Load and validate configuration from environment.

    Raises ValueError naming the offending variable(s) when a value cannot
    be parsed or the log level is unknown.
    """
    try:
        config = Config()
    except Exception as exc:
        raise ValueError(f"Invalid analytics configuration: {exc}") from exc

    level = config.log_level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(
            f"Invalid LOG_LEVEL: {config.log_level!r}. "
            "Use DEBUG, INFO, WARNING, ERROR or CRITICAL."
        )
    return config


def load_config() -> Config:
    """Load configuration from environment (startup entry point)."""
    return validate_config()


def load_runtime_thresholds(config: Config) -> AnalyticsThresholds:
    """Resolve the thresholds named by ANALYTICS_THRESHOLDS_PATH, or defaults."""
    return load_thresholds(config.analytics_thresholds_path)


def configure_logging(config: Config) -> None:
    """Install the stdout handler used by the host application."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
