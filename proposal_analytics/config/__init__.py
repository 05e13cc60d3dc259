"""Configuration: environment settings and heuristic thresholds."""

from .config import Config, load_config, validate_config, load_runtime_thresholds, configure_logging
from .thresholds import AnalyticsThresholds, DEFAULT_THRESHOLDS, load_thresholds, save_thresholds

__all__ = [
    "Config",
    "load_config",
    "validate_config",
    "load_runtime_thresholds",
    "configure_logging",
    "AnalyticsThresholds",
    "DEFAULT_THRESHOLDS",
    "load_thresholds",
    "save_thresholds",
]
