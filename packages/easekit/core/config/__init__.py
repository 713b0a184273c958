"""Configuration models and loaders."""

from easekit.core.config.loader import (
    detect_format,
    load_config,
    load_easing_config,
    reset_config_cache,
)
from easekit.core.config.models import EasingConfig, LoggingConfig

__all__ = [
    "EasingConfig",
    "LoggingConfig",
    "detect_format",
    "load_config",
    "load_easing_config",
    "reset_config_cache",
]
