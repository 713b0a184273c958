"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from easekit.core.config.models import EasingConfig
from easekit.core.math.protocols import MathBackend
from easekit.core.utils.json import read_json

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "EASEKIT_CONFIG"
FORCE_OWN_MATH_ENV = "EASEKIT_FORCE_OWN_MATH"

_config_cache: EasingConfig | None = None


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("easekit.json")
        'json'
        >>> detect_format("easekit.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Supports both JSON and YAML formats, auto-detected from the extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            return read_json(path)
        except Exception as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(
            f"Invalid YAML in {path}: expected a mapping, got {type(content).__name__}"
        )
    return content


def _default_path() -> Path:
    return Path(os.getenv(CONFIG_PATH_ENV) or EasingConfig.default_path())


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() not in ("", "0", "false", "no", "off")


def load_easing_config(path: str | Path | None = None) -> EasingConfig:
    """Load and validate library configuration.

    An explicit ``path`` must exist. Without one, ``$EASEKIT_CONFIG`` or
    ``easekit.yaml`` is used when present and defaults otherwise; that result
    is cached. A truthy ``$EASEKIT_FORCE_OWN_MATH`` forces the own kernel.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Validated EasingConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If the file cannot be parsed
        ValidationError: If config is invalid
    """
    global _config_cache

    if path is None:
        if _config_cache is not None:
            return _config_cache
        default = _default_path()
        config = (
            EasingConfig.model_validate(load_config(default))
            if default.exists()
            else EasingConfig()
        )
    else:
        config = EasingConfig.model_validate(load_config(path))

    if _env_flag(FORCE_OWN_MATH_ENV) and config.math_backend != MathBackend.OWN:
        logger.debug("%s set, forcing own math kernel", FORCE_OWN_MATH_ENV)
        config = config.model_copy(update={"math_backend": MathBackend.OWN})

    if path is None:
        _config_cache = config

    return config


def reset_config_cache() -> None:
    """Forget the cached default configuration."""
    global _config_cache
    _config_cache = None
