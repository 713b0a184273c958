"""Configuration models for easekit."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from easekit.core.math.protocols import MathBackend


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class EasingConfig(BaseModel):
    """Library configuration.

    ``math_backend`` picks the arithmetic kernel bound to the module-level
    easing functions. It is read once, the first time one of them is called.

    Example:
        >>> EasingConfig().math_backend
        <MathBackend.NATIVE: 'native'>
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    math_backend: MathBackend = Field(
        default=MathBackend.NATIVE,
        description="Arithmetic kernel: 'native' (numpy) or 'own' (iterative methods)",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def default_path(cls) -> Path:
        """Default path for library config."""
        return Path("easekit.yaml")
