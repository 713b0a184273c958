"""Shared utilities for easekit."""

from easekit.core.utils.json import dumps_json, read_json, write_json
from easekit.core.utils.logging import configure_logging

__all__ = [
    "configure_logging",
    "dumps_json",
    "read_json",
    "write_json",
]
