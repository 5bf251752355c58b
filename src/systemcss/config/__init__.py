"""Configuration loading, validation, and merging for SystemCSS."""

from __future__ import annotations

from systemcss.config.loader import build_config, load_config
from systemcss.config.model import SystemConfig
from systemcss.config.validator import validate_config_file, validate_config_mapping

__all__ = [
    "SystemConfig",
    "build_config",
    "load_config",
    "validate_config_file",
    "validate_config_mapping",
]
