"""Config loading and override merging for SystemCSS."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from systemcss.config.model import SystemConfig
from systemcss.config.validator import validate_config_mapping
from systemcss.constants.config import CONFIG_FILENAME, PROTECTED_STATES_ALIAS
from systemcss.exceptions import ConfigError
from systemcss.exceptions.validation import format_errors
from systemcss.types.config import PreprocessorConfig, RoleTable

logger = logging.getLogger(__name__)

OVERRIDES_SOURCE: str = "<overrides>"


def build_config(
    overrides: Mapping[str, Any] | None = None,
    *,
    base: SystemConfig | None = None,
    source: str = OVERRIDES_SOURCE,
) -> SystemConfig:
    """Deep-merge ``overrides`` onto ``base`` (defaults when omitted).

    Nested mappings merge key by key; lists and scalars replace. Raises
    ConfigError listing every problem found in ``overrides``.
    """
    base = base or SystemConfig()
    raw = dict(overrides or {})

    errors = validate_config_mapping(raw, source, base_mixins=base.mixins.to_dict())
    if errors:
        raise ConfigError(format_errors(errors))

    if PROTECTED_STATES_ALIAS in raw:
        raw["protected_states"] = raw.pop(PROTECTED_STATES_ALIAS)

    merged = _deep_merge(base.to_dict(), raw)
    return _config_from_mapping(merged)


def load_config(
    root: Path,
    config_path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> SystemConfig:
    """Load config from ``systemcss.yaml`` (or an explicit path), then apply ``overrides``."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No %s in %s, using defaults", CONFIG_FILENAME, root)
        return build_config(overrides)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    logger.debug("Loaded config from %s", path)
    config = build_config(raw, source=str(path))
    if overrides:
        config = build_config(overrides, base=config)
    return config


def _deep_merge(base: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict):
            # An empty YAML section (``mixins:``) keeps the defaults.
            if value is None:
                continue
            if isinstance(value, Mapping):
                merged[key] = _deep_merge(current, value)
                continue
        merged[key] = value
    return merged


def _config_from_mapping(data: dict[str, Any]) -> SystemConfig:
    preprocessor = data["preprocessor"]
    output = preprocessor.get("output")
    return SystemConfig(
        root=data["root"],
        mixins=RoleTable(**data["mixins"]),
        prefixes=RoleTable(**data["prefixes"]),
        suffixes=RoleTable(**data["suffixes"]),
        protected_states=tuple(data["protected_states"] or ()),
        preprocessor=PreprocessorConfig(
            engine=preprocessor.get("engine"),
            output=Path(output) if output else None,
            namespace=preprocessor["namespace"],
            filename=preprocessor["filename"],
        ),
        extensions=dict(data["extensions"]),
    )
