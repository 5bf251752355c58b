"""Render and write preprocessor mixins that implement the selector DSL.

Each configured keyword becomes a mixin named ``namespace + keyword`` in
the chosen preprocessor (Sass, SCSS, Less or Stylus).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from systemcss.config import SystemConfig
from systemcss.constants.mixins import (
    MIXIN_TEMP_PREFIX,
    MIXIN_TEMP_SUFFIX,
    TEMPLATE_SUFFIX,
    TEMPLATES_DIR,
)
from systemcss.constants.roles import ROLE_ORDER
from systemcss.exceptions import ConfigError
from systemcss.io import write_text_atomic

logger = logging.getLogger(__name__)

MISSING_ENGINE_MESSAGE: str = "Please specify the name of the CSS preprocessor you wish to receive mixins for."
MISSING_OUTPUT_MESSAGE: str = (
    "Please specify a directory path. SystemCSS cannot write your mixins to a directory it does not know."
)


def _stylus_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


@lru_cache(maxsize=1)
def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
    )
    env.filters["stylus_string"] = _stylus_string
    return env


def _require_engine(config: SystemConfig) -> str:
    engine = config.preprocessor.engine
    if not engine:
        raise ConfigError(MISSING_ENGINE_MESSAGE)
    if engine not in config.extensions:
        raise ConfigError(
            f"Unknown CSS preprocessor {engine!r}; expected one of: {', '.join(sorted(config.extensions))}"
        )
    return engine


def template_context(config: SystemConfig) -> dict[str, Any]:
    """Template variables: per-role macro names, raw prefixes and suffixes."""
    namespace = config.preprocessor.namespace
    return {
        "root": config.root,
        "namespace": namespace,
        "macro": {role: f"{namespace}{config.keyword_for(role)}" for role in ROLE_ORDER},
        "prefix": config.prefixes.to_dict(),
        "suffix": config.suffixes.to_dict(),
        "protected_states": list(config.protected_states),
    }


def clean_template(text: str) -> str:
    """Drop blank lines and surrounding whitespace from rendered mixins."""
    return "\n".join(line for line in text.split("\n") if line.strip()).strip()


def render_mixins(config: SystemConfig) -> str:
    """Render the mixin source for ``config.preprocessor.engine``.

    Raises ConfigError when the engine is missing, unknown or has no template.
    """
    engine = _require_engine(config)
    try:
        template = _environment().get_template(f"{engine}{TEMPLATE_SUFFIX}")
    except TemplateNotFound as exc:
        raise ConfigError(f"No mixin template available for preprocessor {engine!r}") from exc
    return clean_template(template.render(**template_context(config)))


def mixin_destination(config: SystemConfig) -> Path:
    """Return ``<output>/<filename>.<ext>`` for the configured engine."""
    _require_engine(config)
    output = config.preprocessor.output
    if output is None:
        raise ConfigError(MISSING_OUTPUT_MESSAGE)
    return output / f"{config.preprocessor.filename}.{config.mixin_extension}"


def write_mixins(config: SystemConfig) -> Path:
    """Render mixins and write them atomically; return the written path.

    Configuration problems raise ConfigError before anything touches the
    filesystem. OSError from the write propagates unchanged.
    """
    dest = mixin_destination(config)
    content = render_mixins(config)
    write_text_atomic(
        path=dest,
        content=content,
        temp_prefix=MIXIN_TEMP_PREFIX,
        temp_suffix=MIXIN_TEMP_SUFFIX,
    )
    logger.info("Wrote %s mixins to %s", config.preprocessor.engine, dest)
    return dest
