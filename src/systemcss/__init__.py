"""SystemCSS: compile a compact selector DSL into plain CSS selectors."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from systemcss.config import SystemConfig, build_config, load_config
from systemcss.dsl import SelectorCompiler, transform_selector
from systemcss.mixins import render_mixins, write_mixins

__all__ = [
    "SelectorCompiler",
    "SystemConfig",
    "__version__",
    "build_config",
    "load_config",
    "render_mixins",
    "transform_selector",
    "write_mixins",
]

try:
    __version__ = version("systemcss")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
