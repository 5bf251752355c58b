"""Shared pytest fixtures for SystemCSS tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from systemcss.config import SystemConfig
from systemcss.dsl import SelectorCompiler


@pytest.fixture
def config() -> SystemConfig:
    """Return the default configuration."""
    return SystemConfig()


@pytest.fixture
def compiler(config: SystemConfig) -> SelectorCompiler:
    """Return a compiler bound to the default configuration."""
    return SelectorCompiler(config)


@pytest.fixture
def write_config(tmp_path: Path):
    """Write ``systemcss.yaml`` into ``tmp_path`` and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "systemcss.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
