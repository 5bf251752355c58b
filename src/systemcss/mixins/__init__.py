"""Preprocessor mixin generation."""

from __future__ import annotations

from systemcss.mixins.generator import mixin_destination, render_mixins, write_mixins

__all__ = ["mixin_destination", "render_mixins", "write_mixins"]
