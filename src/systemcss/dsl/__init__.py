"""Selector DSL compiler: matcher, expander, classifier and renderer."""

from __future__ import annotations

from systemcss.dsl.classifier import classify_clause, classify_target
from systemcss.dsl.compiler import SelectorCompiler, compile_selectors, split_selector_list, transform_selector
from systemcss.dsl.expander import expand_selector, join_clauses
from systemcss.dsl.matcher import match_call
from systemcss.dsl.renderer import normalize_state, render_targets

__all__ = [
    "SelectorCompiler",
    "classify_clause",
    "classify_target",
    "compile_selectors",
    "expand_selector",
    "join_clauses",
    "match_call",
    "normalize_state",
    "render_targets",
    "split_selector_list",
    "transform_selector",
]
