"""Selector compiler: the ``str -> str`` transform a stylesheet walker calls per rule."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from systemcss.config import SystemConfig
from systemcss.constants.roles import OTHER
from systemcss.dsl.classifier import classify_clause, classify_target
from systemcss.dsl.expander import expand_selector, join_clauses, split_fragments
from systemcss.dsl.renderer import render_targets

logger = logging.getLogger(__name__)

_OPENERS = {"(": ")", "[": "]"}


def split_selector_list(selector: str) -> list[str]:
    """Split a selector list on commas outside parentheses, brackets and quotes."""
    parts: list[str] = []
    closers: list[str] = []
    quote = ""
    start = 0
    for index, char in enumerate(selector):
        if quote:
            if char == quote and selector[index - 1] != "\\":
                quote = ""
        elif char in "\"'":
            quote = char
        elif char in _OPENERS:
            closers.append(_OPENERS[char])
        elif closers and char == closers[-1]:
            closers.pop()
        elif char == "," and not closers:
            parts.append(selector[start:index])
            start = index + 1
    parts.append(selector[start:])
    return parts


class SelectorCompiler:
    """Compile DSL selectors against one fixed configuration.

    Instances are stateless apart from the configuration, so a single
    compiler can be shared by concurrent callers.
    """

    def __init__(self, config: SystemConfig | None = None) -> None:
        self.config = config or SystemConfig()

    def __call__(self, selector: str) -> str:
        return self.transform(selector)

    def contains_dsl(self, selector: str) -> bool:
        """True when any fragment of ``selector`` uses a configured keyword."""
        return any(classify_target(fragment, self.config).role != OTHER for fragment in split_fragments(selector))

    def compile_clause(self, clause: str) -> str:
        return render_targets(classify_clause(clause, self.config), self.config)

    def transform(self, selector: str) -> str:
        """Return ``selector`` with every DSL call compiled to CSS.

        Plain CSS is returned unchanged; malformed calls pass through as
        literal text.
        """
        parts = [part.strip() for part in split_selector_list(selector)]
        if not any(self.contains_dsl(part) for part in parts):
            return selector

        clauses: list[str] = []
        for part in parts:
            if not part:
                continue
            if not self.contains_dsl(part):
                clauses.append(part)
                continue
            clauses.extend(self.compile_clause(clause) for clause in expand_selector(part, self.config))

        compiled = join_clauses(clauses)
        logger.debug("Compiled %r -> %r", selector, compiled)
        return compiled

    def transform_all(self, selectors: Iterable[str]) -> list[str]:
        return [self.transform(selector) for selector in selectors]


def transform_selector(selector: str, config: SystemConfig | None = None) -> str:
    """Compile a single selector. See :meth:`SelectorCompiler.transform`."""
    return SelectorCompiler(config).transform(selector)


def compile_selectors(selectors: Iterable[str], config: SystemConfig | None = None) -> list[str]:
    return SelectorCompiler(config).transform_all(selectors)
