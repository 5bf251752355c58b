"""Call expander: turn multi-argument calls into one clause per combination.

``component(one, two) has(part, item)`` becomes::

    component(one) has(part),
    component(one) has(item),
    component(two) has(part),
    component(two) has(item)

The leftmost fragment varies slowest, so clauses keep source order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from systemcss.config import SystemConfig
from systemcss.constants.dsl import ARGUMENT_SEPARATOR, ARGUMENT_SPACING_PATTERN, CLAUSE_SEPARATOR
from systemcss.dsl.matcher import match_call
from systemcss.types.dsl import CallDefinition

logger = logging.getLogger(__name__)


def split_fragments(selector: str) -> list[str]:
    """Split a selector into whitespace-delimited fragments, keeping ``a, b`` together."""
    return ARGUMENT_SPACING_PATTERN.sub(ARGUMENT_SEPARATOR, selector).split()


def expand_fragment(fragment: str, config: SystemConfig) -> list[str]:
    definition = match_call(fragment, config) or CallDefinition.literal(fragment)
    return definition.expand()


def fold_expansions(expansions: Sequence[list[str]]) -> list[str]:
    """Combine per-fragment options right to left into full clauses."""
    combined = list(expansions[-1])
    for options in reversed(expansions[:-1]):
        combined = [f"{left} {right}" for left in options for right in combined]
    return combined


def expand_selector(selector: str, config: SystemConfig) -> list[str]:
    """Expand every multi-argument call in ``selector``.

    Returns ``[selector]`` untouched when no fragment is a DSL call.
    """
    fragments = split_fragments(selector)
    if not any(match_call(fragment, config) for fragment in fragments):
        return [selector]

    expansions = [expand_fragment(fragment, config) for fragment in fragments]
    if len(expansions) == 1:
        return expansions[0]

    clauses = fold_expansions(expansions)
    logger.debug("Expanded %r into %d clause(s)", selector, len(clauses))
    return clauses


def join_clauses(clauses: Sequence[str]) -> str:
    return CLAUSE_SEPARATOR.join(clauses)
