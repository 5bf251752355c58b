"""Token matcher: recognise ``keyword(arg1,arg2)[:pseudo]`` fragments."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from re import Pattern

from systemcss.config import SystemConfig
from systemcss.constants.dsl import ARGUMENT_SEPARATOR, CALL_PATTERN_TEMPLATE
from systemcss.constants.roles import ROLE_ORDER
from systemcss.types.config import RoleTable
from systemcss.types.dsl import CallDefinition

logger = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def call_patterns(mixins: RoleTable) -> tuple[tuple[str, Pattern[str]], ...]:
    """Compile one call pattern per role, in ``ROLE_ORDER``."""
    patterns = tuple(
        (role, re.compile(CALL_PATTERN_TEMPLATE.format(keyword=re.escape(mixins.get(role))))) for role in ROLE_ORDER
    )
    logger.debug("Compiled call patterns for keywords: %s", ", ".join(mixins.get(role) for role in ROLE_ORDER))
    return patterns


def match_call(fragment: str, config: SystemConfig) -> CallDefinition | None:
    """Return the call definition for ``fragment``, or None when it is not a DSL call.

    Arguments are split on commas; blank arguments are dropped and a call
    left with no arguments does not match.
    """
    for _role, pattern in call_patterns(config.mixins):
        match = pattern.match(fragment)
        if match is None:
            continue
        args = tuple(arg.strip() for arg in match["args"].split(ARGUMENT_SEPARATOR) if arg.strip())
        if not args:
            return None
        return CallDefinition(keyword=match["keyword"], args=args, pseudo=match["pseudo"] or "")
    return None
