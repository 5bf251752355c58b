"""Role classifier: build a target abstraction from one expanded fragment."""

from __future__ import annotations

import re
from functools import lru_cache
from re import Pattern

from systemcss.config import SystemConfig
from systemcss.constants.dsl import TARGET_PATTERN_TEMPLATE
from systemcss.constants.roles import OTHER, ROLE_ORDER
from systemcss.types.config import RoleTable
from systemcss.types.dsl import TargetAbstraction


@lru_cache(maxsize=32)
def target_patterns(mixins: RoleTable) -> tuple[tuple[str, Pattern[str]], ...]:
    return tuple(
        (role, re.compile(TARGET_PATTERN_TEMPLATE.format(keyword=re.escape(mixins.get(role))))) for role in ROLE_ORDER
    )


def classify_target(fragment: str, config: SystemConfig) -> TargetAbstraction:
    """Classify ``fragment`` by the first role whose keyword pattern matches.

    Anything else is literal CSS and comes back as an ``other`` target whose
    name is the fragment itself.
    """
    for role, pattern in target_patterns(config.mixins):
        match = pattern.match(fragment)
        if match is None:
            continue
        return TargetAbstraction(
            role=role,  # type: ignore[arg-type]
            name=match["name"],
            pseudo=match["pseudo"] or "",
            prefix=config.prefix_for(role),
            suffix=config.suffix_for(role),
        )
    return TargetAbstraction(role=OTHER, name=fragment)


def classify_clause(clause: str, config: SystemConfig) -> list[TargetAbstraction]:
    return [classify_target(fragment, config) for fragment in clause.split()]
