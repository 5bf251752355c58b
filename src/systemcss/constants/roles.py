"""Selector roles and the fixed order in which they are matched."""

from __future__ import annotations

BLOCK: str = "block"
ELEMENT: str = "element"
MODIFIER: str = "modifier"
STATE: str = "state"
CONTEXT: str = "context"
UTIL: str = "util"
PARENT: str = "parent"
OTHER: str = "other"

# Matching order for keyword patterns. A fragment is assigned the first role
# in this sequence whose pattern matches it.
ROLE_ORDER: tuple[str, ...] = (BLOCK, ELEMENT, MODIFIER, STATE, CONTEXT, UTIL, PARENT)

# Roles whose prefix is anchored to the configured root selector.
ROOT_ANCHORED_ROLES: frozenset[str] = frozenset({CONTEXT, UTIL})
