"""Selector renderer: turn classified targets back into CSS selector text.

Rendering is one left-to-right pass that looks back at the previous target:

- a target with a pseudo-selector is emitted as-is, followed by a space
- literal CSS is separated from its neighbours by a space
- an element after a modifier or state re-attaches to its block:
  ``component(card) when(active) has(title)`` -> ``.card.\\+active .card--title``
- a context after a block is emitted before it:
  ``component(nav) inside(header)`` -> ``#system .\\@header .nav``
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from systemcss.config import SystemConfig
from systemcss.constants.dsl import STATE_CHAIN_SEPARATOR, STATE_PAST_TENSE_SUFFIX
from systemcss.constants.roles import BLOCK, CONTEXT, ELEMENT, MODIFIER, OTHER, STATE
from systemcss.types.dsl import TargetAbstraction


def normalize_state(name: str, protected_states: Sequence[str]) -> str:
    """Drop a trailing "ed" from each chained state: ``hovered:focused`` -> ``hover:focus``."""
    parts: list[str] = []
    for part in name.split(STATE_CHAIN_SEPARATOR):
        head, paren, rest = part.partition("(")
        if head not in protected_states:
            head = head.removesuffix(STATE_PAST_TENSE_SUFFIX)
        parts.append(f"{head}{paren}{rest}")
    return STATE_CHAIN_SEPARATOR.join(parts)


def render_targets(targets: Sequence[TargetAbstraction], config: SystemConfig) -> str:
    """Render one expanded clause. Never raises."""
    targets = [
        replace(target, name=normalize_state(target.name, config.protected_states))
        if target.role == STATE
        else target
        for target in targets
    ]

    # One chunk per target so a later target can replace its predecessor's.
    chunks: list[str] = []
    for index, current in enumerate(targets):
        previous = targets[index - 1] if index > 0 else None
        previous_role = previous.role if previous is not None else None

        if current.pseudo:
            chunks.append(f"{current.render()} ")
            continue

        spacing = " " if OTHER in (current.role, previous_role) else ""

        if current.role == ELEMENT and previous_role in (MODIFIER, STATE):
            block = _owning_block(targets, index)
            if block is not None:
                # A pseudo chunk already ends in a space.
                chunks[-1] = chunks[-1].rstrip()
                chunks.append(f" {block.render()}{current.render()}")
                continue

        if current.role == CONTEXT and previous is not None and previous_role == BLOCK:
            chunks.pop()
            chunks.append(f" {current.render()} {previous.render()}")
            continue

        chunks.append(f"{spacing}{current.render()}")

    return "".join(chunks).strip()


def _owning_block(targets: Sequence[TargetAbstraction], index: int) -> TargetAbstraction | None:
    """Nearest block before ``index``, else the first block anywhere in the clause."""
    for target in reversed(targets[:index]):
        if target.role == BLOCK:
            return target
    return next((target for target in targets if target.role == BLOCK), None)
