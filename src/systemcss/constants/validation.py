"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

from systemcss.constants.roles import ROLE_ORDER

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid keyword
CFG007: str = "CFG007"  # duplicate keyword across roles
CFG008: str = "CFG008"  # invalid nested mapping

ALL_CFG_CODES: tuple[str, ...] = (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
)

ROLE_TABLE_KEYS: tuple[str, ...] = ("mixins", "prefixes", "suffixes")

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "root",
        "mixins",
        "prefixes",
        "suffixes",
        "protected_states",
        "protectedStates",
        "preprocessor",
        "extensions",
    }
)

ALLOWED_ROLE_KEYS: frozenset[str] = frozenset(ROLE_ORDER)
ALLOWED_PREPROCESSOR_KEYS: frozenset[str] = frozenset({"engine", "output", "namespace", "filename"})
