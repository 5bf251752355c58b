"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "systemcss.yaml"

DEFAULT_ROOT: str = "#system"

DEFAULT_MIXINS: dict[str, str] = {
    "block": "component",
    "element": "has",
    "modifier": "when",
    "state": "is",
    "context": "inside",
    "util": "util",
    "parent": "container",
}

DEFAULT_PREFIXES: dict[str, str] = {
    "block": ".",
    "element": "--",
    "modifier": ".\\+",
    "state": ":",
    "context": ".\\@",
    "util": ".\\~",
    "parent": ".\\@",
}

DEFAULT_SUFFIXES: dict[str, str] = {
    "block": "",
    "element": "",
    "modifier": "",
    "state": "",
    "context": "",
    "util": "",
    "parent": "",
}

DEFAULT_PROTECTED_STATES: tuple[str, ...] = (
    "enabled",
    "disabled",
    "checked",
    "required",
    "visited",
)

DEFAULT_EXTENSIONS: dict[str, str] = {
    "sass": "sass",
    "scss": "scss",
    "stylus": "styl",
    "less": "less",
}

DEFAULT_MIXIN_FILENAME: str = "system"
DEFAULT_MIXIN_NAMESPACE: str = ""

PROTECTED_STATES_ALIAS: str = "protectedStates"
