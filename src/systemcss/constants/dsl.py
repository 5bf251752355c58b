"""Patterns and separators used by the selector compiler."""

from __future__ import annotations

import re
from re import Pattern

CLAUSE_SEPARATOR: str = ",\n"
ARGUMENT_SEPARATOR: str = ","

# ", " inside a selector is an argument separator, never a fragment boundary.
ARGUMENT_SPACING_PATTERN: Pattern[str] = re.compile(r",\s+")

# Keywords become part of a regex and a preprocessor macro name.
KEYWORD_PATTERN: Pattern[str] = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")

# keyword(arg1,arg2)[:pseudo][,]
CALL_PATTERN_TEMPLATE: str = r"^(?P<keyword>{keyword})\((?P<args>[^():]+)\)(?::(?P<pseudo>\S+?))?,?$"

# keyword(name)[:pseudo][,] where name may chain states with ":".
TARGET_PATTERN_TEMPLATE: str = r"^{keyword}\((?P<name>[^()]+)\)(?P<pseudo>:\S+?)?,?$"

STATE_PAST_TENSE_SUFFIX: str = "ed"
STATE_CHAIN_SEPARATOR: str = ":"
