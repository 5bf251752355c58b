"""Config validation for SystemCSS.

Every check appends a :class:`ValidationError` instead of raising, so a
single pass reports all problems in a file. ``build_config`` reuses the
same checks and raises on the first batch.
"""

from __future__ import annotations

import difflib
from collections import Counter
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from systemcss.constants.config import CONFIG_FILENAME, DEFAULT_MIXINS, PROTECTED_STATES_ALIAS
from systemcss.constants.dsl import KEYWORD_PATTERN
from systemcss.constants.roles import ROLE_ORDER
from systemcss.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_PREPROCESSOR_KEYS,
    ALLOWED_ROLE_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    ROLE_TABLE_KEYS,
)
from systemcss.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a systemcss.yaml file and return all validation errors.

    A missing implicit config file is valid (defaults apply). This function
    never raises.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
                line=(mark.line + 1) if mark is not None else None,
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    return validate_config_mapping(raw, path_str)


def validate_config_mapping(
    raw: Mapping[str, Any],
    path_str: str,
    *,
    base_mixins: Mapping[str, str] | None = None,
) -> list[ValidationError]:
    """Validate an override mapping as it would be merged onto ``base_mixins``."""
    errors: list[ValidationError] = []

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    if "root" in raw and (not isinstance(raw["root"], str) or not raw["root"].strip()):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="root",
                message="invalid type for `root`",
                hint="expected a non-empty selector string",
            )
        )

    for table_key in ROLE_TABLE_KEYS:
        _validate_role_table(raw, table_key, path_str, errors)

    _validate_protected_states(raw, path_str, errors)
    _validate_preprocessor_block(raw, path_str, errors)
    _validate_extensions_block(raw, path_str, errors)
    _validate_keywords(raw, path_str, errors, base_mixins or DEFAULT_MIXINS)

    return errors


def _validate_role_table(
    raw: Mapping[str, Any],
    table_key: str,
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate a ``mixins``/``prefixes``/``suffixes`` mapping of role to string."""
    table = raw.get(table_key)
    if table is None:
        return
    if not isinstance(table, dict):
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field=table_key,
                message=f"`{table_key}` must be a mapping of role to string",
            )
        )
        return

    for role in sorted(table.keys(), key=str):
        if role not in ALLOWED_ROLE_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"{table_key}.{role}",
                    message=f"unknown role `{role}` in `{table_key}`",
                    hint=_suggest_key(str(role), ALLOWED_ROLE_KEYS),
                )
            )
        elif not isinstance(table[role], str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{table_key}.{role}",
                    message=f"invalid type for `{table_key}.{role}`",
                    hint="expected a string",
                )
            )


def _validate_keywords(
    raw: Mapping[str, Any],
    path_str: str,
    errors: list[ValidationError],
    base_mixins: Mapping[str, str],
) -> None:
    """Keywords must be identifier-like and distinct across roles once merged."""
    overrides = raw.get("mixins")
    if not isinstance(overrides, dict):
        overrides = {}

    merged: dict[str, str] = {}
    for role in ROLE_ORDER:
        keyword = overrides.get(role, base_mixins.get(role))
        if not isinstance(keyword, str):
            continue
        if not KEYWORD_PATTERN.match(keyword):
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=f"mixins.{role}",
                    message=f"invalid keyword {keyword!r} for role `{role}`",
                    hint="keywords must start with a letter or underscore and contain only letters, digits, - or _",
                )
            )
            continue
        merged[role] = keyword

    counts = Counter(merged.values())
    for keyword in sorted(kw for kw, count in counts.items() if count > 1):
        roles = [role for role in ROLE_ORDER if merged.get(role) == keyword]
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="mixins",
                message=f"keyword `{keyword}` is used by more than one role: {', '.join(roles)}",
                hint="every role needs its own keyword",
            )
        )


def _validate_protected_states(
    raw: Mapping[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    present = [key for key in ("protected_states", PROTECTED_STATES_ALIAS) if key in raw]
    if len(present) > 1:
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="protected_states",
                message=f"both `protected_states` and `{PROTECTED_STATES_ALIAS}` are set",
                hint="keep only one of them",
            )
        )
    for key in present:
        val = raw[key]
        if val is not None and (not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val)):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a list of strings",
                )
            )


def _validate_preprocessor_block(
    raw: Mapping[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``preprocessor`` nested mapping."""
    block = raw.get("preprocessor")
    if block is None:
        return
    if not isinstance(block, dict):
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field="preprocessor",
                message="`preprocessor` must be a mapping",
            )
        )
        return

    for key in sorted(block.keys(), key=str):
        if key not in ALLOWED_PREPROCESSOR_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"preprocessor.{key}",
                    message=f"unknown key `{key}` in `preprocessor`",
                    hint=_suggest_key(str(key), ALLOWED_PREPROCESSOR_KEYS),
                )
            )

    for key in ("engine", "output"):
        val = block.get(key)
        if val is not None and not isinstance(val, (str, Path)):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"preprocessor.{key}",
                    message=f"invalid type for `preprocessor.{key}`",
                    hint="expected a string",
                )
            )

    if "namespace" in block and not isinstance(block["namespace"], str):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="preprocessor.namespace",
                message="invalid type for `preprocessor.namespace`",
                hint="expected a string",
            )
        )

    if "filename" in block and (not isinstance(block["filename"], str) or not block["filename"].strip()):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="preprocessor.filename",
                message="invalid type for `preprocessor.filename`",
                hint="expected a non-empty string",
            )
        )


def _validate_extensions_block(
    raw: Mapping[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    block = raw.get("extensions")
    if block is None:
        return
    if not isinstance(block, dict):
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field="extensions",
                message="`extensions` must be a mapping of engine to file extension",
            )
        )
        return
    for engine in sorted(block.keys(), key=str):
        if not isinstance(engine, str) or not isinstance(block[engine], str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"extensions.{engine}",
                    message=f"invalid type for `extensions.{engine}`",
                    hint="expected a string extension such as `scss`",
                )
            )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
