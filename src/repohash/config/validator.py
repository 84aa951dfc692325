"""Config file validation for Repohash runs."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from repohash.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    BOOLEAN_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    POSITIVE_INT_CONFIG_KEYS,
)
from repohash.exceptions.validation import ValidationError


def validate_config_file(config_path: Path) -> list[ValidationError]:
    """Validate a YAML config file and return all validation errors.

    This is the collect-all counterpart of :func:`load_config` used by CLI
    preflight. It never raises; every problem is returned as a
    :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    path = config_path.resolve()
    path_str = str(path)

    if not path.is_file():
        errors.append(ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}"))
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
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

    for key in BOOLEAN_CONFIG_KEYS:
        if key in raw and not isinstance(raw[key], bool):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must be a boolean",
                    hint=f"got: {raw[key]!r}",
                )
            )

    for key in POSITIVE_INT_CONFIG_KEYS:
        if key not in raw:
            continue
        val = raw[key]
        if isinstance(val, bool) or not isinstance(val, int):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must be an integer",
                    hint=f"got: {val!r}",
                )
            )
        elif val < 1:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must be >= 1",
                    hint=f"got: {val}",
                )
            )

    return errors


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for a misspelled key, or empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
