"""Preflight validation orchestrator.

Combines root, thread-count and config-file checks into a single entry
point so the CLI reports every startup problem before any traversal.
"""

from __future__ import annotations

from pathlib import Path

from repohash.config import validate_config_file
from repohash.constants.validation import CFG006, CFG007
from repohash.exceptions.validation import ValidationError, sort_errors


def preflight_validate(
    root: Path,
    config_path: Path | None = None,
    *,
    threads: int | None = None,
) -> list[ValidationError]:
    """Run all preflight validation checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    errors: list[ValidationError] = []
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        errors.append(
            ValidationError(
                code=CFG007,
                path=str(resolved_root),
                field="repo",
                message=f"repository folder does not exist: {resolved_root}",
            )
        )

    if threads is not None and threads < 1:
        errors.append(
            ValidationError(
                code=CFG006,
                path="--threads",
                field="threads",
                message="thread count must be >= 1",
                hint=f"got: {threads}",
            )
        )

    if config_path is not None:
        errors.extend(validate_config_file(config_path))
    return sort_errors(errors)
