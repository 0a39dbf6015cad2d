"""PipeScope validation runner.

Runs an ordered list of independent validators, merges their issues,
drops duplicates and decides validity. A validator that raises is logged
and skipped so it cannot hide the findings of the others.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pipescope.config.loader import ConfigLoader
from pipescope.enums import Severity
from pipescope.exceptions import ConfigParseError
from pipescope.validation.registry import get_validator_registry
from pipescope.validation.types import ValidationIssue, ValidationResult, Validator

logger = logging.getLogger(__name__)


def default_validators() -> list[Validator]:
    """Fresh instances of the default validators, in run order."""
    return get_validator_registry().defaults()


def deduplicate(issues: Sequence[ValidationIssue]) -> list[ValidationIssue]:
    """Drop issues repeating an earlier (message, line, column)."""
    seen: set[tuple[str, int, int]] = set()
    unique: list[ValidationIssue] = []
    for issue in issues:
        if issue.identity in seen:
            continue
        seen.add(issue.identity)
        unique.append(issue)
    return unique


def validate_config(
    raw_text: str,
    document: Any,
    validators: Sequence[Validator] | None = None,
) -> ValidationResult:
    """Validate a parsed configuration.

    Args:
        raw_text: Original configuration text, used for positions.
        document: Parsed form of raw_text.
        validators: Validators to run, in order. Defaults to the
            registry's default set.

    Returns:
        ValidationResult whose `valid` is True iff no ERROR issue survived.
    """
    if validators is None:
        validators = default_validators()

    collected: list[ValidationIssue] = []
    for validator in validators:
        name = getattr(validator, "name", type(validator).__name__)
        try:
            issues = list(validator.validate(raw_text, document))
        except Exception:
            logger.exception("Validator %s failed", name)
            continue
        logger.debug("Validator %s reported %d issue(s)", name, len(issues))
        collected.extend(issues)

    return ValidationResult.from_issues(deduplicate(collected))


def validate_text(
    raw_text: str,
    validators: Sequence[Validator] | None = None,
    loader: ConfigLoader | None = None,
) -> ValidationResult:
    """Parse and validate configuration text in one step.

    Blank text is valid. Text that is not YAML yields a single ERROR issue
    placed where the parser stopped (line 1, column 1 if unknown); the
    validators are not run in that case.
    """
    loader = loader or ConfigLoader()
    try:
        document = loader.load_from_string(raw_text)
    except ConfigParseError as e:
        logger.debug("Skipping validators, configuration does not parse: %s", e)
        return ValidationResult.from_issues(
            [
                ValidationIssue(
                    message=str(e),
                    severity=Severity.ERROR,
                    line=e.line or 1,
                    column=e.column or 1,
                )
            ]
        )

    if document is None:
        return ValidationResult()
    return validate_config(raw_text, document, validators)
