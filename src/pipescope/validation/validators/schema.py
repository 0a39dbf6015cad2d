"""Structural validator for component definitions.

Full validation against each component's plugin schema needs a remote
lookup and is out of scope here. This validator only checks what can be
decided from the document itself: instance naming and the shape of each
instance's configuration value.
"""

from __future__ import annotations

import re
from typing import Any

from pipescope.enums import Severity
from pipescope.validation.registry import register_validator
from pipescope.validation.types import BaseValidator, ValidationIssue

COMPONENT_SECTIONS = ("receivers", "processors", "exporters", "connectors", "extensions")

_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")


def is_valid_component_name(name: str) -> bool:
    """Names start with a letter or underscore, then letters, digits, `_` or `-`."""
    return _NAME_RE.fullmatch(name) is not None


@register_validator("otel-schema")
class OTelSchemaValidator(BaseValidator):
    """Flags badly named instances and non-mapping instance configurations."""

    def validate(self, raw_text: str, document: Any) -> list[ValidationIssue]:
        if not isinstance(document, dict):
            return []

        issues: list[ValidationIssue] = []
        for section in COMPONENT_SECTIONS:
            components = document.get(section)
            if components is None:
                continue
            if not isinstance(components, dict):
                issues.append(
                    self.issue(
                        f"'{section}' section must be a mapping of component "
                        f"names to configurations, got {type(components).__name__}",
                        raw_text,
                        [section],
                    )
                )
                continue
            for name, component_config in components.items():
                issues.extend(
                    self._check_component(raw_text, section, str(name), component_config)
                )
        return issues

    def _check_component(
        self, raw_text: str, section: str, name: str, component_config: Any
    ) -> list[ValidationIssue]:
        path = [section, name]
        issues: list[ValidationIssue] = []

        if not is_valid_component_name(name):
            issues.append(
                self.issue(
                    f"Invalid {section} name '{name}': component names must be "
                    "alphanumeric and may contain underscores or hyphens",
                    raw_text,
                    path,
                    severity=Severity.WARNING,
                )
            )

        if component_config is None:
            message = (
                f"{section} '{name}' has null configuration "
                "(should be an object or omitted)"
            )
        elif isinstance(component_config, list):
            message = f"{section} '{name}' has array configuration (should be an object)"
        elif not isinstance(component_config, dict):
            message = (
                f"{section} '{name}' has invalid configuration type "
                f"'{type(component_config).__name__}' (should be an object)"
            )
        elif not component_config:
            issues.append(
                self.issue(
                    f"{section} '{name}' has empty configuration",
                    raw_text,
                    path,
                    severity=Severity.WARNING,
                )
            )
            return issues
        else:
            return issues

        issues.append(self.issue(message, raw_text, path, severity=Severity.ERROR))
        return issues
