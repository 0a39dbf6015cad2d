"""Validator for extensions enabled in the service section."""

from __future__ import annotations

from typing import Any

from pipescope.config.models import CollectorConfig
from pipescope.validation.registry import register_validator
from pipescope.validation.types import BaseValidator, ValidationIssue


@register_validator("otel-extensions")
class OTelExtensionsValidator(BaseValidator):
    """Checks that every extension listed in `service.extensions` is defined."""

    def validate(self, raw_text: str, document: Any) -> list[ValidationIssue]:
        config = CollectorConfig.from_document(document)
        if config is None or config.service is None:
            return []

        defined = set(config.extensions)
        return [
            self.issue(
                f"Extension '{extension}' is used in service but not defined "
                "in extensions section",
                raw_text,
                ["service", "extensions"],
                target=extension,
            )
            for extension in config.service.extensions
            if extension not in defined
        ]
