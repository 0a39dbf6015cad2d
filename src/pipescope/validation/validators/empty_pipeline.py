"""Validator for pipelines missing a source or a sink."""

from __future__ import annotations

from typing import Any

from pipescope.config.models import CollectorConfig
from pipescope.enums import Severity
from pipescope.validation.registry import register_validator
from pipescope.validation.types import BaseValidator, ValidationIssue


@register_validator("otel-empty-pipeline", default=False)
class OTelEmptyPipelineValidator(BaseValidator):
    """Warns about pipelines with no receivers or no exporters.

    Not part of the default set; add it explicitly to the validator list.
    """

    def validate(self, raw_text: str, document: Any) -> list[ValidationIssue]:
        config = CollectorConfig.from_document(document)
        if config is None:
            return []

        issues: list[ValidationIssue] = []
        for pipeline_name, pipeline in config.pipelines.items():
            path = ["service", "pipelines", pipeline_name]
            if not pipeline.receivers:
                issues.append(
                    self.issue(
                        f"Pipeline '{pipeline_name}' must have at least one receiver",
                        raw_text,
                        path,
                        severity=Severity.WARNING,
                    )
                )
            if not pipeline.exporters:
                issues.append(
                    self.issue(
                        f"Pipeline '{pipeline_name}' must have at least one exporter",
                        raw_text,
                        path,
                        severity=Severity.WARNING,
                    )
                )
        return issues
