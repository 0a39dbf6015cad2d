"""Validator for component references inside pipelines."""

from __future__ import annotations

from typing import Any

from pipescope.config.models import CollectorConfig
from pipescope.enums import ComponentRole, Severity
from pipescope.validation.registry import register_validator
from pipescope.validation.types import BaseValidator, ValidationIssue


@register_validator("otel-pipeline")
class OTelPipelineValidator(BaseValidator):
    """Checks that every component named in a pipeline is defined.

    Connectors are accepted wherever a receiver or an exporter is
    expected, since a connector is the exporter of one pipeline and the
    receiver of another.
    """

    def validate(self, raw_text: str, document: Any) -> list[ValidationIssue]:
        config = CollectorConfig.from_document(document)
        if config is None:
            return []

        defined = {
            ComponentRole.RECEIVER: config.receiver_names(),
            ComponentRole.PROCESSOR: config.processor_names(),
            ComponentRole.EXPORTER: config.exporter_names(),
        }

        issues: list[ValidationIssue] = []
        for pipeline_name, pipeline in config.pipelines.items():
            for role, names in (
                (ComponentRole.RECEIVER, pipeline.receivers),
                (ComponentRole.PROCESSOR, pipeline.processors),
                (ComponentRole.EXPORTER, pipeline.exporters),
            ):
                for name in names:
                    if name in defined[role]:
                        continue
                    issues.append(
                        self.issue(
                            f"{role.value.capitalize()} '{name}' is used in pipeline "
                            f"'{pipeline_name}' but not defined in {role.section} section",
                            raw_text,
                            ["service", "pipelines", pipeline_name, role.section],
                            target=name,
                            severity=Severity.ERROR,
                        )
                    )
        return issues
