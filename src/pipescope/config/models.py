"""PipeScope configuration models.

Two kinds of models live here:

    CollectorConfig          lenient view of a collector YAML document
    ├── component sections   receivers/processors/exporters/connectors/extensions
    └── ServiceConfig
        ├── PipelineSpec{}   ordered pipeline wiring
        └── extensions[]

    LayoutConfig             geometry used by the topology builder

The collector models never reject a document. Odd shapes are coerced
(non-mapping sections become empty, scalar name lists become one-element
lists) so the graph builder can always produce something renderable.
Shape problems are reported separately by the structural validators.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_names(value: Any) -> list[str]:
    """Coerce a YAML name list into a list of strings."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    if isinstance(value, dict):
        return [str(key) for key in value]
    return [str(value)]


def _coerce_mapping(value: Any) -> dict[str, Any]:
    """Coerce a YAML section into a string-keyed dict."""
    if not isinstance(value, dict):
        return {}
    return {str(key): item for key, item in value.items()}


class PipelineSpec(BaseModel):
    """Wiring of a single pipeline.

    Attributes:
        receivers: Receiver (or connector) names, in declared order.
        processors: Processor names, in declared order.
        exporters: Exporter (or connector) names, in declared order.
    """

    model_config = ConfigDict(extra="ignore")

    receivers: list[str] = Field(default_factory=list)
    processors: list[str] = Field(default_factory=list)
    exporters: list[str] = Field(default_factory=list)

    @field_validator("receivers", "processors", "exporters", mode="before")
    @classmethod
    def parse_names(cls, v: Any) -> list[str]:
        """Accept scalars, null and mixed-type lists."""
        return _coerce_names(v)


class ServiceConfig(BaseModel):
    """The `service` section of a collector configuration.

    Attributes:
        pipelines: Pipeline name to wiring, in document order. None when
            the key is absent or null.
        extensions: Enabled extension names.
    """

    model_config = ConfigDict(extra="ignore")

    pipelines: dict[str, PipelineSpec] | None = None
    extensions: list[str] = Field(default_factory=list)

    @field_validator("pipelines", mode="before")
    @classmethod
    def parse_pipelines(cls, v: Any) -> dict[str, Any] | None:
        if v is None:
            return None
        return {
            name: spec if isinstance(spec, dict) else {}
            for name, spec in _coerce_mapping(v).items()
        }

    @field_validator("extensions", mode="before")
    @classmethod
    def parse_extensions(cls, v: Any) -> list[str]:
        return _coerce_names(v)


class CollectorConfig(BaseModel):
    """Typed view of an OpenTelemetry collector configuration.

    Attributes:
        receivers: Receiver instance name to raw configuration.
        processors: Processor instance name to raw configuration.
        exporters: Exporter instance name to raw configuration.
        connectors: Connector instance name to raw configuration.
        extensions: Extension instance name to raw configuration.
        service: The service section, or None when missing.
    """

    model_config = ConfigDict(extra="ignore")

    receivers: dict[str, Any] = Field(default_factory=dict)
    processors: dict[str, Any] = Field(default_factory=dict)
    exporters: dict[str, Any] = Field(default_factory=dict)
    connectors: dict[str, Any] = Field(default_factory=dict)
    extensions: dict[str, Any] = Field(default_factory=dict)
    service: ServiceConfig | None = None

    @field_validator(
        "receivers",
        "processors",
        "exporters",
        "connectors",
        "extensions",
        mode="before",
    )
    @classmethod
    def parse_section(cls, v: Any) -> dict[str, Any]:
        """Treat a missing or malformed section as empty."""
        return _coerce_mapping(v)

    @field_validator("service", mode="before")
    @classmethod
    def parse_service(cls, v: Any) -> dict[str, Any] | None:
        if not isinstance(v, dict):
            return None
        return _coerce_mapping(v)

    @classmethod
    def from_document(cls, document: Any) -> CollectorConfig | None:
        """Build a view from a parsed document.

        Args:
            document: Output of the YAML parser.

        Returns:
            CollectorConfig, or None if the document is not a mapping.
        """
        if not isinstance(document, dict):
            return None
        return cls.model_validate(_coerce_mapping(document))

    @property
    def pipelines(self) -> dict[str, PipelineSpec]:
        """Declared pipelines, empty when the service section has none."""
        if self.service is None or self.service.pipelines is None:
            return {}
        return self.service.pipelines

    def receiver_names(self) -> set[str]:
        """Names valid in a pipeline's receivers list (connectors included)."""
        return set(self.receivers) | set(self.connectors)

    def processor_names(self) -> set[str]:
        return set(self.processors)

    def exporter_names(self) -> set[str]:
        """Names valid in a pipeline's exporters list (connectors included)."""
        return set(self.exporters) | set(self.connectors)


class LayoutConfig(BaseModel):
    """Geometry for pipeline topology graphs, in layout units.

    Attributes:
        section_x: Left edge of every pipeline section.
        section_width: Width of a pipeline section.
        section_height: Height of a pipeline section.
        section_gap: Vertical gap between stacked sections.
        receiver_x: Column position of receivers.
        processor_x: Column position of processors.
        exporter_x: Column position of exporters.
        receiver_spacing: Maximum vertical spacing between receivers.
        processor_spacing: Maximum vertical spacing between processors.
        exporter_spacing: Maximum vertical spacing between exporters.
        spacing_margin: Height reserved when compressing a dense column.
        placeholder_x: Position of the placeholder node.
        placeholder_y: Position of the placeholder node.
    """

    model_config = ConfigDict(extra="forbid")

    section_x: float = 50
    section_width: float = Field(default=850, gt=0)
    section_height: float = Field(default=320, gt=0)
    section_gap: float = Field(default=40, ge=0)
    receiver_x: float = 100
    processor_x: float = 350
    exporter_x: float = 600
    receiver_spacing: float = Field(default=80, gt=0)
    processor_spacing: float = Field(default=100, gt=0)
    exporter_spacing: float = Field(default=80, gt=0)
    spacing_margin: float = Field(default=100, ge=0)
    placeholder_x: float = 300
    placeholder_y: float = 200
