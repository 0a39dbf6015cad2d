"""PipeScope - configuration validation and pipeline topology for OpenTelemetry collectors.

PipeScope statically analyzes a collector's YAML configuration. It reports
structural problems with exact source positions, and derives a renderable
graph of each pipeline's data flow annotated with live component metrics.
Both engines are pure functions of their inputs.

Example:
    >>> from pipescope import build_topology, validate_text
    >>>
    >>> result = validate_text(raw_text)
    >>> result.valid
    False
    >>> result.errors[0].message
    "Receiver 'ghost' is used in pipeline 'traces' but not defined in receivers section"

    >>> graph = build_topology(raw_text, metrics)
    >>> [edge.id for edge in graph.edges]
    ['edge-traces-otlp-to-batch', 'edge-traces-batch-to-debug']
"""

from pipescope.config import (
    CollectorConfig,
    ConfigLoader,
    LayoutConfig,
    PipelineSpec,
    ServiceConfig,
)
from pipescope.enums import ComponentRole, NodeKind, Severity
from pipescope.exceptions import (
    ConfigParseError,
    PipeScopeError,
    SerializationError,
    ValidatorNotFoundError,
)
from pipescope.navigation import (
    ComponentLocation,
    CursorContext,
    locate_components,
    resolve_context,
)
from pipescope.topology import (
    ComponentMetrics,
    Edge,
    Node,
    Position,
    RawMetricSample,
    TopologyBuilder,
    TopologyGraph,
    aggregate_component_metrics,
    build_topology,
)
from pipescope.validation import (
    BaseValidator,
    SourceSpan,
    ValidationIssue,
    ValidationResult,
    Validator,
    ValidatorRegistry,
    create_validation_error,
    default_validators,
    find_position,
    get_validator_registry,
    register_validator,
    validate_config,
    validate_text,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "PipeScopeError",
    "ConfigParseError",
    "ValidatorNotFoundError",
    "SerializationError",
    # Enums
    "Severity",
    "ComponentRole",
    "NodeKind",
    # Config
    "ConfigLoader",
    "CollectorConfig",
    "ServiceConfig",
    "PipelineSpec",
    "LayoutConfig",
    # Validation
    "SourceSpan",
    "find_position",
    "create_validation_error",
    "ValidationIssue",
    "ValidationResult",
    "Validator",
    "BaseValidator",
    "ValidatorRegistry",
    "get_validator_registry",
    "register_validator",
    "default_validators",
    "validate_config",
    "validate_text",
    # Topology
    "TopologyBuilder",
    "build_topology",
    "TopologyGraph",
    "Node",
    "Edge",
    "Position",
    "ComponentMetrics",
    "RawMetricSample",
    "aggregate_component_metrics",
    # Navigation
    "ComponentLocation",
    "CursorContext",
    "locate_components",
    "resolve_context",
]
