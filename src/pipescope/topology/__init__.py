"""PipeScope pipeline topology.

This module provides the graph builder and its supporting pieces:

- TopologyBuilder / build_topology: configuration text -> node/edge graph
- Node, Edge, TopologyGraph: the generic graph shape
- ComponentMetrics, aggregate_component_metrics: per-component metrics
"""

from .builder import TopologyBuilder, build_topology, pipeline_label, pipeline_signal
from .metrics import (
    ComponentMetrics,
    RawMetricSample,
    aggregate_component_metrics,
    format_error_rate,
    format_throughput,
)
from .models import Edge, Node, Position, TopologyGraph

__all__ = [
    # Builder
    "TopologyBuilder",
    "build_topology",
    "pipeline_label",
    "pipeline_signal",
    # Models
    "Edge",
    "Node",
    "Position",
    "TopologyGraph",
    # Metrics
    "ComponentMetrics",
    "RawMetricSample",
    "aggregate_component_metrics",
    "format_error_rate",
    "format_throughput",
]
