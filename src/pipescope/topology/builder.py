"""PipeScope topology builder.

This module provides the TopologyBuilder class that turns collector
configuration text and observed component metrics into a renderable
graph: one section per pipeline, receivers fanning in to the processor
chain, and the last processor fanning out to the exporters.

Components are taken strictly from each pipeline's own lists. A
component defined in the document but not wired into a pipeline does
not appear in that pipeline's section.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from pipescope.config.loader import ConfigLoader
from pipescope.config.models import CollectorConfig, LayoutConfig, PipelineSpec
from pipescope.enums import ComponentRole, NodeKind
from pipescope.exceptions import ConfigParseError

from .layout import column_offsets, column_x, max_spacing, section_stride
from .metrics import (
    PIPELINE_TYPES,
    ComponentMetrics,
    MetricsKey,
    coerce_metrics,
    index_metrics,
)
from .models import Edge, Node, Position, TopologyGraph

logger = logging.getLogger(__name__)


def _unique(names: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(names))


def pipeline_signal(pipeline_name: str) -> str:
    """Signal of a pipeline: `traces/backup` -> `traces`."""
    return pipeline_name.split("/", 1)[0].lower()


def pipeline_label(pipeline_name: str) -> str:
    if pipeline_name in PIPELINE_TYPES:
        return pipeline_name.upper()
    return f"{pipeline_signal(pipeline_name).upper()} ({pipeline_name})"


def node_id(role: ComponentRole, pipeline_name: str, component_name: str) -> str:
    return f"{role.value}-{pipeline_name}-{component_name}"


def edge_id(pipeline_name: str, source: str, target: str) -> str:
    return f"edge-{pipeline_name}-{source}-to-{target}"


class TopologyBuilder:
    """Builds pipeline topology graphs from collector configuration.

    The builder holds only its layout and loader, so one instance can be
    shared and called concurrently. Identical inputs give identical
    graphs: ids come from pipeline and component names, never counters.

    Example:
        >>> builder = TopologyBuilder()
        >>> graph = builder.build(raw_text, metrics)
        >>> [node.id for node in graph.nodes]
        ['section-traces', 'receiver-traces-otlp', 'exporter-traces-debug']
    """

    def __init__(
        self,
        layout: LayoutConfig | None = None,
        loader: ConfigLoader | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            layout: Graph geometry. Uses LayoutConfig defaults if not provided.
            loader: Loader used to parse configuration text.
        """
        self._layout = layout or LayoutConfig()
        self._loader = loader or ConfigLoader()

    @property
    def layout(self) -> LayoutConfig:
        return self._layout

    def build(
        self,
        raw_text: str,
        metrics: Iterable[ComponentMetrics | dict[str, Any]] | None = None,
    ) -> TopologyGraph:
        """Build the topology graph of a configuration.

        Never raises for bad configuration text. Empty text, unparsable
        text, a missing service section and an empty pipeline mapping each
        produce a graph holding one placeholder node and no edges.

        Args:
            raw_text: Collector configuration text.
            metrics: Component metrics records (models or dicts), any order.

        Returns:
            A new TopologyGraph.
        """
        if not raw_text or not raw_text.strip():
            return self._placeholder("no-config", "No configuration available")

        try:
            document = self._loader.load_from_string(raw_text)
        except ConfigParseError as e:
            logger.warning("Cannot build topology, configuration does not parse: %s", e)
            return self._placeholder(
                "parse-error", f"Error parsing configuration: {e.detail}"
            )

        config = CollectorConfig.from_document(document)
        if config is None or config.service is None or config.service.pipelines is None:
            return self._placeholder("no-service", "No service configuration found")
        if not config.service.pipelines:
            return self._placeholder("no-pipelines", "No pipelines configured")

        records = coerce_metrics(metrics)
        index = index_metrics(records)

        graph = TopologyGraph()
        y_offset = 0.0
        for pipeline_name, pipeline in config.service.pipelines.items():
            self._add_pipeline(graph, pipeline_name, pipeline, y_offset, records, index)
            y_offset += section_stride(self._layout)

        logger.debug(
            "Built topology with %d pipeline(s), %d node(s), %d edge(s)",
            len(config.service.pipelines),
            len(graph.nodes),
            len(graph.edges),
        )
        return graph

    def _placeholder(self, placeholder_id: str, label: str) -> TopologyGraph:
        return TopologyGraph(
            nodes=[
                Node(
                    id=placeholder_id,
                    kind=NodeKind.PLACEHOLDER,
                    position=Position(
                        x=self._layout.placeholder_x, y=self._layout.placeholder_y
                    ),
                    data={"label": label},
                )
            ]
        )

    def _add_pipeline(
        self,
        graph: TopologyGraph,
        pipeline_name: str,
        pipeline: PipelineSpec,
        y_offset: float,
        records: Sequence[ComponentMetrics],
        index: dict[MetricsKey, ComponentMetrics],
    ) -> None:
        layout = self._layout
        signal = pipeline_signal(pipeline_name)
        signal_records = [r for r in records if r.pipeline_type == signal]

        graph.nodes.append(
            Node(
                id=f"section-{pipeline_name}",
                kind=NodeKind.SECTION,
                position=Position(x=layout.section_x, y=y_offset),
                data={
                    "type": signal,
                    "label": pipeline_label(pipeline_name),
                    "pipeline": pipeline_name,
                    "width": layout.section_width,
                    "height": layout.section_height,
                    "metrics": {
                        "received": sum(r.received or 0 for r in signal_records),
                        "errors": sum(r.errors for r in signal_records),
                    },
                },
                selectable=False,
                draggable=False,
            )
        )

        center_y = y_offset + layout.section_height / 2
        columns = {
            ComponentRole.RECEIVER: _unique(pipeline.receivers),
            ComponentRole.PROCESSOR: _unique(pipeline.processors),
            ComponentRole.EXPORTER: _unique(pipeline.exporters),
        }
        for role, names in columns.items():
            offsets = column_offsets(
                len(names), center_y, max_spacing(role, layout), layout
            )
            for name, y in zip(names, offsets):
                record = index.get((role.value, name, signal))
                graph.nodes.append(
                    Node(
                        id=node_id(role, pipeline_name, name),
                        kind=NodeKind(role.value),
                        position=Position(x=column_x(role, layout), y=y),
                        data={
                            "label": name,
                            "pipeline": pipeline_name,
                            "pipeline_type": signal,
                            "metrics": self._node_metrics(role, record),
                        },
                    )
                )

        for source_role, source, target_role, target in self._connections(
            columns[ComponentRole.RECEIVER],
            columns[ComponentRole.PROCESSOR],
            columns[ComponentRole.EXPORTER],
        ):
            graph.edges.append(
                Edge(
                    id=edge_id(pipeline_name, source, target),
                    source=node_id(source_role, pipeline_name, source),
                    target=node_id(target_role, pipeline_name, target),
                )
            )

    @staticmethod
    def _connections(
        receivers: Sequence[str],
        processors: Sequence[str],
        exporters: Sequence[str],
    ) -> list[tuple[ComponentRole, str, ComponentRole, str]]:
        """Fan-in to the first processor, chain, fan-out from the last."""
        receiver = ComponentRole.RECEIVER
        processor = ComponentRole.PROCESSOR
        exporter = ComponentRole.EXPORTER

        if not processors:
            return [(receiver, r, exporter, e) for r in receivers for e in exporters]

        connections = [(receiver, r, processor, processors[0]) for r in receivers]
        connections.extend(
            (processor, current, processor, following)
            for current, following in zip(processors, processors[1:])
        )
        connections.extend((processor, processors[-1], exporter, e) for e in exporters)
        return connections

    @staticmethod
    def _node_metrics(
        role: ComponentRole, record: ComponentMetrics | None
    ) -> dict[str, float]:
        received = accepted = sent = None
        errors = throughput = error_rate = 0.0
        if record is not None:
            received, accepted, sent = record.received, record.accepted, record.sent
            errors, throughput, error_rate = (
                record.errors,
                record.throughput,
                record.error_rate,
            )

        if role == ComponentRole.RECEIVER:
            values = {"received": (received if received is not None else accepted) or 0}
        elif role == ComponentRole.PROCESSOR:
            values = {
                "processed": (accepted if accepted is not None else received) or 0,
                "batches": 0,
            }
        else:
            values = {"exported": sent or 0}

        values.update(errors=errors, throughput=throughput, error_rate=error_rate)
        return values


def build_topology(
    raw_text: str,
    metrics: Iterable[ComponentMetrics | dict[str, Any]] | None = None,
    layout: LayoutConfig | None = None,
) -> TopologyGraph:
    """Build a pipeline topology graph. See TopologyBuilder.build."""
    return TopologyBuilder(layout=layout).build(raw_text, metrics)
