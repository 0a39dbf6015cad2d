"""Collector component metrics for topology annotation.

`ComponentMetrics` records are the read-only metrics input of the graph
builder. `aggregate_component_metrics` derives them from the collector's
own `otelcol_*` telemetry series.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

PIPELINE_TYPES = frozenset({"traces", "metrics", "logs"})

_COMPONENT_PREFIXES = (
    ("otelcol_receiver_", "receiver"),
    ("otelcol_processor_", "processor"),
    ("otelcol_exporter_", "exporter"),
)

_COUNTER_FRAGMENTS = (
    ("_received_", "received", False),
    ("_accepted_", "accepted", False),
    ("_refused_", "refused", True),
    ("_dropped_", "dropped", True),
    ("_sent_", "sent", False),
    ("_send_failed_", "send_failed", True),
)

MetricsKey = tuple[str, str, str]


class ComponentMetrics(BaseModel):
    """Observed metrics of one component in one pipeline type.

    Attributes:
        component_type: receiver, processor or exporter.
        component_name: Component instance name.
        pipeline_type: traces, metrics or logs.
        received: Items received, if reported.
        accepted: Items accepted, if reported.
        refused: Items refused, if reported.
        dropped: Items dropped, if reported.
        sent: Items sent, if reported.
        send_failed: Items that failed to send, if reported.
        errors: Sum of refused, dropped and send_failed.
        throughput: Items per second over the query window.
        error_rate: Errors as a percentage of all counted items.
        last_updated: Newest sample timestamp.
        labels: Labels of the first sample seen.
    """

    component_type: str
    component_name: str
    pipeline_type: str
    received: float | None = None
    accepted: float | None = None
    refused: float | None = None
    dropped: float | None = None
    sent: float | None = None
    send_failed: float | None = None
    errors: float = 0
    throughput: float = 0
    error_rate: float = 0
    last_updated: datetime | None = None
    labels: dict[str, str] = Field(default_factory=dict)

    @property
    def key(self) -> MetricsKey:
        return (self.component_type, self.component_name, self.pipeline_type)


class RawMetricSample(BaseModel):
    """One sample returned by a telemetry metrics query."""

    timestamp: datetime
    metric_name: str
    value: float
    labels: dict[str, str] = Field(default_factory=dict)
    metric_attributes: dict[str, Any] = Field(default_factory=dict)


def coerce_metrics(
    metrics: Iterable[ComponentMetrics | dict[str, Any]] | None,
) -> list[ComponentMetrics]:
    """Accept records as models or plain dicts."""
    if not metrics:
        return []
    return [
        m if isinstance(m, ComponentMetrics) else ComponentMetrics.model_validate(m)
        for m in metrics
    ]


def index_metrics(metrics: Sequence[ComponentMetrics]) -> dict[MetricsKey, ComponentMetrics]:
    """Index records by (component_type, component_name, pipeline_type).

    The first record for a key wins.
    """
    index: dict[MetricsKey, ComponentMetrics] = {}
    for record in metrics:
        index.setdefault(record.key, record)
    return index


def component_type_for(metric_name: str) -> str:
    for prefix, component_type in _COMPONENT_PREFIXES:
        if metric_name.startswith(prefix):
            return component_type
    return "unknown"


def pipeline_type_for(metric_name: str) -> str | None:
    """Infer the signal from a collector metric name."""
    if "_spans" in metric_name or "_span_" in metric_name:
        return "traces"
    if "_metric_points" in metric_name or "_metrics" in metric_name:
        return "metrics"
    if "_log_records" in metric_name or "_logs" in metric_name:
        return "logs"
    return None


def _label(sample: RawMetricSample, *keys: str) -> str | None:
    for source in (sample.labels, sample.metric_attributes):
        for key in keys:
            value = source.get(key)
            if value:
                return str(value)
    return None


def calculate_throughput(record: ComponentMetrics, time_range_minutes: float) -> float:
    total = (record.accepted or 0) + (record.sent or 0) + (record.received or 0)
    return total / (time_range_minutes * 60)


def calculate_error_rate(record: ComponentMetrics) -> float:
    total = (
        (record.received or 0)
        + (record.accepted or 0)
        + (record.sent or 0)
        + record.errors
    )
    if total == 0:
        return 0.0
    return record.errors / total * 100


def aggregate_component_metrics(
    samples: Iterable[RawMetricSample | dict[str, Any]],
    time_range_minutes: float = 5,
) -> list[ComponentMetrics]:
    """Fold raw collector telemetry into per-component records.

    Args:
        samples: Samples from a telemetry query, any order.
        time_range_minutes: Length of the query window, for throughput.

    Returns:
        One record per (component_type, component_name, pipeline_type),
        in order of first appearance.

    Raises:
        ValueError: If time_range_minutes is not positive.
    """
    if time_range_minutes <= 0:
        raise ValueError("time_range_minutes must be positive")

    records: dict[MetricsKey, ComponentMetrics] = {}
    skipped = 0

    for raw in samples:
        sample = raw if isinstance(raw, RawMetricSample) else RawMetricSample.model_validate(raw)
        component_type = component_type_for(sample.metric_name)
        if component_type == "unknown":
            continue

        pipeline_type = _label(sample, "service_name")
        if pipeline_type not in PIPELINE_TYPES:
            pipeline_type = pipeline_type_for(sample.metric_name)
        if pipeline_type is None:
            skipped += 1
            continue

        name = _label(sample, "receiver", "processor", "exporter") or "unknown"
        key = (component_type, name, pipeline_type)
        record = records.get(key)
        if record is None:
            record = ComponentMetrics(
                component_type=component_type,
                component_name=name,
                pipeline_type=pipeline_type,
                last_updated=sample.timestamp,
                labels=dict(sample.labels),
            )
            records[key] = record

        for fragment, field, is_error in _COUNTER_FRAGMENTS:
            if fragment in sample.metric_name:
                setattr(record, field, (getattr(record, field) or 0) + sample.value)
                if is_error:
                    record.errors += sample.value
                break

        if record.last_updated is None or sample.timestamp > record.last_updated:
            record.last_updated = sample.timestamp

    if skipped:
        logger.debug("Skipped %d sample(s) with no pipeline type", skipped)

    for record in records.values():
        record.throughput = calculate_throughput(record, time_range_minutes)
        record.error_rate = calculate_error_rate(record)
    return list(records.values())


def format_throughput(throughput: float) -> str:
    """Format items per second for display, e.g. `1.5K/s`."""
    if throughput >= 1_000_000:
        return f"{throughput / 1_000_000:.1f}M/s"
    if throughput >= 1_000:
        return f"{throughput / 1_000:.1f}K/s"
    if throughput >= 1:
        return f"{throughput:.0f}/s"
    return f"{throughput:.2f}/s"


def format_error_rate(error_rate: float) -> str:
    """Format a percentage, with more decimals for small rates."""
    if error_rate >= 10:
        return f"{error_rate:.1f}%"
    if error_rate >= 0.1:
        return f"{error_rate:.2f}%"
    if error_rate > 0:
        return f"{error_rate:.3f}%"
    return "0%"
