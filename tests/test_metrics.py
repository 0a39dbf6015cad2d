"""Tests for collector component metrics aggregation."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from pipescope import ComponentMetrics, RawMetricSample, aggregate_component_metrics
from pipescope.topology.metrics import (
    coerce_metrics,
    component_type_for,
    format_error_rate,
    format_throughput,
    index_metrics,
    pipeline_type_for,
)

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def sample(name: str, value: float, minutes: int = 0, **labels: str) -> RawMetricSample:
    return RawMetricSample(
        timestamp=T0 + timedelta(minutes=minutes),
        metric_name=name,
        value=value,
        labels=labels,
    )


# =============================================================================
# Aggregation Tests
# =============================================================================


class TestAggregateComponentMetrics:
    """Tests for aggregate_component_metrics."""

    @pytest.fixture
    def records(self) -> dict[tuple[str, str, str], ComponentMetrics]:
        samples = [
            sample("otelcol_receiver_accepted_spans", 100, receiver="otlp"),
            sample("otelcol_receiver_refused_spans", 5, minutes=2, receiver="otlp"),
            sample("otelcol_exporter_sent_spans", 90, exporter="debug"),
            sample("otelcol_exporter_send_failed_spans", 10, exporter="debug"),
            sample("otelcol_processor_batch_batch_send_size", 3, processor="batch"),
            sample(
                "otelcol_receiver_accepted_metric_points",
                60,
                receiver="otlp",
                service_name="metrics",
            ),
            sample("process_uptime", 1000),
        ]
        return {record.key: record for record in aggregate_component_metrics(samples)}

    def test_one_record_per_component_and_signal(
        self, records: dict[tuple[str, str, str], ComponentMetrics]
    ) -> None:
        """Test samples are grouped by component and pipeline type."""
        assert list(records) == [
            ("receiver", "otlp", "traces"),
            ("exporter", "debug", "traces"),
            ("receiver", "otlp", "metrics"),
        ]

    def test_receiver_counters(
        self, records: dict[tuple[str, str, str], ComponentMetrics]
    ) -> None:
        """Test accepted and refused counters and derived values."""
        record = records[("receiver", "otlp", "traces")]

        assert record.accepted == 100
        assert record.refused == 5
        assert record.received is None
        assert record.errors == 5
        assert record.throughput == pytest.approx(100 / 300)
        assert record.error_rate == pytest.approx(5 / 105 * 100)
        assert record.last_updated == T0 + timedelta(minutes=2)
        assert record.labels == {"receiver": "otlp"}

    def test_exporter_counters(
        self, records: dict[tuple[str, str, str], ComponentMetrics]
    ) -> None:
        """Test send failures are errors, not sent items."""
        record = records[("exporter", "debug", "traces")]

        assert record.sent == 90
        assert record.send_failed == 10
        assert record.errors == 10
        assert record.throughput == pytest.approx(0.3)
        assert record.error_rate == pytest.approx(10.0)

    def test_service_name_overrides_inference(self) -> None:
        """Test an explicit pipeline label wins over the metric name."""
        samples = [
            sample("otelcol_receiver_accepted_spans", 1, receiver="otlp", service_name="logs")
        ]

        (record,) = aggregate_component_metrics(samples)

        assert record.pipeline_type == "logs"

    def test_unrecognised_service_name_is_ignored(self) -> None:
        """Test a non-signal service name falls back to inference."""
        samples = [
            sample(
                "otelcol_exporter_sent_log_records",
                4,
                exporter="debug",
                service_name="otelcol-contrib",
            )
        ]

        (record,) = aggregate_component_metrics(samples)

        assert record.pipeline_type == "logs"

    def test_name_from_metric_attributes(self) -> None:
        """Test the component name may come from metric attributes."""
        raw = {
            "timestamp": T0.isoformat(),
            "metric_name": "otelcol_receiver_accepted_spans",
            "value": 2,
            "metric_attributes": {"receiver": "jaeger"},
        }

        (record,) = aggregate_component_metrics([raw])

        assert record.component_name == "jaeger"

    def test_time_range_must_be_positive(self) -> None:
        """Test a zero-length window is rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            aggregate_component_metrics([], time_range_minutes=0)

    def test_no_samples(self) -> None:
        """Test an empty query yields no records."""
        assert aggregate_component_metrics([]) == []


# =============================================================================
# Helper Tests
# =============================================================================


class TestMetricHelpers:
    """Tests for metric name inference and formatting."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("otelcol_receiver_accepted_spans", "receiver"),
            ("otelcol_processor_dropped_log_records", "processor"),
            ("otelcol_exporter_sent_metric_points", "exporter"),
            ("process_uptime", "unknown"),
        ],
    )
    def test_component_type_for(self, name: str, expected: str) -> None:
        """Test the component type prefix."""
        assert component_type_for(name) == expected

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("otelcol_receiver_accepted_spans", "traces"),
            ("otelcol_exporter_sent_metric_points", "metrics"),
            ("otelcol_processor_dropped_log_records", "logs"),
            ("otelcol_processor_batch_timeout_trigger_send", None),
        ],
    )
    def test_pipeline_type_for(self, name: str, expected: str | None) -> None:
        """Test signal inference from the metric name."""
        assert pipeline_type_for(name) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (2_500_000, "2.5M/s"),
            (1500, "1.5K/s"),
            (12.4, "12/s"),
            (0.5, "0.50/s"),
            (0, "0.00/s"),
        ],
    )
    def test_format_throughput(self, value: float, expected: str) -> None:
        assert format_throughput(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(12.34, "12.3%"), (1.234, "1.23%"), (0.05, "0.050%"), (0, "0%")],
    )
    def test_format_error_rate(self, value: float, expected: str) -> None:
        assert format_error_rate(value) == expected

    def test_coerce_and_index(self) -> None:
        """Test dict records are validated and indexed by key."""
        records = coerce_metrics(
            [
                {"component_type": "receiver", "component_name": "otlp",
                 "pipeline_type": "traces", "received": 1},
                ComponentMetrics(
                    component_type="receiver", component_name="otlp",
                    pipeline_type="traces", received=2,
                ),
            ]
        )

        index = index_metrics(records)

        assert coerce_metrics(None) == []
        assert all(isinstance(record, ComponentMetrics) for record in records)
        assert index[("receiver", "otlp", "traces")].received == 1
