"""Shared pytest fixtures for PipeScope tests."""

from __future__ import annotations

from typing import Any

import pytest

from pipescope import ComponentMetrics, ConfigLoader

BASIC_CONFIG = """\
receivers:
  otlp:
    protocols:
      grpc:
        endpoint: 0.0.0.0:4317
  prometheus:
    config:
      scrape_configs: []

processors:
  batch:
    timeout: 10s
  memory_limiter:
    limit_mib: 512

exporters:
  debug:
    verbosity: basic
  otlphttp:
    endpoint: https://collector.example.com

extensions:
  health_check:
    endpoint: 0.0.0.0:13133

service:
  extensions: [health_check]
  pipelines:
    traces:
      receivers: [otlp]
      processors: [memory_limiter, batch]
      exporters: [debug, otlphttp]
    metrics:
      receivers: [otlp, prometheus]
      exporters: [otlphttp]
"""

GHOST_RECEIVER_CONFIG = """\
receivers:
  otlp:
exporters:
  debug:
service:
  pipelines:
    traces:
      receivers: [otlp, ghost]
      exporters: [debug]
"""

CONNECTOR_CONFIG = """\
receivers:
  otlp:
    protocols:
      grpc: {}
exporters:
  debug:
    verbosity: detailed
connectors:
  spanmetrics:
    namespace: span.metrics
service:
  pipelines:
    traces:
      receivers: [otlp]
      exporters: [spanmetrics]
    metrics:
      receivers: [spanmetrics]
      exporters: [debug]
"""


@pytest.fixture
def loader() -> ConfigLoader:
    """Create a ConfigLoader instance."""
    return ConfigLoader()


@pytest.fixture
def basic_config() -> str:
    """Valid two-pipeline configuration."""
    return BASIC_CONFIG


@pytest.fixture
def basic_document(loader: ConfigLoader) -> dict[str, Any]:
    """Parsed form of the basic configuration."""
    return loader.load_from_string(BASIC_CONFIG)


@pytest.fixture
def ghost_config() -> str:
    """Configuration whose traces pipeline references an undefined receiver."""
    return GHOST_RECEIVER_CONFIG


@pytest.fixture
def connector_config() -> str:
    """Configuration bridging traces to metrics through a connector."""
    return CONNECTOR_CONFIG


@pytest.fixture
def sample_metrics() -> list[ComponentMetrics]:
    """Component metrics matching the basic configuration."""
    return [
        ComponentMetrics(
            component_type="receiver",
            component_name="otlp",
            pipeline_type="traces",
            received=100,
            errors=2,
            throughput=1.5,
            error_rate=1.96,
        ),
        ComponentMetrics(
            component_type="processor",
            component_name="batch",
            pipeline_type="traces",
            received=90,
        ),
        ComponentMetrics(
            component_type="exporter",
            component_name="debug",
            pipeline_type="traces",
            sent=80,
            errors=1,
        ),
        ComponentMetrics(
            component_type="receiver",
            component_name="otlp",
            pipeline_type="metrics",
            accepted=50,
        ),
    ]
