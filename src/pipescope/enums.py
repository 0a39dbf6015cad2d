"""PipeScope enums shared by the validation and topology engines."""

from __future__ import annotations

from enum import Enum


class Severity(Enum):
    """Severity of a validation issue.

    Only ERROR issues affect the validity of a configuration.
    """

    ERROR = "error"
    """Blocks validity (undefined references, wrong config shape)."""

    WARNING = "warning"
    """Informational only (naming style, empty config blocks)."""


class ComponentRole(Enum):
    """Role a component plays inside a pipeline."""

    RECEIVER = "receiver"
    PROCESSOR = "processor"
    EXPORTER = "exporter"

    @property
    def section(self) -> str:
        """Top-level configuration section that defines this role."""
        return f"{self.value}s"


class NodeKind(Enum):
    """Kind of a node in a pipeline topology graph."""

    SECTION = "section"
    """Container node representing one whole pipeline."""

    RECEIVER = "receiver"
    PROCESSOR = "processor"
    EXPORTER = "exporter"

    PLACEHOLDER = "default"
    """Informational node returned when no graph can be built."""
