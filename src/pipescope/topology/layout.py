"""Deterministic layout for pipeline topology graphs.

Sections are stacked top to bottom. Inside a section, each role is a
column whose nodes are centred on the section's vertical midpoint;
dense columns compress their spacing instead of overflowing.
"""

from __future__ import annotations

from pipescope.config.models import LayoutConfig
from pipescope.enums import ComponentRole


def column_spacing(count: int, max_spacing: float, layout: LayoutConfig) -> float:
    """Vertical distance between consecutive nodes of a column."""
    available = layout.section_height - layout.spacing_margin
    return min(max_spacing, available / max(1, count - 1))


def column_offsets(
    count: int, center_y: float, max_spacing: float, layout: LayoutConfig
) -> list[float]:
    """Y coordinates for `count` nodes centred on `center_y`."""
    spacing = column_spacing(count, max_spacing, layout)
    start = center_y - (count - 1) * spacing / 2
    return [start + index * spacing for index in range(count)]


def column_x(role: ComponentRole, layout: LayoutConfig) -> float:
    return {
        ComponentRole.RECEIVER: layout.receiver_x,
        ComponentRole.PROCESSOR: layout.processor_x,
        ComponentRole.EXPORTER: layout.exporter_x,
    }[role]


def max_spacing(role: ComponentRole, layout: LayoutConfig) -> float:
    return {
        ComponentRole.RECEIVER: layout.receiver_spacing,
        ComponentRole.PROCESSOR: layout.processor_spacing,
        ComponentRole.EXPORTER: layout.exporter_spacing,
    }[role]


def section_stride(layout: LayoutConfig) -> float:
    """Distance between the tops of two consecutive sections."""
    return layout.section_height + layout.section_gap
