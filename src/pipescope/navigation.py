"""Editor navigation helpers for collector configuration text.

Line-based helpers for an editor surface: finding where components are
defined (to overlay live metrics next to them) and working out which
section, component and nested key the cursor is in.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from pipescope.enums import ComponentRole

TOP_LEVEL_SECTIONS = frozenset(
    {"receivers", "processors", "exporters", "connectors", "extensions", "service"}
)

_SECTION_ROLES = {role.section: role for role in ComponentRole}
_KEY_RE = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_/.-]*)\s*:")


@dataclass(frozen=True)
class ComponentLocation:
    """Where a receiver, processor or exporter is defined.

    Attributes:
        name: Component instance name.
        role: Section the component is defined in.
        line: 1-indexed line of the definition.
    """

    name: str
    role: ComponentRole
    line: int


@dataclass
class CursorContext:
    """Position of a cursor within the configuration hierarchy.

    Attributes:
        section: Top-level section, e.g. "processors".
        component: Component instance, e.g. "batch".
        path: Keys nested inside the component, e.g. ["protocols", "grpc"].
        depth: Indentation depth of the cursor line (two spaces per level).
    """

    section: str | None = None
    component: str | None = None
    path: list[str] = field(default_factory=list)
    depth: int = 0


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def locate_components(raw_text: str) -> list[ComponentLocation]:
    """Find receiver, processor and exporter definitions.

    Only the first key level under the top-level `receivers`,
    `processors` and `exporters` sections counts; pipeline lists under
    `service` are references, not definitions.
    """
    locations: list[ComponentLocation] = []
    role: ComponentRole | None = None
    child_indent: int | None = None

    for index, line in enumerate(raw_text.split("\n")):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        indent = _indent(line)
        match = _KEY_RE.match(line)
        if indent == 0:
            role = _SECTION_ROLES.get(match.group(1)) if match else None
            child_indent = None
            continue
        if role is None:
            continue

        if child_indent is None:
            child_indent = indent
        if indent == child_indent and match:
            locations.append(ComponentLocation(match.group(1), role, index + 1))

    return locations


def resolve_context(lines: Sequence[str], line_number: int) -> CursorContext:
    """Resolve the hierarchy around a cursor line.

    Args:
        lines: Configuration text split into lines.
        line_number: 0-indexed cursor line.

    Returns:
        CursorContext for that line.

    Example:
        >>> resolve_context(["processors:", "  batch:", "    timeout: 10s"], 2)
        CursorContext(section='processors', component='batch', path=[], depth=2)
    """
    current = lines[line_number] if 0 <= line_number < len(lines) else ""
    current_indent = _indent(current)
    context = CursorContext(depth=current_indent // 2)

    # Walk upwards collecting strictly shallower keys: the parent chain.
    parents: list[str] = []
    threshold = current_indent
    for index in range(min(line_number, len(lines)) - 1, -1, -1):
        line = lines[index]
        match = _KEY_RE.match(line)
        if not match:
            continue
        indent = _indent(line)
        if indent >= threshold:
            continue
        parents.append(match.group(1))
        threshold = indent
        if indent == 0:
            break

    parents.reverse()
    if threshold != 0 or not parents or parents[0] not in TOP_LEVEL_SECTIONS:
        return context

    context.section = parents[0]
    if len(parents) > 1:
        context.component = parents[1]
        context.path = parents[2:]
    return context
