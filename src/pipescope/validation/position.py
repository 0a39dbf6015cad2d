"""Source positions for key paths in collector YAML text.

The resolver is a line and indentation scanner, not a YAML parser. It
walks the text once, advancing a cursor through the requested key path
whenever a line starts with the next key, and resetting the cursor when
indentation shows that the block it was searching has ended. This keeps
repeated keys apart, e.g. the `receivers` list of every pipeline.

Block sequences (`- otlp`) and flow sequences (`[otlp, debug]`, on the
key line, the next line, or spread over several lines) are searched for
an exact item when a target value is given.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from pipescope.enums import Severity
from pipescope.validation.types import ValidationIssue

_KEY_RE = re.compile(r"^([^:#\[\]]+):")
_ITEM_RE = re.compile(r"^-(?:\s+|$)")
_QUOTES = "'\""


@dataclass(frozen=True)
class SourceSpan:
    """1-indexed position of a key or sequence item in the source text.

    Attributes:
        line: Start line.
        column: Start column.
        end_line: End line, if known.
        end_column: Exclusive end column, if known.
    """

    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _is_content(stripped: str) -> bool:
    return bool(stripped) and not stripped.startswith("#")


def _leaves_block(stripped: str, indent: int, context_indent: int) -> bool:
    # A compact sequence may sit at the same indentation as its key.
    if indent < context_indent:
        return True
    return indent == context_indent and not _ITEM_RE.match(stripped)


def _unquote(token: str, start: int) -> tuple[str, int]:
    if len(token) >= 2 and token[0] == token[-1] and token[0] in _QUOTES:
        return token[1:-1], start + 1
    return token, start


def _strip_comment(text: str) -> str:
    marker = text.find(" #")
    return text if marker == -1 else text[:marker]


def _flow_items(line: str, start: int) -> tuple[list[tuple[str, int]], bool]:
    """Split a flow sequence segment into items.

    Args:
        line: Full source line.
        start: Index just after the opening bracket, or the first content
            character of a continuation line.

    Returns:
        (items, closed) where items are (value, 0-based column) pairs and
        closed tells whether the closing bracket was seen on this line.
    """
    end = line.find("]", start)
    closed = end != -1
    if not closed:
        end = len(line)
    segment = _strip_comment(line[start:end])

    items: list[tuple[str, int]] = []
    offset = start
    for piece in segment.split(","):
        token = piece.strip()
        if token:
            items.append(_unquote(token, offset + piece.index(token)))
        offset += len(piece) + 1
    return items, closed


def _block_item(line: str, indent: int) -> tuple[str, int] | None:
    stripped = line.strip()
    match = _ITEM_RE.match(stripped)
    if not match:
        return None
    token = _strip_comment(stripped[match.end():]).rstrip()
    if not token:
        return None
    return _unquote(token, indent + match.end())


def _sequence_items(
    lines: Sequence[str], key_index: int, key_end: int, context_indent: int
) -> Iterator[tuple[int, str, int]]:
    """Yield (line index, value, 0-based column) for each item of a key's value."""
    key_line = lines[key_index]
    rest = key_line[key_end:]
    in_flow = False
    if rest.lstrip().startswith("["):
        items, closed = _flow_items(key_line, key_line.index("[", key_end) + 1)
        for value, column in items:
            yield key_index, value, column
        in_flow = not closed
    else:
        scalar = _strip_comment(rest).strip()
        if scalar and scalar[0] not in "{|>&*":
            value, offset = _unquote(scalar, rest.index(scalar))
            yield key_index, value, key_end + offset

    for index in range(key_index + 1, len(lines)):
        line = lines[index]
        stripped = line.strip()
        if not _is_content(stripped):
            continue
        indent = _indent(line)
        if in_flow:
            items, closed = _flow_items(line, indent)
            in_flow = not closed
        elif _leaves_block(stripped, indent, context_indent):
            return
        elif stripped.startswith("["):
            items, closed = _flow_items(line, line.index("[") + 1)
            in_flow = not closed
        else:
            item = _block_item(line, indent)
            items = [item] if item is not None else []
        for value, column in items:
            yield index, value, column


def find_position(
    raw_text: str, path: Sequence[str], target: str | None = None
) -> SourceSpan | None:
    """Find where a key path (or an item below it) appears in YAML text.

    Args:
        raw_text: The configuration text.
        path: Keys from the document root, e.g.
            ["service", "pipelines", "traces", "receivers"].
        target: Optional sequence item to locate inside the value of the
            last key. When it cannot be found the key itself is returned.

    Returns:
        The span of the target item or of the last key, or None when the
        path does not occur.

    Example:
        >>> text = "service:\\n  extensions: [health, pprof]\\n"
        >>> find_position(text, ["service", "extensions"], "pprof")
        SourceSpan(line=2, column=24, end_line=2, end_column=29)
    """
    if not path:
        return None

    lines = raw_text.split("\n")
    cursor = 0
    context_indent = 0

    for index, line in enumerate(lines):
        stripped = line.strip()
        if not _is_content(stripped):
            continue

        indent = _indent(line)
        if cursor > 0 and _leaves_block(stripped, indent, context_indent):
            cursor = 0
            context_indent = 0

        match = _KEY_RE.match(stripped)
        if not match:
            continue
        key = match.group(1).strip().strip(_QUOTES)
        if key != path[cursor]:
            continue

        cursor += 1
        context_indent = indent
        if cursor < len(path):
            continue

        if target is not None:
            for item_index, value, column in _sequence_items(
                lines, index, indent + match.end(), context_indent
            ):
                if value == target:
                    return SourceSpan(
                        line=item_index + 1,
                        column=column + 1,
                        end_line=item_index + 1,
                        end_column=column + 1 + len(target),
                    )

        column = indent + stripped.find(key) + 1
        return SourceSpan(
            line=index + 1,
            column=column,
            end_line=index + 1,
            end_column=column + len(key),
        )

    return None


def create_validation_error(
    message: str,
    raw_text: str,
    path: Sequence[str],
    target: str | None = None,
    severity: Severity = Severity.ERROR,
) -> ValidationIssue:
    """Create an issue positioned at a key path.

    Unresolvable paths fall back to line 1, column 1 so that every issue
    stays navigable.
    """
    span = find_position(raw_text, path, target)
    if span is None:
        return ValidationIssue(
            message=message, severity=severity, line=1, column=1, path=tuple(path)
        )
    return ValidationIssue(
        message=message,
        severity=severity,
        line=span.line,
        column=span.column,
        end_line=span.end_line,
        end_column=span.end_column,
        path=tuple(path),
    )
