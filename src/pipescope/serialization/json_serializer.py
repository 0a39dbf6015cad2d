"""JSON serializer for PipeScope results."""

from __future__ import annotations

import json

from pydantic import BaseModel

from pipescope.serialization.protocols import ModelT, Serializer


class JSONSerializer(Serializer):
    """JSON-based result serializer.

    Human-readable; enums are written as their values.

    Example:
        >>> serializer = JSONSerializer()
        >>> data = serializer.serialize(graph)
        >>> serializer.deserialize(data, TopologyGraph) == graph
        True
    """

    def __init__(
        self,
        indent: int | None = None,
        ensure_ascii: bool = False,
    ) -> None:
        """Initialize the JSON serializer.

        Args:
            indent: JSON indentation level (None for compact).
            ensure_ascii: Whether to escape non-ASCII characters.
        """
        self._indent = indent
        self._ensure_ascii = ensure_ascii

    def serialize(self, model: BaseModel) -> bytes:
        data = model.model_dump(mode="json")
        return json.dumps(
            data,
            indent=self._indent,
            ensure_ascii=self._ensure_ascii,
        ).encode("utf-8")

    def deserialize(self, data: bytes, model_type: type[ModelT]) -> ModelT:
        """Deserialize JSON bytes.

        Raises:
            json.JSONDecodeError: If data is not valid JSON.
            pydantic.ValidationError: If data doesn't match model_type.
        """
        return model_type.model_validate(json.loads(data.decode("utf-8")))
