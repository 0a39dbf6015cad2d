"""MessagePack serializer for PipeScope results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from pipescope.serialization.protocols import ModelT, Serializer

if TYPE_CHECKING:
    import msgpack as msgpack_module


class MessagePackSerializer(Serializer):
    """MessagePack-based result serializer.

    More compact than JSON for large graphs. Requires the optional
    'msgpack' dependency.

    Note:
        Install with: pip install pipescope[msgpack]
    """

    _msgpack: msgpack_module

    def __init__(self) -> None:
        """Initialize the MessagePack serializer.

        Raises:
            ImportError: If msgpack package is not installed.
        """
        try:
            import msgpack

            self._msgpack = msgpack
        except ImportError as e:
            raise ImportError(
                "msgpack package is required for MessagePackSerializer. "
                "Install with: pip install pipescope[msgpack]"
            ) from e

    def serialize(self, model: BaseModel) -> bytes:
        return self._msgpack.packb(model.model_dump(mode="json"), use_bin_type=True)

    def deserialize(self, data: bytes, model_type: type[ModelT]) -> ModelT:
        """Deserialize MessagePack bytes.

        Raises:
            msgpack.UnpackException: If data is not valid MessagePack.
            pydantic.ValidationError: If data doesn't match model_type.
        """
        return model_type.model_validate(self._msgpack.unpackb(data, raw=False))
