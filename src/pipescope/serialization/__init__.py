"""Encoders for shipping topology graphs and validation results to a client."""

from pipescope.exceptions import SerializationError
from pipescope.serialization.json_serializer import JSONSerializer
from pipescope.serialization.msgpack_serializer import MessagePackSerializer
from pipescope.serialization.protocols import Serializer

__all__ = [
    "Serializer",
    "JSONSerializer",
    "MessagePackSerializer",
    "get_serializer",
]

_SERIALIZERS: dict[str, type[Serializer]] = {
    "json": JSONSerializer,
    "msgpack": MessagePackSerializer,
}


def get_serializer(name: str) -> Serializer:
    """Create the serializer registered under `name` ('json' or 'msgpack').

    Raises:
        SerializationError: If no serializer has that name.
        ImportError: If 'msgpack' is requested without the msgpack extra.
    """
    serializer_class = _SERIALIZERS.get(name)
    if serializer_class is None:
        raise SerializationError(
            f"Unknown serializer '{name}'. Available: {sorted(_SERIALIZERS)}"
        )
    return serializer_class()
