"""PipeScope exception types."""

from pipescope.exceptions.errors import (
    ConfigParseError,
    PipeScopeError,
    SerializationError,
    ValidatorNotFoundError,
)

__all__ = [
    "PipeScopeError",
    "ConfigParseError",
    "ValidatorNotFoundError",
    "SerializationError",
]
