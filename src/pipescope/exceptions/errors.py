"""PipeScope exception types."""

from __future__ import annotations


class PipeScopeError(Exception):
    """Base exception for all PipeScope errors."""

    pass


class ConfigParseError(PipeScopeError):
    """Raised when collector configuration text is not valid YAML.

    The 1-indexed line and column of the problem are kept when the
    parser reports a position.
    """

    def __init__(
        self,
        detail: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.detail = detail
        self.line = line
        self.column = column
        super().__init__(f"Invalid YAML: {detail}")


class ValidatorNotFoundError(PipeScopeError):
    """Raised when a validator name is not present in the registry."""

    def __init__(self, validator_name: str, message: str | None = None) -> None:
        self.validator_name = validator_name
        if message is None:
            message = f"Validator '{validator_name}' not found in registry"
        super().__init__(message)


class SerializationError(PipeScopeError):
    """Raised when an unknown serializer is requested."""

    pass
