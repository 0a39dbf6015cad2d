"""PipeScope validation engine.

This module provides position-aware structural validation for collector
configurations:

- find_position / create_validation_error: map key paths to source spans
- Validator, BaseValidator: the validator contract
- ValidatorRegistry, register_validator: named validator registration
- validate_config / validate_text: run validators and merge results

Example:
    >>> from pipescope.validation import validate_text
    >>> result = validate_text(raw_text)
    >>> for issue in result.errors:
    ...     print(issue.line, issue.column, issue.message)
"""

from pipescope.validation.position import (
    SourceSpan,
    create_validation_error,
    find_position,
)
from pipescope.validation.registry import (
    ValidatorRegistry,
    get_validator_registry,
    register_validator,
)
from pipescope.validation.types import (
    BaseValidator,
    ValidationIssue,
    ValidationResult,
    Validator,
)
from pipescope.validation.validators import (
    OTelEmptyPipelineValidator,
    OTelExtensionsValidator,
    OTelPipelineValidator,
    OTelSchemaValidator,
)
from pipescope.validation.runner import (
    deduplicate,
    default_validators,
    validate_config,
    validate_text,
)

__all__ = [
    # Positions
    "SourceSpan",
    "find_position",
    "create_validation_error",
    # Types
    "ValidationIssue",
    "ValidationResult",
    "Validator",
    "BaseValidator",
    # Registry
    "ValidatorRegistry",
    "get_validator_registry",
    "register_validator",
    # Validators
    "OTelPipelineValidator",
    "OTelExtensionsValidator",
    "OTelSchemaValidator",
    "OTelEmptyPipelineValidator",
    # Runner
    "default_validators",
    "deduplicate",
    "validate_config",
    "validate_text",
]
