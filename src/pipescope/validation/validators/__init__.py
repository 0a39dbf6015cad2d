"""Built-in validators for OpenTelemetry collector configurations.

Import order decides registration order, and therefore the order in
which the default validators run.
"""

from pipescope.validation.validators.pipeline import OTelPipelineValidator
from pipescope.validation.validators.extensions import OTelExtensionsValidator
from pipescope.validation.validators.schema import (
    OTelSchemaValidator,
    is_valid_component_name,
)
from pipescope.validation.validators.empty_pipeline import OTelEmptyPipelineValidator

__all__ = [
    "OTelPipelineValidator",
    "OTelExtensionsValidator",
    "OTelSchemaValidator",
    "OTelEmptyPipelineValidator",
    "is_valid_component_name",
]
