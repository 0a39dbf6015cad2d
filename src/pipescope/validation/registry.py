"""PipeScope validator registry.

Validators are registered by name with the `@register_validator`
decorator. Registration order is preserved and decides the order in
which default validators run.
"""

from __future__ import annotations

from typing import Any, Callable

from pipescope.exceptions import ValidatorNotFoundError
from pipescope.validation.types import Validator


class ValidatorRegistry:
    """Registry of validator classes.

    Each entry records whether the validator is part of the default set
    used when `validate_config` is called without an explicit list.

    Example:
        >>> registry = ValidatorRegistry()
        >>> registry.register("otel-pipeline", OTelPipelineValidator)
        >>> registry.create("otel-pipeline")
        OTelPipelineValidator(name='otel-pipeline')
    """

    def __init__(self) -> None:
        self._validators: dict[str, tuple[type[Any], bool]] = {}

    def register(
        self, name: str, validator_class: type[Any], default: bool = True
    ) -> None:
        """Register a validator class.

        Args:
            name: Unique validator name.
            validator_class: Class whose instances satisfy the Validator protocol.
            default: Whether the validator runs by default.

        Raises:
            ValueError: If a validator with this name is already registered.
        """
        if name in self._validators:
            existing_cls, _ = self._validators[name]
            raise ValueError(
                f"Validator '{name}' is already registered as {existing_cls.__name__}"
            )
        self._validators[name] = (validator_class, default)

    def get(self, name: str) -> type[Any]:
        """Get a registered validator class by name.

        Raises:
            ValidatorNotFoundError: If no validator is registered with this name.
        """
        if name not in self._validators:
            raise ValidatorNotFoundError(name)
        return self._validators[name][0]

    def create(self, name: str) -> Validator:
        """Instantiate a registered validator by name."""
        return self.get(name)()

    def defaults(self) -> list[Validator]:
        """Instantiate every default validator, in registration order."""
        return [cls() for cls, default in self._validators.values() if default]

    @property
    def names(self) -> list[str]:
        return list(self._validators)

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def clear(self) -> None:
        """Remove all registrations. Primarily for testing."""
        self._validators.clear()


_validator_registry = ValidatorRegistry()


def get_validator_registry() -> ValidatorRegistry:
    """Get the global ValidatorRegistry instance."""
    return _validator_registry


def register_validator(
    name: str, default: bool = True
) -> Callable[[type[Any]], type[Any]]:
    """Decorator registering a validator class in the global registry.

    The decorated class receives `name` as its class attribute.

    Example:
        >>> @register_validator("otel-extensions")
        ... class OTelExtensionsValidator(BaseValidator):
        ...     def validate(self, raw_text, document):
        ...         return []
    """

    def decorator(cls: type[Any]) -> type[Any]:
        if not callable(getattr(cls, "validate", None)):
            raise TypeError(
                f"Class '{cls.__name__}' must define validate() to be "
                f"registered as validator '{name}'"
            )
        cls.name = name
        _validator_registry.register(name, cls, default=default)
        return cls

    return decorator
