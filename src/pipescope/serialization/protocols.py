"""Serializer contract for shipping engine results to a rendering client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class Serializer(ABC):
    """Abstract base class for result serialization.

    Serializers encode pydantic results (TopologyGraph, ValidationResult)
    to bytes and decode them back into a given model type.
    """

    @abstractmethod
    def serialize(self, model: BaseModel) -> bytes:
        """Serialize a model to bytes.

        Args:
            model: The result to serialize.

        Returns:
            Serialized bytes.
        """
        ...

    @abstractmethod
    def deserialize(self, data: bytes, model_type: type[ModelT]) -> ModelT:
        """Deserialize bytes into a model.

        Args:
            data: Serialized bytes.
            model_type: The model class to validate into.

        Returns:
            Reconstructed model.
        """
        ...
