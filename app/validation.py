"""Schema validation shared by the services."""

from typing import Any, Mapping, Type, TypeVar

import pydantic
from pydantic import BaseModel

from .errors import ValidationError, format_errors

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ValidationService:
    """Validate untyped payloads against pydantic request schemas."""

    def validate(self, schema: Type[SchemaT], payload: Mapping[str, Any]) -> SchemaT:
        """
        Validate a payload and return the normalized schema instance.

        Args:
            schema (type[BaseModel]): Request schema to validate against.
            payload (Mapping): Raw request data.

        Raises:
            ValidationError: If any field violates the schema.

        Returns:
            BaseModel: Validated request object.
        """
        try:
            return schema.model_validate(payload)
        except pydantic.ValidationError as exc:
            raise ValidationError(format_errors(exc.errors())) from exc


def get_validation_service() -> ValidationService:
    """Dependency returning the validation service."""
    return ValidationService()
