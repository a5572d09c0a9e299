"""Shared base for domain entities."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from bodega.core.exceptions import ValidationError


def validate_name(value: str, max_length: int, label: str) -> str:
    """Trim a display name and enforce non-empty and maximum length."""
    value = value.strip()
    if not value:
        raise ValueError(f"{label} cannot be empty")
    if len(value) > max_length:
        raise ValueError(f"{label} exceeds {max_length} characters")
    return value


class DomainModel(BaseModel):
    """
    Pydantic model whose validation failures surface as domain errors.

    Assignment is validated too, so every mutation path runs the same field
    rules as construction. A rejected assignment leaves the model unchanged.
    """

    model_config = ConfigDict(validate_assignment=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc) from exc

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc) from exc
