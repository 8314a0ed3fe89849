"""Shared pydantic base and generic response bodies."""

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

Gender = Literal["male", "female"]


class CamelModel(BaseModel):
    """
    Base for API bodies: camelCase on the wire, snake_case in Python.

    Input accepts either spelling. Subclasses list columns that may be omitted
    but never set to null in NON_NULLABLE.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )

    NON_NULLABLE: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_explicit_nulls(self) -> "CamelModel":
        for name in sorted(self.NON_NULLABLE & self.model_fields_set):
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


def blank_to_none(value: Any) -> Any:
    """Treat empty form inputs ("" or whitespace) as absent for optional fields."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class MessageResponse(BaseModel):
    """Plain acknowledgement body (e.g. after delete or logout)."""

    message: str


class FieldError(BaseModel):
    """One field-level validation problem."""

    field: str = Field(..., description="Dotted path of the offending field ('' for the whole body).")
    message: str


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str
    details: list[FieldError] | None = None
