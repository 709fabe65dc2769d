"""Resultado del armado de una entidad: Ok(entidad) o Err(reporte).

El reporte de validación es un dato, no una excepción.
"""
from typing import Generic, TypeVar
from pydantic import BaseModel, ConfigDict, Field

EntityT = TypeVar("EntityT")

EMPTY_FIELD = "Field can't be empty"
INVALID_VALUE = "Invalid value"


class ValidationReport(BaseModel):
    """Un mensaje por campo; un segundo error en el mismo campo pisa al primero."""

    errors: dict[str, str] = Field(default_factory=dict)

    def add_error(self, field: str, message: str) -> None:
        self.errors[field] = message

    def has_errors(self) -> bool:
        return bool(self.errors)


class Ok(BaseModel, Generic[EntityT]):
    model_config = ConfigDict(frozen=True)

    value: EntityT

    @property
    def ok(self) -> bool:
        return True


class Err(BaseModel):
    # sin frozen: el reporte que lleva es mutable
    report: ValidationReport

    @property
    def ok(self) -> bool:
        return False
