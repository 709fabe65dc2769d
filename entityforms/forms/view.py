from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Protocol, Sequence


class FieldKind(str, Enum):
    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    DATE = "date"
    SELECTION = "selection"


@dataclass(frozen=True)
class FieldSpec:
    """Campo de formulario: cómo se lee de la vista y qué restricción de entrada lleva."""
    name: str
    kind: FieldKind = FieldKind.TEXT
    max_length: int | None = None
    format: str | None = None


class FormView(Protocol):
    """Lo que el núcleo necesita de la vista. No toca renderizado."""

    def read_field(self, name: str) -> str | None: ...

    def read_date(self, name: str) -> date | None: ...

    def read_selection(self, name: str) -> Any: ...

    def write_field(self, name: str, text: str) -> None: ...

    def write_date(self, name: str, value: date | None) -> None: ...

    def write_selection(self, name: str, value: Any) -> None: ...

    def set_choices(self, name: str, items: Sequence[Any]) -> None: ...

    def constrain(self, spec: FieldSpec) -> None: ...

    def display_field_error(self, name: str, message: str) -> None: ...

    def display_blocking_error(self, title: str, message: str) -> None: ...

    def close(self) -> None: ...
