"""Armado de entidades candidatas a partir de una foto de la entrada del formulario.

Cada regla se evalúa por separado: un solo intento reporta todos los campos
con problemas, no sólo el primero.
"""
from datetime import tzinfo
from typing import Any, Mapping
from entityforms.forms.fields import (
    is_blank, is_unparseable, to_local_midnight, try_parse_decimal, try_parse_int,
)
from entityforms.forms.result import EMPTY_FIELD, INVALID_VALUE, Err, Ok, ValidationReport
from entityforms.forms.view import FieldKind, FieldSpec, FormView
from entityforms.core.config import DEFAULT_DATE_FORMAT
from entityforms.models import EMAIL_MAX_LENGTH, ID_MAX, NAME_MAX_LENGTH
from entityforms.schemas import DepartmentIn, SellerIn

FormInput = Mapping[str, Any]


def capture(view: FormView, fields: tuple[FieldSpec, ...]) -> dict[str, Any]:
    """Lee la vista una sola vez al momento del submit."""
    snapshot: dict[str, Any] = {}
    for spec in fields:
        if spec.kind is FieldKind.DATE:
            snapshot[spec.name] = view.read_date(spec.name)
        elif spec.kind is FieldKind.SELECTION:
            snapshot[spec.name] = view.read_selection(spec.name)
        else:
            snapshot[spec.name] = view.read_field(spec.name)
    return snapshot


def _parse_id(inputs: FormInput, report: ValidationReport) -> int | None:
    raw = inputs.get("id")
    value = try_parse_int(raw)
    if is_unparseable(raw, value):
        report.add_error("id", INVALID_VALUE)
    elif value is not None and not 0 < value <= ID_MAX:
        # fuera del rango de la columna
        report.add_error("id", INVALID_VALUE)
        return None
    return value


def _required_text(inputs: FormInput, field: str, report: ValidationReport) -> str:
    raw = inputs.get(field)
    if is_blank(raw):
        report.add_error(field, EMPTY_FIELD)
        return ""
    return str(raw).strip()


class DepartmentAssembler:
    FIELDS = (
        FieldSpec("id", FieldKind.INTEGER, max_length=30),
        FieldSpec("name", FieldKind.TEXT, max_length=NAME_MAX_LENGTH),
    )

    def capture(self, view: FormView) -> dict[str, Any]:
        return capture(view, self.FIELDS)

    def assemble(self, inputs: FormInput) -> Ok[DepartmentIn] | Err:
        report = ValidationReport()
        dep_id = _parse_id(inputs, report)
        # el nombre va tal cual, vacío incluido
        name = inputs.get("name")
        entity = DepartmentIn(id=dep_id, name="" if name is None else str(name))
        if report.has_errors():
            return Err(report=report)
        return Ok[DepartmentIn](value=entity)


class SellerAssembler:
    FIELDS = (
        FieldSpec("id", FieldKind.INTEGER, max_length=30),
        FieldSpec("name", FieldKind.TEXT, max_length=NAME_MAX_LENGTH),
        FieldSpec("email", FieldKind.TEXT, max_length=EMAIL_MAX_LENGTH),
        FieldSpec("birthDate", FieldKind.DATE, format=DEFAULT_DATE_FORMAT),
        FieldSpec("baseSalary", FieldKind.DECIMAL),
        FieldSpec("department", FieldKind.SELECTION),
    )

    def __init__(self, tz: tzinfo | None = None):
        self.tz = tz

    def capture(self, view: FormView) -> dict[str, Any]:
        return capture(view, self.FIELDS)

    def assemble(self, inputs: FormInput) -> Ok[SellerIn] | Err:
        report = ValidationReport()

        seller_id = _parse_id(inputs, report)
        name = _required_text(inputs, "name", report)
        email = _required_text(inputs, "email", report)

        birth = inputs.get("birthDate")
        if birth is None:
            report.add_error("birthDate", EMPTY_FIELD)
            birth_date = None
        else:
            birth_date = to_local_midnight(birth, self.tz)

        raw_salary = inputs.get("baseSalary")
        base_salary = try_parse_decimal(raw_salary)
        if is_blank(raw_salary):
            report.add_error("baseSalary", EMPTY_FIELD)
        elif base_salary is None:
            report.add_error("baseSalary", INVALID_VALUE)

        # departamento opcional; la existencia la valida la persistencia
        department = inputs.get("department")

        if report.has_errors():
            return Err(report=report)
        return Ok[SellerIn](value=SellerIn(
            id=seller_id,
            name=name,
            email=email,
            birth_date=birth_date,
            base_salary=base_salary,
            department=department,
        ))
