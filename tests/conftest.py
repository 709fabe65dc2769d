"""Fixtures compartidas para los tests de entityforms."""

from __future__ import annotations

import os

# tiene que estar antes de que entityforms.db arme el engine del módulo
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date
from typing import Any, Iterator, Sequence

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from entityforms.core.config import Settings
from entityforms.db import init_db
from entityforms.forms.view import FieldSpec
from entityforms.services import DepartmentService, SellerService


class FakeView:
    """FormView en memoria; registra todo lo que le empujan los controladores."""

    def __init__(
        self,
        fields: dict[str, str | None] | None = None,
        dates: dict[str, date | None] | None = None,
        selections: dict[str, Any] | None = None,
    ) -> None:
        self.fields = dict(fields or {})
        self.dates = dict(dates or {})
        self.selections = dict(selections or {})
        self.choices: dict[str, list[Any]] = {}
        self.constraints: list[FieldSpec] = []
        self.field_errors: dict[str, str] = {}
        self.blocking_errors: list[tuple[str, str]] = []
        self.closed = False
        self.events: list[str] = []

    def read_field(self, name: str) -> str | None:
        return self.fields.get(name)

    def read_date(self, name: str) -> date | None:
        return self.dates.get(name)

    def read_selection(self, name: str) -> Any:
        return self.selections.get(name)

    def write_field(self, name: str, text: str) -> None:
        self.fields[name] = text

    def write_date(self, name: str, value: date | None) -> None:
        self.dates[name] = value

    def write_selection(self, name: str, value: Any) -> None:
        self.selections[name] = value

    def set_choices(self, name: str, items: Sequence[Any]) -> None:
        self.choices[name] = list(items)

    def constrain(self, spec: FieldSpec) -> None:
        self.constraints.append(spec)

    def display_field_error(self, name: str, message: str) -> None:
        self.field_errors[name] = message

    def display_blocking_error(self, title: str, message: str) -> None:
        self.blocking_errors.append((title, message))
        self.events.append("blocking_error")

    def close(self) -> None:
        self.closed = True
        self.events.append("close")


@pytest.fixture
def make_view() -> type[FakeView]:
    return FakeView


@pytest.fixture
def settings() -> Settings:
    return Settings(DATABASE_URL="sqlite://", TIME_ZONE=None, DECIMAL_PLACES=2)


@pytest.fixture
def db_engine() -> Iterator[Engine]:
    """SQLite en memoria compartido entre sesiones, con las tablas creadas."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(db_engine: Engine) -> sessionmaker:
    return sessionmaker(bind=db_engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def department_service(session_factory: sessionmaker) -> DepartmentService:
    return DepartmentService(session_factory)


@pytest.fixture
def seller_service(session_factory: sessionmaker) -> SellerService:
    return SellerService(session_factory)
