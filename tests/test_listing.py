"""Tests de punta a punta: listas que abren formularios contra SQLite."""

from datetime import date
from typing import Any

import pytest
from sqlalchemy.orm import sessionmaker

from entityforms.core.config import Settings
from entityforms.core.errors import DbIntegrityException, WiringError
from entityforms.forms.controllers import SellerFormController, SubmitOutcome
from entityforms.forms.listing import DepartmentListController, SellerListController
from entityforms.main import create_app
from entityforms.schemas import DepartmentIn, SellerIn
from entityforms.services import DepartmentService, SellerService


class TestDepartmentList:
    def test_new_department_refreshes_list(
        self, make_view: Any, department_service: DepartmentService, settings: Settings
    ) -> None:
        listing = DepartmentListController(department_service, settings)
        listing.refresh()
        assert listing.rows == []

        view = make_view()
        form = listing.create_form(view)
        assert view.fields == {"id": "", "name": ""}
        assert len(form.notifier) == 1

        view.fields["name"] = "Sales"
        assert form.submit() is SubmitOutcome.DONE
        assert [d.name for d in listing.rows] == ["Sales"]

    def test_edit_existing(
        self, make_view: Any, department_service: DepartmentService, settings: Settings
    ) -> None:
        dep = department_service.save_or_update(DepartmentIn(name="Sales"))
        listing = DepartmentListController(department_service, settings)

        view = make_view()
        form = listing.create_form(view, dep)
        assert view.fields["id"] == str(dep.id)

        view.fields["name"] = "Marketing"
        form.submit()
        assert listing.rows == [DepartmentIn(id=dep.id, name="Marketing")]

    def test_cancel_does_not_refresh(
        self, make_view: Any, department_service: DepartmentService, settings: Settings
    ) -> None:
        listing = DepartmentListController(department_service, settings)
        form = listing.create_form(make_view())
        department_service.save_or_update(DepartmentIn(name="Elsewhere"))

        form.cancel()
        assert listing.rows == []

    def test_remove_referenced_department(
        self,
        department_service: DepartmentService,
        seller_service: SellerService,
        settings: Settings,
    ) -> None:
        dep = department_service.save_or_update(DepartmentIn(name="Sales"))
        seller_service.save_or_update(
            SellerIn(name="Ann", email="ann@x.com", birth_date=None, base_salary=None, department=dep)
        )
        listing = DepartmentListController(department_service, settings)
        with pytest.raises(DbIntegrityException):
            listing.remove(dep)

    def test_remove_unsaved(self, department_service: DepartmentService, settings: Settings) -> None:
        with pytest.raises(WiringError):
            DepartmentListController(department_service, settings).remove(DepartmentIn())


class TestSellerList:
    def test_create_seller_through_form(
        self,
        make_view: Any,
        department_service: DepartmentService,
        seller_service: SellerService,
        settings: Settings,
    ) -> None:
        dep = department_service.save_or_update(DepartmentIn(name="Computers"))
        listing = SellerListController(seller_service, department_service, settings)

        view = make_view()
        form = listing.create_form(view)
        assert isinstance(form, SellerFormController)
        assert view.choices["department"] == [dep]
        assert view.fields["baseSalary"] == ""

        view.fields.update({"name": "Alex Grey", "email": "alex@gmail.com", "baseSalary": "2500.5"})
        view.dates["birthDate"] = date(1988, 1, 15)
        view.selections["department"] = dep

        assert form.submit() is SubmitOutcome.DONE
        assert view.closed is True
        assert len(listing.rows) == 1
        row = listing.rows[0]
        assert (row.name, row.email, row.department) == ("Alex Grey", "alex@gmail.com", dep)

    def test_remove(
        self,
        department_service: DepartmentService,
        seller_service: SellerService,
        settings: Settings,
    ) -> None:
        saved = seller_service.save_or_update(SellerIn(name="Ann", email="ann@x.com"))
        listing = SellerListController(seller_service, department_service, settings)
        listing.refresh()
        listing.remove(saved)
        assert listing.rows == []


class TestCreateApp:
    def test_wires_everything(self, session_factory: sessionmaker, settings: Settings) -> None:
        app = create_app(settings, session_factory)
        assert app.departments.rows == []
        assert app.sellers.rows == []
        assert app.sellers.department_service is app.department_service
