from entityforms.core.config import Settings, get_settings
from entityforms.core.errors import WiringError
from entityforms.forms.controllers import DepartmentFormController, FormController, SellerFormController
from entityforms.forms.view import FormView
from entityforms.schemas import DepartmentIn, SellerIn


class EntityListController:
    """Lista de entidades persistidas. Se suscribe a cada formulario que abre."""

    def __init__(self, service, settings: Settings | None = None):
        self.service = service
        self.settings = settings or get_settings()
        self.rows: list = []

    def refresh(self) -> None:
        if self.service is None:
            raise WiringError("Service was null")
        self.rows = self.service.find_all()

    def on_data_changed(self) -> None:
        self.refresh()

    def create_form(self, view: FormView, entity=None) -> FormController:
        form = self._build_form(view, entity if entity is not None else self._placeholder())
        form.subscribe_data_change_listener(self.on_data_changed)
        form.initialize()
        form.update_form_data()
        return form

    def remove(self, entity) -> None:
        if entity.id is None:
            raise WiringError("Entity has no id")
        self.service.remove(entity.id)
        self.refresh()

    def _placeholder(self):
        raise NotImplementedError

    def _build_form(self, view: FormView, entity) -> FormController:
        raise NotImplementedError


class DepartmentListController(EntityListController):
    def _placeholder(self) -> DepartmentIn:
        return DepartmentIn()

    def _build_form(self, view, entity):
        return DepartmentFormController(view, entity=entity, service=self.service, settings=self.settings)


class SellerListController(EntityListController):
    def __init__(self, service, department_service, settings: Settings | None = None):
        super().__init__(service, settings)
        self.department_service = department_service

    def _placeholder(self) -> SellerIn:
        return SellerIn()

    def _build_form(self, view, entity):
        form = SellerFormController(
            view,
            entity=entity,
            service=self.service,
            department_service=self.department_service,
            settings=self.settings,
        )
        form.load_associated_objects()
        return form
