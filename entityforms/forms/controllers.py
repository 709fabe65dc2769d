"""Controladores de formulario: armar, guardar, notificar y cerrar.

Orden fijo por submit: validar todo -> armar -> persistir -> notificar -> cerrar.
"""
from dataclasses import replace
from enum import Enum
import logging
from entityforms.core.config import Settings, get_settings
from entityforms.core.errors import DbException, WiringError
from entityforms.forms.assemblers import DepartmentAssembler, SellerAssembler
from entityforms.forms.fields import format_decimal, to_local_date
from entityforms.forms.notify import ChangeNotifier, DataChangeListener
from entityforms.forms.view import FieldKind, FormView
from entityforms.schemas import SellerIn

logger = logging.getLogger("forms")
logger.setLevel(logging.INFO)

SAVE_ERROR_TITLE = "Error saving object"


class FormState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SAVING = "saving"
    DONE = "done"


class SubmitOutcome(str, Enum):
    DONE = "done"
    VALIDATION_FAILED = "validation_failed"
    PERSISTENCE_FAILED = "persistence_failed"


class FormController:
    """Base común; las subclases ponen el assembler y cómo se carga la vista."""

    kind = "entity"

    def __init__(self, view: FormView, *, entity=None, service=None, settings: Settings | None = None):
        self.view = view
        self.entity = entity
        self.service = service
        self.settings = settings or get_settings()
        self.notifier = ChangeNotifier()
        self.state = FormState.IDLE
        self.assembler = self._make_assembler()

    def _make_assembler(self):
        raise NotImplementedError

    def subscribe_data_change_listener(self, listener: DataChangeListener) -> None:
        self.notifier.subscribe(listener)

    def initialize(self) -> None:
        for spec in self.assembler.FIELDS:
            if spec.kind is FieldKind.DATE:
                spec = replace(spec, format=self.settings.DATE_FORMAT)
            self.view.constrain(spec)

    def update_form_data(self) -> None:
        if self.entity is None:
            raise WiringError("Entity was null")
        self.view.write_field("id", "" if self.entity.id is None else str(self.entity.id))
        self.view.write_field("name", self.entity.name)

    def submit(self) -> SubmitOutcome:
        if self.entity is None:
            raise WiringError("Entity was null")
        if self.service is None:
            raise WiringError("Service was null")
        try:
            return self._submit()
        finally:
            # nunca queda en un estado intermedio, ni ante errores inesperados
            if self.state is not FormState.DONE:
                self.state = FormState.IDLE

    def _submit(self) -> SubmitOutcome:
        self.state = FormState.VALIDATING
        result = self.assembler.assemble(self.assembler.capture(self.view))
        self._set_error_messages({} if result.ok else result.report.errors)
        if not result.ok:
            logger.info("validation_failed", extra={"kind": self.kind, "fields": sorted(result.report.errors)})
            return SubmitOutcome.VALIDATION_FAILED

        self.state = FormState.SAVING
        try:
            saved = self.service.save_or_update(result.value)
        except DbException as e:
            # el candidato se descarta; el próximo intento arranca limpio
            logger.warning("save_failed", extra={"kind": self.kind, "error": str(e)})
            self.view.display_blocking_error(SAVE_ERROR_TITLE, str(e))
            return SubmitOutcome.PERSISTENCE_FAILED

        self.entity = saved
        self.state = FormState.DONE
        notified = self.notifier.fire_changed()
        logger.info("saved", extra={"kind": self.kind, "id": saved.id, "notified": notified})
        self.view.close()
        return SubmitOutcome.DONE

    def cancel(self) -> None:
        self.notifier.clear()
        self.view.close()

    def _set_error_messages(self, errors: dict[str, str]) -> None:
        # un mensaje por campo; los campos sin error se limpian
        for spec in self.assembler.FIELDS:
            self.view.display_field_error(spec.name, errors.get(spec.name, ""))


class DepartmentFormController(FormController):
    kind = "department"

    def _make_assembler(self):
        return DepartmentAssembler()


class SellerFormController(FormController):
    kind = "seller"

    def __init__(self, view: FormView, *, entity: SellerIn | None = None, service=None,
                 department_service=None, settings: Settings | None = None):
        self.department_service = department_service
        super().__init__(view, entity=entity, service=service, settings=settings)

    def _make_assembler(self):
        return SellerAssembler(tz=self.settings.time_zone)

    def load_associated_objects(self) -> None:
        if self.department_service is None:
            raise WiringError("DepartmentService was null")
        self.view.set_choices("department", self.department_service.find_all())

    def update_form_data(self) -> None:
        super().update_form_data()
        self.view.write_field("email", self.entity.email)
        self.view.write_field("baseSalary", format_decimal(self.entity.base_salary, self.settings.DECIMAL_PLACES))
        self.view.write_date("birthDate", to_local_date(self.entity.birth_date, self.settings.time_zone))
        self.view.write_selection("department", self.entity.department)
