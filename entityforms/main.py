# entityforms/main.py
from dataclasses import dataclass
import logging
from sqlalchemy.orm import sessionmaker
from entityforms.core.config import Settings, configure_logging, get_settings
from entityforms.db import SessionLocal, init_db
from entityforms.forms.listing import DepartmentListController, SellerListController
from entityforms.services import DepartmentService, SellerService

logger = logging.getLogger("forms")

@dataclass
class FormsApp:
    settings: Settings
    department_service: DepartmentService
    seller_service: SellerService
    departments: DepartmentListController
    sellers: SellerListController

def create_app(settings: Settings | None = None, session_factory: sessionmaker | None = None) -> FormsApp:
    settings = settings or get_settings()
    configure_logging(settings)
    factory = session_factory or SessionLocal
    init_db(factory.kw["bind"])

    department_service = DepartmentService(factory)
    seller_service = SellerService(factory)
    app = FormsApp(
        settings=settings,
        department_service=department_service,
        seller_service=seller_service,
        departments=DepartmentListController(department_service, settings),
        sellers=SellerListController(seller_service, department_service, settings),
    )
    app.departments.refresh()
    app.sellers.refresh()
    logger.info("app_ready", extra={"app": settings.APP_NAME, "version": settings.APP_VERSION})
    return app
