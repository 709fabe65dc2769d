from contextlib import contextmanager
from typing import Iterator
import logging
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from entityforms.db import SessionLocal, db_session
from entityforms.models import Department, Seller
from entityforms.schemas import DepartmentIn, SellerIn
from entityforms.core.errors import DbException, DbIntegrityException

logger = logging.getLogger("persistence")
logger.setLevel(logging.INFO)


@contextmanager
def _session(factory: sessionmaker) -> Iterator[Session]:
    """Sesión de get_db(); toda falla de SQLAlchemy o del driver sale como DbException."""
    with db_session(factory) as db:
        try:
            yield db
        except IntegrityError as e:
            db.rollback()
            raise DbIntegrityException(str(e.orig)) from e
        except SQLAlchemyError as e:
            db.rollback()
            raise DbException(str(e)) from e
        except OverflowError as e:
            # sqlite3 no envuelve enteros fuera de rango
            db.rollback()
            raise DbException(str(e)) from e


class DepartmentService:
    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self._factory = session_factory

    def find_all(self) -> list[DepartmentIn]:
        with _session(self._factory) as db:
            rows = db.scalars(select(Department).order_by(Department.name)).all()
            return [DepartmentIn.model_validate(r) for r in rows]

    def find_by_id(self, dep_id: int) -> DepartmentIn | None:
        with _session(self._factory) as db:
            dep = db.get(Department, dep_id)
            return DepartmentIn.model_validate(dep) if dep is not None else None

    def save_or_update(self, entity: DepartmentIn) -> DepartmentIn:
        with _session(self._factory) as db:
            if entity.id is None:
                dep = Department(name=entity.name)
                db.add(dep)
            else:
                dep = db.get(Department, entity.id)
                if dep is None:
                    raise DbException(f"Unexpected error! No rows affected! (department id={entity.id})")
                dep.name = entity.name
            db.commit()
            logger.info("save_department", extra={"table": "department", "id": dep.id})
            return DepartmentIn.model_validate(dep)

    def remove(self, dep_id: int) -> None:
        with _session(self._factory) as db:
            dep = db.get(Department, dep_id)
            if dep is None:
                return
            if db.scalar(select(Seller.id).where(Seller.department_id == dep_id).limit(1)) is not None:
                raise DbIntegrityException(f"Department {dep.name!r} still has sellers")
            db.delete(dep)
            db.commit()
            logger.info("remove_department", extra={"table": "department", "id": dep_id})


class SellerService:
    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self._factory = session_factory

    def find_all(self) -> list[SellerIn]:
        with _session(self._factory) as db:
            rows = db.scalars(select(Seller).order_by(Seller.name)).all()
            return [SellerIn.model_validate(r) for r in rows]

    def find_by_id(self, seller_id: int) -> SellerIn | None:
        with _session(self._factory) as db:
            seller = db.get(Seller, seller_id)
            return SellerIn.model_validate(seller) if seller is not None else None

    def save_or_update(self, entity: SellerIn) -> SellerIn:
        with _session(self._factory) as db:
            dep_id = entity.department.id if entity.department is not None else None
            # la FK se valida aquí, no en el formulario
            if dep_id is not None and db.get(Department, dep_id) is None:
                raise DbException(f"Department {dep_id} does not exist")

            if entity.id is None:
                seller = Seller()
                db.add(seller)
            else:
                seller = db.get(Seller, entity.id)
                if seller is None:
                    raise DbException(f"Unexpected error! No rows affected! (seller id={entity.id})")
            seller.name = entity.name
            seller.email = entity.email
            seller.birth_date = entity.birth_date
            seller.base_salary = entity.base_salary
            seller.department_id = dep_id
            db.commit()
            db.refresh(seller)
            logger.info("save_seller", extra={"table": "seller", "id": seller.id, "department_id": dep_id})
            return SellerIn.model_validate(seller)

    def remove(self, seller_id: int) -> None:
        with _session(self._factory) as db:
            seller = db.get(Seller, seller_id)
            if seller is None:
                return
            db.delete(seller)
            db.commit()
            logger.info("remove_seller", extra={"table": "seller", "id": seller_id})
