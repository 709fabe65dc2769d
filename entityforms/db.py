from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from entityforms.core.config import get_settings

settings = get_settings()

engine = create_engine(
    settings.sqlalchemy_url,
    pool_pre_ping=True,
    pool_recycle=3600,
    echo=False,
)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)

class Base(DeclarativeBase):
    pass

# una sesión corta por operación de servicio
def get_db(factory: sessionmaker = SessionLocal):
    db = factory()
    try:
        yield db
    finally:
        db.close()

db_session = contextmanager(get_db)

def init_db(bind: Engine = engine) -> None:
    from entityforms import models  # noqa: F401  registra las tablas
    Base.metadata.create_all(bind=bind)
