from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from forum.core.config import get_settings
from forum.models.base import Base
from forum.models import post_model, user_model  # noqa: F401


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless this is set on every connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(url: str, **kwargs) -> Engine:
    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_db(bind: Engine) -> None:
    """Create any missing tables for the forum models."""
    Base.metadata.create_all(bind=bind)


settings = get_settings()

if settings.database_url:
    engine = make_engine(settings.database_url, pool_pre_ping=True)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
else:
    # Requests that need the database fail until DATABASE_URL is set.
    engine = None
    SessionLocal = None


def get_db():
    if SessionLocal is None:
        raise RuntimeError("DATABASE_URL is not set")
    with SessionLocal() as db:
        yield db
