# storage_api/database.py
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from storage_api.config import normalize_database_url, settings

Base = declarative_base()


def build_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    url = normalize_database_url(url)

    # check_same_thread only applies to SQLite; FastAPI hands sessions to worker threads
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    else:
        connect_args = {}

    new_engine = create_engine(url, echo=echo, connect_args=connect_args, **kwargs)

    if new_engine.dialect.name == "sqlite":
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)

    return new_engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = engine) -> None:
    # Table classes register themselves on Base.metadata at import time
    import storage_api.models  # noqa: F401

    Base.metadata.create_all(bind=bind)
