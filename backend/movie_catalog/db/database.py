from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from movie_catalog.config.environment import DATABASE_URL
from movie_catalog.config.paths import DATA_DIR

class Base(DeclarativeBase):
    pass

def enable_sqlite_foreign_keys(engine: Engine) -> Engine:
    """Turn on foreign key enforcement for every new SQLite connection."""
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine

SQLALCHEMY_DATABASE_URL = DATABASE_URL
connect_args = {"check_same_thread": False}

engine = enable_sqlite_foreign_keys(create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args))

# Objects stay readable after their session is closed; repositories never share a session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

def init_db():
    from movie_catalog.db import models  # noqa: F401 registers the tables

    DATA_DIR.mkdir(exist_ok=True)
    Base.metadata.create_all(bind=engine)

def get_session_factory() -> sessionmaker:
    return SessionLocal
