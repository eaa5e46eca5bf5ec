# terraweave/database.py
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from fastapi import Request
import os

from . import config

Base = declarative_base()


def make_engine(url=config.DATABASE_URL):
    """Create an engine for ``url``; SQLite gets foreign keys switched on."""
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every session sees an empty db
            kwargs["poolclass"] = StaticPool
    eng = create_engine(url, **kwargs)

    if url.startswith("sqlite"):
        @event.listens_for(eng, "connect")
        def _enable_foreign_keys(dbapi_conn, _record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return eng


def ensure_sqlite_dir(eng):
    """Create the directory holding a file-backed SQLite database."""
    path = eng.url.database
    if eng.url.get_backend_name() == "sqlite" and path and path != ":memory:":
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)


def make_session_factory(bind):
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


# Dependency to get DB session; the factory is bound per application instance
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
