import pytest
from fastapi.testclient import TestClient

from terraweave.database import make_engine
from terraweave.main import create_app


@pytest.fixture
def engine():
    eng = make_engine("sqlite://")
    yield eng
    eng.dispose()


@pytest.fixture
def app(engine):
    return create_app(engine)


@pytest.fixture
def client(app):
    # entering the context runs the startup steps against the in-memory db
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client, app):
    session = app.state.session_factory()
    yield session
    session.close()
