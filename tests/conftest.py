import pytest
from fastapi.testclient import TestClient

from fest_registration.core.config import Settings
from fest_registration.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'registrations.db'}")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session(client, app):
    """A session on the same store the client talks to."""
    db = app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def sample_student():
    return {
        "name": "A",
        "rollNumber": "R1",
        "email": "A@x.com",
        "phone": "1234567890",
        "event": "Dance",
    }
