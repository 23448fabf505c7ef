import pytest
from fastapi.testclient import TestClient

from app import create_app
from log import setup_logging
from models.student import StudentCreate
from store import StudentStore

# attach the stdout handler before CliRunner swaps sys.stdout
setup_logging()


@pytest.fixture
def store():
    """A fresh, empty store for each test."""
    return StudentStore()


@pytest.fixture
def client(store):
    """A test client wired to the ``store`` fixture."""
    with TestClient(create_app(store)) as c:
        yield c


@pytest.fixture
def sample_student():
    """A valid student payload."""
    return {"name": "John Doe", "age": 20, "email": "john@example.com"}


@pytest.fixture
def john(sample_student):
    return StudentCreate(**sample_student)
