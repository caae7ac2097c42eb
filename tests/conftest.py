# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.database import Database
from app.main import create_app
from app.store.ledger import LedgerStore


@pytest.fixture
def database():
    """SQLite en memoria, una base nueva por test."""
    db = Database("sqlite://")
    db.create_db_and_tables()
    yield db
    db.dispose()


@pytest.fixture
def store(database):
    return LedgerStore(database)


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "AUTH_MODE": "dev",
        "DEV_LOGIN_ENABLED": True,
        "APP_TIMEZONE": None,
        "CORS_ORIGINS": ["http://localhost:3000"],
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def client():
    """TestClient con lifespan (crea las tablas al entrar)."""
    with TestClient(create_app(make_settings())) as c:
        yield c


@pytest.fixture
def jwt_client():
    settings = make_settings(AUTH_MODE="jwt", SECRET_KEY="clave-de-pruebas")
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def ana():
    return {"Authorization": "Bearer ana@example.com"}


@pytest.fixture
def beto():
    return {"Authorization": "Bearer beto@example.com"}


@pytest.fixture
def settings_factory():
    return make_settings
