import os

# The app module builds its token service at import time
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-testing-only")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.database.base import Base
from app.models import Product, User

# Ensure all models are imported so they're registered with Base.metadata
__all__ = ["Product", "User"]

TEST_SECRET = "test-secret-key-for-testing-only"


def _set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign key enforcement in SQLite."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing.

    Uses StaticPool to ensure all connections share the same in-memory database.
    Without this, each connection would get a fresh database without tables.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    event.listen(engine, "connect", _set_sqlite_pragma)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture
def session(engine) -> Session:
    """Create a test database session."""
    TestSessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
    )
    session = TestSessionLocal()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def settings() -> Settings:
    """Test settings: fixed secret and the cheapest bcrypt cost."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        database_url="sqlite:///:memory:",
    )


@pytest.fixture
def app(engine, settings: Settings) -> FastAPI:
    """Application wired to the in-memory database."""
    from app.database import session as session_module
    from app.main import create_app

    app = create_app(settings)

    TestSessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
    )

    def override_get_db():
        db = TestSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[session_module.get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a FastAPI test client with in-memory database."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def registered_user(client: TestClient) -> dict:
    """Register a user through the API and return the response body."""
    response = client.post(
        "/api/auth/register",
        json={"email": "alice@example.com", "password": "secret123", "name": "Alice"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered_user: dict) -> dict[str, str]:
    """Authorization header for the registered user."""
    return {"Authorization": f"Bearer {registered_user['token']}"}


@pytest.fixture
def product_payload() -> dict:
    return {
        "title": "Notebook",
        "description": "Gaming notebook with a fast GPU",
        "price": 4500.0,
        "imageUrl": "/images/notebook.png",
        "isFeatured": True,
    }


@pytest.fixture
def sample_product(session: Session) -> Product:
    """Create a sample product directly in the database."""
    product = Product(
        title="Smartphone",
        description="Capture the best pictures",
        price=45.0,
        image_url="/images/smartphone.png",
        is_featured=False,
    )
    session.add(product)
    session.commit()
    session.refresh(product)
    return product
