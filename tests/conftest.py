"""
Fixture principali per i test dell'API processi
"""
import sys
from pathlib import Path
from typing import AsyncGenerator, Generator, Callable, List, Optional

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

# Aggiungi il path del progetto
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.main import app
from src.database import Base, get_db
from tests.helpers.files import build_workbook, DEFAULT_HEADERS


# ============================================================================
# Database Test Setup
# ============================================================================

# SQLite in-memory per i test
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Crea una sessione database isolata per ogni test.
    Le tabelle vengono ricreate a ogni test.
    """
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()

    try:
        yield session
        session.rollback()
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


def override_get_db():
    """Override per get_db dependency"""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


# ============================================================================
# App Fixture con Overrides
# ============================================================================

@pytest.fixture(scope="function")
def test_app(db_session: Session):
    """
    Crea l'app FastAPI con il database di test.
    """
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


# ============================================================================
# HTTP Clients
# ============================================================================

@pytest.fixture
def client(test_app) -> TestClient:
    """Client HTTP sincrono per test semplici"""
    return TestClient(test_app)


@pytest_asyncio.fixture
async def async_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """Client HTTP asincrono"""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


# ============================================================================
# File di import
# ============================================================================

@pytest.fixture
def xlsx_file() -> Callable[..., bytes]:
    """Factory per file .xlsx di test"""
    def _factory(rows: List[list], headers: Optional[List[str]] = None) -> bytes:
        return build_workbook(
            headers or DEFAULT_HEADERS,
            rows
        )
    return _factory
