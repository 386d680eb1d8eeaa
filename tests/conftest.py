"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.api.app import create_app
from src.core.config import Settings
from src.core.models import NewGame
from src.db.memory_repository import MemCatalogRepository
from src.db.repository import CatalogRepository
from src.db.schema import Base
from src.db.seed import seed_sample_data
from src.db.sql_repository import SQLCatalogRepository

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine, expire_on_commit=False)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(params=["memory", "sql"])
def repository(request: pytest.FixtureRequest) -> CatalogRepository:
    """Every store implementation, so the same contract tests run against each of them."""
    if request.param == "memory":
        return MemCatalogRepository()
    return SQLCatalogRepository(request.getfixturevalue("db_session_repo"))


@pytest.fixture
def seeded_repository(repository: CatalogRepository) -> CatalogRepository:
    seed_sample_data(repository)
    return repository


def _new_game(game_id: str = "fraction-frenzy", **overrides) -> NewGame:
    fields = dict(
        id=game_id,
        title="Fraction Frenzy",
        description="Slice pizzas into equal parts and compare fractions.",
        category="math",
        icon="pizza",
        difficulty="Beginner",
        age_group="Ages 7+",
        learning_benefits=["Understands fractions", "Compares quantities"],
        instructions=["Drag the knife", "Match the fraction shown"],
    )
    fields.update(overrides)
    return NewGame(**fields)


@pytest.fixture
def make_new_game():
    """Game input with sensible defaults, any field can be overridden."""
    return _new_game


@pytest.fixture
def empty_store() -> MemCatalogRepository:
    return MemCatalogRepository()


@pytest.fixture
def client(empty_store: MemCatalogRepository) -> Generator[TestClient, None, None]:
    """API served over the sample catalog, backed by an isolated in-memory store."""
    seed_sample_data(empty_store)
    app = create_app(Settings(seed_sample_data=False), repository=empty_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def bare_client(empty_store: MemCatalogRepository) -> Generator[TestClient, None, None]:
    """API over an empty store, for tests that set up their own data."""
    app = create_app(Settings(seed_sample_data=False), repository=empty_store)
    with TestClient(app) as test_client:
        yield test_client
