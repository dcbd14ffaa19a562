"""
Shared pytest fixtures.

Every test gets its own in-memory SQLite database (aiosqlite + StaticPool),
so services and the HTTP app see a clean schema.
"""

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from contracts_core.db import Base, get_db


# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture(scope="function")
async def test_engine():
    """Async in-memory engine with all tables created."""
    from contracts_api.models import blueprint, contract  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


# =============================================================================
# APP FIXTURES
# =============================================================================

@pytest.fixture(scope="function")
async def client(session_factory):
    """HTTP client against a fresh app whose sessions use the test database."""
    from contracts_api.main import create_app

    app = create_app()

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# =============================================================================
# MODEL FIXTURES
# =============================================================================

@pytest.fixture
async def nda_blueprint(db_session):
    from contracts_api.services.blueprint_service import BlueprintService

    return await BlueprintService(db_session).create(
        "NDA",
        [
            {"type": "text", "label": "Company"},
            {"type": "date", "label": "Effective date", "position": {"x": 10, "y": 20}},
            {"type": "signature", "label": "Signed by"},
            {"type": "checkbox", "label": "Accept terms"},
        ],
    )


@pytest.fixture
async def nda_contract(db_session, nda_blueprint):
    from contracts_api.services.contract_service import ContractService

    return await ContractService(db_session).create("Acme NDA", nda_blueprint.id)
