"""Shared test infrastructure for the trade inspection API test suite.

Provides:
- db_engine / session_factory: async SQLite in-memory database with all tables created
- db_session: a session on that database for direct model access
- client: httpx AsyncClient bound to the app with get_db pointed at the test database
- api: the versioned route prefix
- make_physical_parameter / make_chemical_parameter: factories for catalog rows
- enquiry_payload: factory for a valid raise-enquiry JSON body
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tradeinspect.config import get_settings
from tradeinspect.database import Base, get_db

# Import all model modules so their tables are registered with Base.metadata
import tradeinspect.models  # noqa: F401
from tradeinspect.models.parameter import ChemicalInspectionParam, PhysicalInspectionParam

from tradeinspect.main import app


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
async def db_engine():
    """Fresh in-memory database per test; one shared connection keeps it alive."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session
        await session.rollback()


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------

@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def api(settings):
    return settings.API_PREFIX


@pytest.fixture
async def client(session_factory):
    """AsyncClient whose requests each get their own session on the test database."""

    async def _get_test_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_test_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Catalog factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_physical_parameter(session_factory):
    """Factory that stores a physical inspection template and returns it.

    Usage:
        template = await make_physical_parameter(broken=5.0)
    """
    async def _factory(**overrides) -> PhysicalInspectionParam:
        values = {
            "broken": 5.0,
            "purity": 95.0,
            "yellow_kernel": 1.0,
            "damage_kernel": 0.5,
            "red_kernel": 0.2,
            "paddy_kernel": 0.1,
            "chalky_rice": 3.0,
            "live_insects": 0.0,
            "milling_degree": "Well Milled",
            "average_grain_length": 7.2,
        }
        values.update(overrides)
        async with session_factory() as session:
            template = PhysicalInspectionParam(**values)
            session.add(template)
            await session.commit()
            await session.refresh(template)
        return template

    return _factory


@pytest.fixture
def make_chemical_parameter(session_factory):
    async def _factory(parameter_name: str = "Moisture", **overrides) -> ChemicalInspectionParam:
        values = {"parameter_name": parameter_name, "min_value": 0.0, "max_value": 14.0, "unit": "%"}
        values.update(overrides)
        async with session_factory() as session:
            template = ChemicalInspectionParam(**values)
            session.add(template)
            await session.commit()
            await session.refresh(template)
        return template

    return _factory


# ---------------------------------------------------------------------------
# Enquiry payload factory
# ---------------------------------------------------------------------------

@pytest.fixture
def enquiry_payload():
    """Factory for a valid single-day electronics enquiry body.

    Usage:
        payload = enquiry_payload(commodityCategory="Other", subCommodity="Toys")
    """
    def _factory(**overrides) -> dict:
        payload = {
            "inspectionLocation": "Mumbai Port",
            "country": "India",
            "urgencyLevel": "High",
            "commodityCategory": "Electronics & Electrical",
            "subCommodity": "Devices",
            "volume": 1200,
            "siUnits": "pieces",
            "expectedBudgetUSD": 2500,
            "inspectionType": "single_day",
            "singleDayInspectionDate": "2026-11-02",
            "physicalInspection": False,
            "chemicalTesting": False,
            "certificates": ["ISO"],
            "companyName": "Acme Traders",
            "contactPersonName": "Asha Rao",
            "emailAddress": "asha@acmetraders.com",
            "phoneNumber": "+919876543210",
        }
        payload.update(overrides)
        return {key: value for key, value in payload.items() if value is not None}

    return _factory
