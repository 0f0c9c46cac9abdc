"""Shared fixtures: in-memory database and an HTTP client bound to it."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from backend.app import models  # noqa: F401
from backend.app.core.database import Base, enable_sqlite_foreign_keys, get_db
from backend.app.main import app


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def filament_factory(db_session):
    """Create CalcFilament rows."""
    from backend.app.models.filament import CalcFilament

    async def _create(**kwargs):
        defaults = {"name": "Test PLA", "material": "PLA", "spool_weight_grams": 1000.0, "spool_cost": 20.0}
        defaults.update(kwargs)
        filament = CalcFilament(**defaults)
        db_session.add(filament)
        await db_session.commit()
        await db_session.refresh(filament)
        return filament

    return _create


@pytest.fixture
def printer_factory(db_session):
    """Create CalcPrinter rows."""
    from backend.app.models.printer import CalcPrinter

    async def _create(**kwargs):
        defaults = {
            "name": "Test Printer",
            "power_watts": 200.0,
            "purchase_cost": 300.0,
            "depreciation_hours": 5000.0,
            "maintenance_cost": 50.0,
        }
        defaults.update(kwargs)
        printer = CalcPrinter(**defaults)
        db_session.add(printer)
        await db_session.commit()
        await db_session.refresh(printer)
        return printer

    return _create
