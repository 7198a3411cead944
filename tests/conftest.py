"""Shared fixtures: in-memory database, seeded users/products, order service."""

from decimal import Decimal
from types import SimpleNamespace

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from orderdesk.application.services.order_service import OrderApplicationService
from orderdesk.data.models import Base, ProductModel, UserModel
from orderdesk.infrastructure.database import build_engine

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = build_engine(TEST_DATABASE_URL)

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def users(test_session_factory):
    """One admin and two regular users."""
    admin = UserModel(name="Admin User", email="admin@example.com", role="admin")
    alice = UserModel(name="Alice Buyer", email="alice@example.com", role="user")
    bob = UserModel(name="Bob Buyer", email="bob@example.com", role="user")

    async with test_session_factory() as session:
        session.add_all([admin, alice, bob])
        await session.commit()

    return SimpleNamespace(admin=admin, alice=alice, bob=bob)


@pytest_asyncio.fixture
async def products(test_session_factory, users):
    """Small catalog: lamp (stock 5), notebook (stock 100), cable (out of stock)."""
    lamp = ProductModel(
        name="Desk Lamp", description="LED desk lamp", price=Decimal("10.00"), stock=5,
        user_id=users.admin.id,
    )
    notebook = ProductModel(
        name="Notebook", description="A5 dotted", price=Decimal("2.50"), stock=100,
        user_id=users.admin.id,
    )
    cable = ProductModel(
        name="USB Cable", description=None, price=Decimal("5.99"), stock=0,
        user_id=users.alice.id,
    )

    async with test_session_factory() as session:
        session.add_all([lamp, notebook, cable])
        await session.commit()

    return SimpleNamespace(lamp=lamp, notebook=notebook, cable=cable)


@pytest.fixture
def order_service(test_session_factory) -> OrderApplicationService:
    return OrderApplicationService(session_factory=test_session_factory)

