"""Tests for the demo dataset loader."""

from decimal import Decimal

import pytest

from orderdesk.application.services.order_service import OrderApplicationService
from orderdesk.domain.enums import OrderStatus
from orderdesk.infrastructure.database.seed import SEED_ORDERS, SEED_PRODUCTS, SEED_USERS, seed_database


@pytest.mark.asyncio
async def test_seed_creates_demo_dataset(test_session_factory):
    users = await seed_database(test_session_factory)

    assert [u.email for u in users] == [u["email"] for u in SEED_USERS]
    assert users[0].role == "admin"

    service = OrderApplicationService(test_session_factory)
    everything = await service.find_all()
    assert everything.count == len(SEED_ORDERS)

    john_orders = await service.find_all(users[1].id)
    assert john_orders.count == 1
    john_order = john_orders.orders[0]
    assert john_order.status == OrderStatus.DELIVERED
    assert john_order.total == Decimal("1659.97")


@pytest.mark.asyncio
async def test_seed_is_repeatable(test_session_factory):
    await seed_database(test_session_factory)
    users = await seed_database(test_session_factory)

    service = OrderApplicationService(test_session_factory)
    assert (await service.find_all()).count == len(SEED_ORDERS)
    assert len(users) == 3
    assert len(SEED_PRODUCTS) == 7
