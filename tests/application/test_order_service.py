"""
Tests for OrderApplicationService against an in-memory database.

Covers placement validation, atomic writes, ownership-scoped reads,
listing order and status overwrites.
"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import func, select, update
from sqlalchemy.exc import OperationalError

from orderdesk.application.dtos.order_dto import CreateOrderItemRequest, CreateOrderRequest
from orderdesk.application.results import OrderErrorCode, OrderInternalError
from orderdesk.application.services.order_service import (
    NO_ORDERS_MESSAGE,
    NO_USER_ORDERS_MESSAGE,
    OrderApplicationService,
)
from orderdesk.data.models import OrderItemModel, OrderModel, ProductModel
from orderdesk.data.repositories.order_repository_impl import SqlAlchemyOrderRepository
from orderdesk.domain.enums import OrderStatus


def _request(*lines) -> CreateOrderRequest:
    return CreateOrderRequest(
        items=[CreateOrderItemRequest(product_id=pid, quantity=qty) for pid, qty in lines]
    )


async def _row_counts(session_factory):
    """(orders, order_items) row counts."""
    async with session_factory() as session:
        orders = await session.scalar(select(func.count()).select_from(OrderModel))
        items = await session.scalar(select(func.count()).select_from(OrderItemModel))
    return orders, items


async def _db_down_async(*args, **kwargs):
    raise OperationalError("SELECT 1", {}, Exception("database is locked"))


# =============================================================================
# CREATE
# =============================================================================


@pytest.mark.asyncio
async def test_create_order_returns_pending_order_with_total(order_service, users, products):
    result = await order_service.create_order(
        _request((products.lamp.id, 2), (products.notebook.id, 3)), users.alice.id
    )

    assert result.success
    order = result.value
    assert order.order_id > 0
    assert order.user_id == users.alice.id
    assert order.status == OrderStatus.PENDING
    assert order.created_at is not None
    assert [(i.product_id, i.quantity) for i in order.items] == [
        (products.lamp.id, 2),
        (products.notebook.id, 3),
    ]
    assert order.items[0].product.name == "Desk Lamp"
    assert order.user.email == "alice@example.com"
    assert order.total == Decimal("27.50")


@pytest.mark.asyncio
async def test_create_order_does_not_decrement_stock(
    order_service, users, products, test_session_factory
):
    await order_service.create_order(_request((products.lamp.id, 5)), users.alice.id)

    async with test_session_factory() as session:
        lamp = await session.get(ProductModel, products.lamp.id)
    assert lamp.stock == 5


@pytest.mark.asyncio
async def test_create_order_accepts_quantity_equal_to_stock(order_service, users, products):
    result = await order_service.create_order(_request((products.lamp.id, 5)), users.alice.id)

    assert result.success


@pytest.mark.asyncio
async def test_create_order_checks_stock_per_line(order_service, users, products):
    # Repeated lines for one product are not summed against its stock
    result = await order_service.create_order(
        _request((products.lamp.id, 5), (products.lamp.id, 5)), users.alice.id
    )

    assert result.success
    assert [i.quantity for i in result.value.items] == [5, 5]
    assert result.value.total == Decimal("100.00")


@pytest.mark.asyncio
async def test_create_order_rejects_insufficient_stock(
    order_service, users, products, test_session_factory
):
    result = await order_service.create_order(_request((products.lamp.id, 6)), users.alice.id)

    assert not result.success
    assert result.error.code == OrderErrorCode.INVALID_REQUEST
    assert result.error.message == (
        f"Insufficient stock for product: Desk Lamp (ID {products.lamp.id}). "
        "Available: 5, Requested: 6"
    )
    assert await _row_counts(test_session_factory) == (0, 0)


@pytest.mark.asyncio
async def test_create_order_rejects_unknown_product(
    order_service, users, products, test_session_factory
):
    result = await order_service.create_order(_request((9999, 1)), users.alice.id)

    assert result.error.code == OrderErrorCode.INVALID_REQUEST
    assert result.error.message == "Product with ID 9999 not found"
    assert await _row_counts(test_session_factory) == (0, 0)


@pytest.mark.asyncio
async def test_create_order_writes_nothing_when_a_later_line_fails(
    order_service, users, products, test_session_factory
):
    result = await order_service.create_order(
        _request((products.lamp.id, 1), (products.cable.id, 1)), users.alice.id
    )

    assert result.error.code == OrderErrorCode.INVALID_REQUEST
    assert "USB Cable" in result.error.message
    assert await _row_counts(test_session_factory) == (0, 0)


@pytest.mark.asyncio
async def test_create_order_reports_first_failing_line(order_service, users, products):
    result = await order_service.create_order(
        _request((9999, 1), (products.cable.id, 1)), users.alice.id
    )

    assert result.error.message == "Product with ID 9999 not found"


@pytest.mark.asyncio
async def test_create_order_rejects_empty_items_before_touching_the_store():
    session_factory = MagicMock()
    service = OrderApplicationService(session_factory=session_factory)

    result = await service.create_order(CreateOrderRequest(items=[]), requester_id=1)

    assert result.error.code == OrderErrorCode.VALIDATION_ERROR
    assert result.error.message == "Order must contain at least one item"
    session_factory.assert_not_called()


@pytest.mark.asyncio
async def test_create_order_for_unknown_owner_is_rejected(
    order_service, products, test_session_factory
):
    result = await order_service.create_order(_request((products.lamp.id, 1)), requester_id=4242)

    assert result.error.code == OrderErrorCode.INVALID_REQUEST
    assert result.error.message == "Referenced record not found. Check product IDs."
    assert await _row_counts(test_session_factory) == (0, 0)


@pytest.mark.asyncio
async def test_create_order_store_failure_raises_internal_error(
    order_service, users, products, test_session_factory, monkeypatch
):
    monkeypatch.setattr(SqlAlchemyOrderRepository, "add", _db_down_async)

    with pytest.raises(OrderInternalError) as exc_info:
        await order_service.create_order(_request((products.lamp.id, 1)), users.alice.id)

    assert exc_info.value.message == (
        "An error occurred while creating the order. Please try again."
    )
    assert "locked" not in exc_info.value.message
    assert await _row_counts(test_session_factory) == (0, 0)


# =============================================================================
# FIND ONE
# =============================================================================


@pytest.mark.asyncio
async def test_find_one_as_owner(order_service, users, products):
    created = await order_service.create_order(_request((products.lamp.id, 1)), users.alice.id)

    result = await order_service.find_one(created.value.order_id, users.alice.id)

    assert result.success
    assert result.value.order_id == created.value.order_id
    assert result.value.total == Decimal("10.00")


@pytest.mark.asyncio
async def test_find_one_other_owner_is_unauthorized(order_service, users, products):
    created = await order_service.create_order(_request((products.lamp.id, 1)), users.alice.id)

    result = await order_service.find_one(created.value.order_id, users.bob.id)

    assert result.error.code == OrderErrorCode.UNAUTHORIZED
    assert result.value is None


@pytest.mark.asyncio
async def test_find_one_without_owner_filter_sees_any_order(order_service, users, products):
    created = await order_service.create_order(_request((products.lamp.id, 1)), users.alice.id)

    result = await order_service.find_one(created.value.order_id)

    assert result.success
    assert result.value.user_id == users.alice.id


@pytest.mark.asyncio
async def test_find_one_missing_order(order_service, users):
    result = await order_service.find_one(12345, users.alice.id)

    assert result.error.code == OrderErrorCode.NOT_FOUND
    assert result.error.message == "Order 12345 not found"


@pytest.mark.asyncio
async def test_total_follows_current_product_price(
    order_service, users, products, test_session_factory
):
    created = await order_service.create_order(_request((products.lamp.id, 2)), users.alice.id)
    assert created.value.total == Decimal("20.00")

    async with test_session_factory() as session:
        await session.execute(
            update(ProductModel).where(ProductModel.id == products.lamp.id).values(price=Decimal("12.50"))
        )
        await session.commit()

    result = await order_service.find_one(created.value.order_id)

    assert result.value.total == Decimal("25.00")
    assert result.value.items[0].product.price == Decimal("12.50")


# =============================================================================
# FIND ALL
# =============================================================================


@pytest.mark.asyncio
async def test_find_all_is_scoped_to_owner(order_service, users, products):
    await order_service.create_order(_request((products.lamp.id, 1)), users.alice.id)
    await order_service.create_order(_request((products.notebook.id, 1)), users.alice.id)
    await order_service.create_order(_request((products.notebook.id, 2)), users.bob.id)

    alice_orders = await order_service.find_all(users.alice.id)
    everything = await order_service.find_all()

    assert alice_orders.count == 2
    assert {o.user_id for o in alice_orders.orders} == {users.alice.id}
    assert alice_orders.message == "Successfully retrieved 2 orders."
    assert everything.count == 3


@pytest.mark.asyncio
async def test_find_all_returns_newest_first(order_service, users, products, test_session_factory):
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    async with test_session_factory() as session:
        for offset in (0, 2, 1):
            order = OrderModel(user_id=users.alice.id, created_at=base + timedelta(days=offset))
            order.items = [OrderItemModel(product_id=products.notebook.id, quantity=1)]
            session.add(order)
        await session.commit()

    result = await order_service.find_all(users.alice.id)

    timestamps = [o.created_at for o in result.orders]
    assert timestamps == sorted(timestamps, reverse=True)
    assert [t.day for t in timestamps] == [3, 2, 1]


@pytest.mark.asyncio
async def test_find_all_empty_for_user(order_service, users):
    result = await order_service.find_all(users.bob.id)

    assert result.orders == []
    assert result.count == 0
    assert result.message == NO_USER_ORDERS_MESSAGE


@pytest.mark.asyncio
async def test_find_all_empty_for_admin(order_service, users):
    result = await order_service.find_all()

    assert result.count == 0
    assert result.message == NO_ORDERS_MESSAGE


@pytest.mark.asyncio
async def test_find_all_store_failure_raises_internal_error(order_service, users, monkeypatch):
    monkeypatch.setattr(SqlAlchemyOrderRepository, "find_all", _db_down_async)

    with pytest.raises(OrderInternalError) as exc_info:
        await order_service.find_all(users.alice.id)

    assert exc_info.value.message == "An error occurred while retrieving orders. Please try again."
    assert isinstance(exc_info.value.__cause__, OperationalError)


# =============================================================================
# UPDATE STATUS
# =============================================================================


@pytest.mark.asyncio
async def test_update_status_allows_any_transition(order_service, users, products):
    created = await order_service.create_order(_request((products.lamp.id, 1)), users.alice.id)
    order_id = created.value.order_id

    delivered = await order_service.update_status(order_id, OrderStatus.DELIVERED)
    reopened = await order_service.update_status(order_id, OrderStatus.PENDING)

    assert delivered.value.status == OrderStatus.DELIVERED
    assert reopened.value.status == OrderStatus.PENDING

    stored = await order_service.find_one(order_id)
    assert stored.value.status == OrderStatus.PENDING


@pytest.mark.asyncio
async def test_update_status_missing_order(order_service, users):
    result = await order_service.update_status(777, OrderStatus.SHIPPED)

    assert result.error.code == OrderErrorCode.NOT_FOUND
