"""Application service for Order operations."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from orderdesk.application.dtos.order_dto import (
    CreateOrderRequest,
    OrderDTO,
    OrderItemDTO,
    OrderListDTO,
    OwnerSummaryDTO,
    ProductSummaryDTO,
)
from orderdesk.application.results import OrderErrorCode, OrderInternalError, OrderResult
from orderdesk.data.uow import create_uow
from orderdesk.domain.entities.order import Order, OrderItem
from orderdesk.domain.enums import OrderStatus

logger = logging.getLogger(__name__)

EMPTY_ORDER_MESSAGE = "Order must contain at least one item"
REFERENCED_RECORD_MESSAGE = "Referenced record not found. Check product IDs."
CREATE_FAILED_MESSAGE = "An error occurred while creating the order. Please try again."
READ_FAILED_MESSAGE = "An error occurred while retrieving orders. Please try again."
UPDATE_FAILED_MESSAGE = "An error occurred while updating the order. Please try again."
NO_USER_ORDERS_MESSAGE = "You don't have any orders yet. Start shopping to create your first order!"
NO_ORDERS_MESSAGE = "No orders found in the system."


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Validate order requests against the catalog before any write
    - Handle transactions via UoW
    - Enforce ownership on reads
    - Transform domain entities into DTOs (including computed totals)

    Recoverable outcomes are returned as ``OrderResult`` failures; only
    unexpected store errors are raised, as ``OrderInternalError``.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def create_order(
        self, request: CreateOrderRequest, requester_id: int
    ) -> OrderResult[OrderDTO]:
        """Create a new PENDING order owned by the requester.

        Every line is checked against the catalog (existence, then stock)
        in request order before anything is written. The order row and all
        item rows are committed together or not at all.

        Args:
            request: CreateOrderRequest DTO
            requester_id: Authenticated user id

        Returns:
            OrderResult with the created OrderDTO, or a VALIDATION_ERROR /
            INVALID_REQUEST failure

        Raises:
            OrderInternalError: On unexpected persistence failure
        """
        if not request.items:
            logger.info(f"Rejected empty order from user {requester_id}")
            return OrderResult.fail(OrderErrorCode.VALIDATION_ERROR, EMPTY_ORDER_MESSAGE)

        uow = create_uow(self._session_factory)
        try:
            async with uow:
                execution_id = uow.execution_id
                logger.debug(
                    f"[{execution_id}] Creating order for user {requester_id} with items: "
                    f"{[(item.product_id, item.quantity) for item in request.items]}"
                )

                # 1. Validate every line before writing anything
                for item in request.items:
                    product = await uow.catalog.get(item.product_id)

                    if product is None:
                        logger.info(f"[{execution_id}] Product {item.product_id} not found")
                        return OrderResult.fail(
                            OrderErrorCode.INVALID_REQUEST,
                            f"Product with ID {item.product_id} not found",
                        )

                    if not product.has_stock_for(item.quantity):
                        logger.info(
                            f"[{execution_id}] Insufficient stock for product {product.product_id}: "
                            f"available={product.stock}, requested={item.quantity}"
                        )
                        return OrderResult.fail(
                            OrderErrorCode.INVALID_REQUEST,
                            f"Insufficient stock for product: {product.name} (ID {product.product_id}). "
                            f"Available: {product.stock}, Requested: {item.quantity}",
                        )

                # 2. Build the aggregate
                order = Order.place(
                    owner_id=requester_id,
                    lines=[(item.product_id, item.quantity) for item in request.items],
                )

                # 3. Persist order + items atomically
                try:
                    order_id = await uow.orders.add(order)
                    await uow.commit()
                except IntegrityError as e:
                    await uow.rollback()
                    logger.warning(f"[{execution_id}] Integrity violation creating order: {e.orig}")
                    return OrderResult.fail(
                        OrderErrorCode.INVALID_REQUEST, REFERENCED_RECORD_MESSAGE
                    )

                # 4. Re-read with products and owner joined
                created = await uow.orders.find_by_id(order_id)
                logger.info(
                    f"[{execution_id}] ✅ Order {order_id} created for user {requester_id} "
                    f"({len(created.items)} items)"
                )
                return OrderResult.ok(self._order_to_dto(created))

        except SQLAlchemyError as e:
            logger.error(f"Error creating order for user {requester_id}: {e}", exc_info=True)
            raise OrderInternalError(CREATE_FAILED_MESSAGE) from e

    async def find_one(
        self, order_id: int, requester_id: Optional[int] = None
    ) -> OrderResult[OrderDTO]:
        """Get order by id, optionally scoped to an owner.

        Args:
            order_id: Order id
            requester_id: Owner to enforce; None means an unrestricted (admin) caller

        Returns:
            OrderResult with OrderDTO, NOT_FOUND if the order does not exist,
            UNAUTHORIZED if it belongs to someone else

        Raises:
            OrderInternalError: On unexpected persistence failure
        """
        uow = create_uow(self._session_factory)
        try:
            async with uow:
                order = await uow.orders.find_by_id(order_id)
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving order {order_id}: {e}", exc_info=True)
            raise OrderInternalError(READ_FAILED_MESSAGE) from e

        if order is None:
            return OrderResult.fail(OrderErrorCode.NOT_FOUND, f"Order {order_id} not found")

        if requester_id is not None and not order.belongs_to(requester_id):
            logger.warning(
                f"User {requester_id} denied access to order {order_id} (owner {order.owner_id})"
            )
            return OrderResult.fail(
                OrderErrorCode.UNAUTHORIZED, "You do not have access to this order"
            )

        return OrderResult.ok(self._order_to_dto(order))

    async def find_all(self, requester_id: Optional[int] = None) -> OrderListDTO:
        """List orders, most recent first.

        Args:
            requester_id: Restrict to this owner; None lists every order

        Returns:
            OrderListDTO; an empty result is a normal outcome with count 0

        Raises:
            OrderInternalError: On unexpected persistence failure
        """
        scope = f"for user {requester_id}" if requester_id is not None else "(all users)"
        logger.debug(f"Finding orders {scope}")

        uow = create_uow(self._session_factory)
        try:
            async with uow:
                orders = await uow.orders.find_all(owner_id=requester_id)
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving orders {scope}: {e}", exc_info=True)
            raise OrderInternalError(READ_FAILED_MESSAGE) from e

        if not orders:
            logger.debug(f"No orders found {scope}")
            return OrderListDTO(
                orders=[],
                count=0,
                message=NO_USER_ORDERS_MESSAGE if requester_id is not None else NO_ORDERS_MESSAGE,
            )

        dtos = [self._order_to_dto(order) for order in orders]
        return OrderListDTO(
            orders=dtos,
            count=len(dtos),
            message=f"Successfully retrieved {len(dtos)} orders.",
        )

    async def update_status(
        self, order_id: int, new_status: OrderStatus
    ) -> OrderResult[OrderDTO]:
        """Overwrite an order's status.

        No transition rules are enforced: any status may follow any other.

        Args:
            order_id: Order id
            new_status: Target status

        Returns:
            OrderResult with the updated OrderDTO, or NOT_FOUND

        Raises:
            OrderInternalError: On unexpected persistence failure
        """
        uow = create_uow(self._session_factory)
        try:
            async with uow:
                execution_id = uow.execution_id
                order = await uow.orders.find_by_id(order_id)
                if order is None:
                    return OrderResult.fail(
                        OrderErrorCode.NOT_FOUND, f"Order {order_id} not found"
                    )

                previous = order.change_status(new_status)
                await uow.orders.update_status(order_id, order.status)
                await uow.commit()

                updated = await uow.orders.find_by_id(order_id)
                logger.info(
                    f"[{execution_id}] Order {order_id} status {previous.value} -> {order.status.value}"
                )
                return OrderResult.ok(self._order_to_dto(updated))

        except SQLAlchemyError as e:
            logger.error(f"Error updating status of order {order_id}: {e}", exc_info=True)
            raise OrderInternalError(UPDATE_FAILED_MESSAGE) from e

    def _item_to_dto(self, item: OrderItem) -> OrderItemDTO:
        product = item.product
        return OrderItemDTO(
            item_id=item.item_id,
            product_id=item.product_id,
            quantity=item.quantity,
            product=ProductSummaryDTO(
                product_id=product.product_id,
                name=product.name,
                price=product.price,
                description=product.description,
                stock=product.stock,
            ),
        )

    def _order_to_dto(self, order: Order) -> OrderDTO:
        """Transform Order domain entity to OrderDTO.

        Args:
            order: Order domain entity with items and products loaded

        Returns:
            OrderDTO instance with computed total
        """
        owner = None
        if order.owner is not None:
            owner = OwnerSummaryDTO(
                user_id=order.owner.user_id,
                name=order.owner.name,
                email=order.owner.email,
            )

        return OrderDTO(
            order_id=order.order_id,
            user_id=order.owner_id,
            status=order.status,
            created_at=order.created_at,
            items=[self._item_to_dto(item) for item in order.items],
            user=owner,
            total=order.total,
        )
