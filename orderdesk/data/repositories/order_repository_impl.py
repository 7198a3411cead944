"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from orderdesk.domain.entities.order import Order
from orderdesk.domain.enums import OrderStatus
from orderdesk.domain.repositories.order_repository import OrderRepository

from ..mappers import OrderMapper
from ..models.order_model import OrderItemModel, OrderModel

logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    def _select_orders(self):
        """Base query with items, their products and the owner eagerly loaded."""
        return select(OrderModel).options(
            selectinload(OrderModel.items).selectinload(OrderItemModel.product),
            selectinload(OrderModel.user),
        )

    async def add(self, order: Order) -> int:
        """Stage order and items in the session and flush to get an id.

        Note: Commit is handled by the Unit of Work.
        """
        order_model = OrderMapper.to_persistence(order)
        self._session.add(order_model)
        await self._session.flush()  # Propagate to DB without committing

        order.order_id = order_model.id
        order.created_at = order_model.created_at
        logger.debug(f"Staged order {order_model.id} with {len(order.items)} items")
        return order_model.id

    async def find_by_id(self, order_id: int) -> Optional[Order]:
        result = await self._session.execute(
            self._select_orders()
            .where(OrderModel.id == order_id)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()

        if not model:
            return None

        return OrderMapper.to_domain(model)

    async def find_all(self, owner_id: Optional[int] = None) -> List[Order]:
        query = self._select_orders()
        if owner_id is not None:
            query = query.where(OrderModel.user_id == owner_id)
        query = query.order_by(OrderModel.created_at.desc(), OrderModel.id.desc())

        result = await self._session.execute(query)
        models = result.scalars().all()

        return [OrderMapper.to_domain(model) for model in models]

    async def update_status(self, order_id: int, status: OrderStatus) -> bool:
        result = await self._session.execute(
            update(OrderModel)
            .where(OrderModel.id == order_id)
            .values(status=OrderStatus(status).value)
        )
        return result.rowcount > 0
