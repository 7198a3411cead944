"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order
from ..enums import OrderStatus


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def add(self, order: Order) -> int:
        """Stage a new order with its items in the current transaction.

        Args:
            order: New Order aggregate (order_id unset)

        Returns:
            Assigned order id
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: int) -> Optional[Order]:
        """Retrieve order by id with items, products and owner joined.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, owner_id: Optional[int] = None) -> List[Order]:
        """List orders, most recent first.

        Args:
            owner_id: Restrict to this owner; None returns every order

        Returns:
            List of Order aggregates
        """
        pass

    @abstractmethod
    async def update_status(self, order_id: int, status: OrderStatus) -> bool:
        """Overwrite the status column.

        Args:
            order_id: Order identifier
            status: New status

        Returns:
            True if the order exists, False otherwise
        """
        pass
