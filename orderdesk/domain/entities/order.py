"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from ..enums import OrderStatus
from ..value_objects import OwnerSummary, ProductSnapshot, round_money


@dataclass
class OrderItem:
    """Individual line item within an order."""
    product_id: int
    quantity: int
    item_id: Optional[int] = None

    # Joined at read time, never stored on the item itself
    product: Optional[ProductSnapshot] = None

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError(f"Quantity must be positive, got: {self.quantity}")

    def line_total(self) -> Decimal:
        """Quantity times the product's current price (unrounded)."""
        if self.product is None:
            raise ValueError(f"Product {self.product_id} not loaded for line item")
        return self.product.price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    Owns its line items. The total is derived from the live product prices
    of the joined items and is never persisted.
    """
    owner_id: int
    items: List[OrderItem] = field(default_factory=list)
    order_id: Optional[int] = None
    status: OrderStatus = OrderStatus.PENDING
    created_at: Optional[datetime] = None
    owner: Optional[OwnerSummary] = None

    @classmethod
    def place(cls, owner_id: int, lines: Iterable[Tuple[int, int]]) -> "Order":
        """
        Factory method for a new order.

        Args:
            owner_id: Requesting user id
            lines: (product_id, quantity) pairs in request order

        Returns:
            New PENDING order

        Raises:
            ValueError: If no lines are given
        """
        items = [OrderItem(product_id=product_id, quantity=quantity) for product_id, quantity in lines]
        if not items:
            raise ValueError("Order must contain at least one item")
        return cls(owner_id=owner_id, items=items, status=OrderStatus.PENDING)

    @property
    def total(self) -> Decimal:
        """Sum of line totals rounded to 2 places (ROUND_HALF_UP)."""
        return round_money(sum((item.line_total() for item in self.items), Decimal("0")))

    def belongs_to(self, user_id: int) -> bool:
        return self.owner_id == user_id

    def change_status(self, new_status: OrderStatus) -> OrderStatus:
        """
        Overwrite the order status.

        Any status may move to any other status. Returns the previous status.
        """
        previous = self.status
        self.status = OrderStatus(new_status)
        return previous
