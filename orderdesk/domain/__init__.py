"""Domain layer - pure domain models and interfaces."""

from .entities import Order, OrderItem
from .enums import OrderStatus, UserRole
from .repositories import OrderRepository
from .value_objects import ExecutionID, OwnerSummary, ProductSnapshot, Requester

__all__ = [
    "ExecutionID",
    "Order",
    "OrderItem",
    "OrderRepository",
    "OrderStatus",
    "OwnerSummary",
    "ProductSnapshot",
    "Requester",
    "UserRole",
]
