"""
Order Status Enum.

Status values for the order lifecycle.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
