"""Application DTOs."""

from .order_dto import (
    CreateOrderItemRequest,
    CreateOrderRequest,
    OrderDTO,
    OrderItemDTO,
    OrderListDTO,
    OwnerSummaryDTO,
    ProductSummaryDTO,
    UpdateOrderStatusRequest,
)

__all__ = [
    "CreateOrderItemRequest",
    "CreateOrderRequest",
    "OrderDTO",
    "OrderItemDTO",
    "OrderListDTO",
    "OwnerSummaryDTO",
    "ProductSummaryDTO",
    "UpdateOrderStatusRequest",
]
