"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from orderdesk.domain.enums import OrderStatus

# Wire format is camelCase (productId, createdAt, ...); Python code uses snake_case.
_DTO_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

# Upper bound of the INTEGER primary key columns
MAX_ID = 2**31 - 1

# Decimal in Python, JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CreateOrderItemRequest(BaseModel):
    """One line of an order request."""

    model_config = _DTO_CONFIG

    product_id: int = Field(..., gt=0, le=MAX_ID, description="Product ID", examples=[1])
    quantity: int = Field(..., gt=0, description="Quantity of the product", examples=[2])


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order.

    An empty ``items`` list is accepted here and rejected by the service,
    so callers get the same validation error from every entry point.
    """

    model_config = _DTO_CONFIG

    items: List[CreateOrderItemRequest] = Field(
        ..., description="Array of order items (products and quantities)"
    )


class UpdateOrderStatusRequest(BaseModel):
    """Request DTO for overwriting an order status."""

    model_config = _DTO_CONFIG

    status: OrderStatus = Field(..., description="New order status")


class ProductSummaryDTO(BaseModel):
    """Product fields joined onto an order item."""

    model_config = _DTO_CONFIG

    product_id: int
    name: str
    price: Money = Field(..., ge=0, description="Current unit price")
    description: Optional[str] = None
    stock: int = Field(..., ge=0)


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    model_config = _DTO_CONFIG

    item_id: int
    product_id: int
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    product: ProductSummaryDTO


class OwnerSummaryDTO(BaseModel):
    """Reduced owner view (no role, no credentials)."""

    model_config = _DTO_CONFIG

    user_id: int
    name: str
    email: str


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    model_config = _DTO_CONFIG

    order_id: int = Field(..., description="Order ID")
    user_id: int = Field(..., description="Owner user ID")
    status: OrderStatus = Field(..., description="Order status")
    created_at: datetime = Field(..., description="Creation timestamp")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")
    user: Optional[OwnerSummaryDTO] = Field(None, description="Owner summary")
    total: Money = Field(..., ge=0, description="Sum of quantity x current price, 2 places")


class OrderListDTO(BaseModel):
    """DTO for listing orders."""

    model_config = _DTO_CONFIG

    orders: List[OrderDTO] = Field(default_factory=list, description="List of orders")
    count: int = Field(..., ge=0, description="Number of orders returned")
    message: str = Field(..., description="Human-readable summary")
