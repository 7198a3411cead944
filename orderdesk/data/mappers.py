"""Static mappers for domain entities <-> database models."""

from decimal import Decimal
from typing import Optional

from orderdesk.domain.entities.order import Order, OrderItem
from orderdesk.domain.enums import OrderStatus
from orderdesk.domain.value_objects import OwnerSummary, ProductSnapshot

from .models.catalog_model import ProductModel, UserModel
from .models.order_model import OrderItemModel, OrderModel


class ProductMapper:
    """Static mapper for ProductModel -> ProductSnapshot."""

    @staticmethod
    def to_snapshot(model: ProductModel) -> ProductSnapshot:
        return ProductSnapshot(
            product_id=model.id,
            name=model.name,
            price=Decimal(str(model.price)),
            stock=model.stock,
            description=model.description,
        )


class OwnerMapper:
    """Static mapper for UserModel -> OwnerSummary."""

    @staticmethod
    def to_summary(model: Optional[UserModel]) -> Optional[OwnerSummary]:
        if model is None:
            return None
        return OwnerSummary(user_id=model.id, name=model.name, email=model.email)


class OrderItemMapper:
    """Static mapper for OrderItem <-> OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance with ``product`` loaded

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            item_id=model.id,
            product_id=model.product_id,
            quantity=model.quantity,
            product=ProductMapper.to_snapshot(model.product) if model.product else None,
        )

    @staticmethod
    def to_persistence(entity: OrderItem) -> OrderItemModel:
        return OrderItemModel(product_id=entity.product_id, quantity=entity.quantity)


class OrderMapper:
    """Static mapper for Order <-> OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Args:
            model: OrderModel instance with items, products and user loaded

        Returns:
            Order domain aggregate
        """
        return Order(
            order_id=model.id,
            owner_id=model.user_id,
            status=OrderStatus(model.status),
            created_at=model.created_at,
            items=[OrderItemMapper.to_domain(item_model) for item_model in model.items],
            owner=OwnerMapper.to_summary(model.user),
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert a new domain aggregate to ORM model (with nested items)."""
        order_model = OrderModel(
            user_id=entity.owner_id,
            status=entity.status.value,
        )
        if entity.created_at is not None:
            order_model.created_at = entity.created_at

        order_model.items = [OrderItemMapper.to_persistence(item) for item in entity.items]
        return order_model
