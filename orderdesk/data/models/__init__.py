"""Database models."""

from .base import Base
from .catalog_model import ProductModel, UserModel
from .order_model import OrderItemModel, OrderModel

__all__ = ["Base", "OrderModel", "OrderItemModel", "ProductModel", "UserModel"]
