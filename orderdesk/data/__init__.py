"""Data layer - infrastructure persistence and mapping."""

from .mappers import OrderItemMapper, OrderMapper, OwnerMapper, ProductMapper
from .models import Base, OrderItemModel, OrderModel, ProductModel, UserModel
from .repositories import SqlAlchemyCatalogLookup, SqlAlchemyOrderRepository
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderMapper",
    "OrderModel",
    "OwnerMapper",
    "ProductMapper",
    "ProductModel",
    "SqlAlchemyCatalogLookup",
    "SqlAlchemyOrderRepository",
    "UnitOfWork",
    "UserModel",
]
