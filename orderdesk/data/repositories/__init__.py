"""SQLAlchemy repositories."""

from .catalog_lookup_impl import SqlAlchemyCatalogLookup
from .order_repository_impl import SqlAlchemyOrderRepository

__all__ = ["SqlAlchemyCatalogLookup", "SqlAlchemyOrderRepository"]
