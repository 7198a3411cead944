"""Application layer interfaces."""
from abc import ABC, abstractmethod
from typing import Optional

from orderdesk.domain.value_objects import ProductSnapshot


class ICatalogLookup(ABC):
    """
    Interface for product catalog lookups.

    The order core only reads price and stock through this contract;
    product CRUD lives elsewhere.
    """

    @abstractmethod
    async def get(self, product_id: int) -> Optional[ProductSnapshot]:
        """
        Get current product data by id.

        Args:
            product_id: Product identifier

        Returns:
            ProductSnapshot if found, None otherwise
        """
        pass


__all__ = ["ICatalogLookup"]
