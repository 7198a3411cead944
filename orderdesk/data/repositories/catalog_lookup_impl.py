"""SQLAlchemy implementation of ICatalogLookup."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from orderdesk.application.interfaces import ICatalogLookup
from orderdesk.domain.value_objects import ProductSnapshot

from ..mappers import ProductMapper
from ..models.catalog_model import ProductModel


class SqlAlchemyCatalogLookup(ICatalogLookup):
    """Reads products from the shared relational store."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, product_id: int) -> Optional[ProductSnapshot]:
        model = await self._session.get(ProductModel, product_id)
        if model is None:
            return None
        return ProductMapper.to_snapshot(model)
