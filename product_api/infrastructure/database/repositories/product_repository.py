"""Concrete repository implementation for Product backed by SQLAlchemy."""

import logging

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.application.interfaces import ProductRepository
from product_api.domain.entities import Product
from product_api.domain.exceptions import ProductAlreadyExistsError
from product_api.infrastructure.database.models import ProductModel

logger = logging.getLogger(__name__)


class SQLAlchemyProductRepository(ProductRepository):
    """Implements the ProductRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProductModel) -> Product:
        """Map ORM model → domain entity."""
        return Product(
            owner=model.owner,
            name=model.name,
            description=model.description,
        )

    def _to_model(self, entity: Product) -> ProductModel:
        """Map domain entity → ORM model (for creation)."""
        return ProductModel(
            owner=entity.owner,
            name=entity.name,
            description=entity.description,
        )

    async def get_by_owner(self, owner: str) -> Product | None:
        result = await self._session.get(ProductModel, owner)
        return self._to_entity(result) if result else None

    async def create(self, product: Product) -> Product:
        model = self._to_model(product)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError:
            # Another request inserted a row for this owner after our check
            await self._session.rollback()
            logger.warning("Concurrent create for owner %s lost the insert", product.owner)
            raise ProductAlreadyExistsError(product.owner)
        return self._to_entity(model)

    async def update(self, product: Product) -> int:
        stmt = (
            update(ProductModel)
            .where(ProductModel.owner == product.owner)
            .values(name=product.name, description=product.description)
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete(self, owner: str) -> int:
        stmt = delete(ProductModel).where(ProductModel.owner == owner)
        result = await self._session.execute(stmt)
        return result.rowcount
