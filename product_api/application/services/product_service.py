"""Application service (use case) for Product operations."""

import logging

from product_api.application.interfaces import ProductRepository
from product_api.application.schemas import ProductCreate, ProductUpdate
from product_api.domain.entities import Product
from product_api.domain.exceptions import (
    InternalConsistencyError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
)

logger = logging.getLogger(__name__)


class ProductService:
    """Orchestrates product CRUD for a single owner. Depends on the repository port (DI).

    Update and delete check existence first and then write in a separate
    statement. A write that touches no row after the check passed raises
    ``InternalConsistencyError``.
    """

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def get_product(self, owner: str) -> Product:
        product = await self._repository.get_by_owner(owner)
        if product is None:
            raise ProductNotFoundError(owner)
        return product

    async def create_product(self, owner: str, data: ProductCreate) -> Product:
        existing = await self._repository.get_by_owner(owner)
        if existing is not None:
            raise ProductAlreadyExistsError(owner)

        product = Product(owner=owner, name=data.name, description=data.description)
        created = await self._repository.create(product)
        logger.info("Inserted product for %s", owner)
        return created

    async def update_product(self, owner: str, data: ProductUpdate) -> None:
        product = await self.get_product(owner)
        product.update(name=data.name, description=data.description)

        affected = await self._repository.update(product)
        if affected != 1:
            raise InternalConsistencyError("update", owner, expected=1, actual=affected)
        logger.info("Updated product for %s", owner)

    async def delete_product(self, owner: str) -> None:
        exists = await self._repository.get_by_owner(owner)
        if exists is None:
            raise ProductNotFoundError(owner)

        affected = await self._repository.delete(owner)
        if affected != 1:
            raise InternalConsistencyError("delete", owner, expected=1, actual=affected)
        logger.info("Deleted product for %s", owner)
