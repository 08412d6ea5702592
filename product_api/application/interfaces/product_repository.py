"""Abstract repository interface (port) for Product persistence."""

from abc import ABC, abstractmethod

from product_api.domain.entities import Product


class ProductRepository(ABC):
    """Port for product persistence — one row per owner."""

    @abstractmethod
    async def get_by_owner(self, owner: str) -> Product | None:
        """Retrieve the product owned by ``owner``."""
        ...

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Persist a new product.

        Raises ProductAlreadyExistsError if the store already holds a row for
        the owner.
        """
        ...

    @abstractmethod
    async def update(self, product: Product) -> int:
        """Write name and description for the owner. Returns affected row count."""
        ...

    @abstractmethod
    async def delete(self, owner: str) -> int:
        """Remove the owner's product. Returns affected row count."""
        ...
