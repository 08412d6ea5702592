"""Unit tests for the ProductService."""

import pytest

from product_api.application.interfaces import ProductRepository
from product_api.application.schemas import ProductCreate, ProductUpdate
from product_api.application.services import ProductService
from product_api.domain.entities import Product
from product_api.domain.exceptions import (
    InternalConsistencyError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
)

OWNER = "0b6f3c2e-8d41-4a5f-b7e9-2c1d0a9f8e76"


class FakeProductRepository(ProductRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._products: dict[str, Product] = {}

    async def get_by_owner(self, owner: str) -> Product | None:
        product = self._products.get(owner)
        if product is None:
            return None
        return Product(owner=product.owner, name=product.name, description=product.description)

    async def create(self, product: Product) -> Product:
        if product.owner in self._products:
            raise ProductAlreadyExistsError(product.owner)
        self._products[product.owner] = product
        return product

    async def update(self, product: Product) -> int:
        if product.owner not in self._products:
            return 0
        self._products[product.owner] = product
        return 1

    async def delete(self, owner: str) -> int:
        if owner in self._products:
            del self._products[owner]
            return 1
        return 0


class RacingProductRepository(FakeProductRepository):
    """Drops the row between the existence check and the write."""

    async def update(self, product: Product) -> int:
        self._products.pop(product.owner, None)
        return await super().update(product)

    async def delete(self, owner: str) -> int:
        self._products.pop(owner, None)
        return await super().delete(owner)


@pytest.fixture
def service() -> ProductService:
    return ProductService(FakeProductRepository())


@pytest.mark.asyncio
async def test_create_product(service: ProductService):
    product = await service.create_product(OWNER, ProductCreate(name="Widget", description="A widget"))
    assert product == Product(owner=OWNER, name="Widget", description="A widget")


@pytest.mark.asyncio
async def test_create_product_twice_conflicts(service: ProductService):
    await service.create_product(OWNER, ProductCreate(name="Widget", description="A widget"))

    with pytest.raises(ProductAlreadyExistsError):
        await service.create_product(OWNER, ProductCreate(name="Other", description="Other"))

    product = await service.get_product(OWNER)
    assert product.name == "Widget"


@pytest.mark.asyncio
async def test_get_product_not_found(service: ProductService):
    with pytest.raises(ProductNotFoundError):
        await service.get_product(OWNER)


@pytest.mark.asyncio
async def test_update_product_merges_fields(service: ProductService):
    await service.create_product(OWNER, ProductCreate(name="A", description="B"))

    await service.update_product(OWNER, ProductUpdate(description="C"))

    product = await service.get_product(OWNER)
    assert (product.name, product.description) == ("A", "C")


@pytest.mark.asyncio
async def test_update_product_not_found(service: ProductService):
    with pytest.raises(ProductNotFoundError):
        await service.update_product(OWNER, ProductUpdate(name="x"))


@pytest.mark.asyncio
async def test_delete_product(service: ProductService):
    await service.create_product(OWNER, ProductCreate(name="Widget", description="A widget"))

    await service.delete_product(OWNER)

    with pytest.raises(ProductNotFoundError):
        await service.get_product(OWNER)


@pytest.mark.asyncio
async def test_delete_product_not_found(service: ProductService):
    with pytest.raises(ProductNotFoundError):
        await service.delete_product(OWNER)


@pytest.mark.asyncio
async def test_row_vanishing_mid_update_is_consistency_fault():
    service = ProductService(RacingProductRepository())
    await service.create_product(OWNER, ProductCreate(name="Widget", description="A widget"))

    with pytest.raises(InternalConsistencyError) as exc_info:
        await service.update_product(OWNER, ProductUpdate(name="Gadget"))
    assert exc_info.value.actual == 0


@pytest.mark.asyncio
async def test_row_vanishing_mid_delete_is_consistency_fault():
    service = ProductService(RacingProductRepository())
    await service.create_product(OWNER, ProductCreate(name="Widget", description="A widget"))

    with pytest.raises(InternalConsistencyError):
        await service.delete_product(OWNER)
