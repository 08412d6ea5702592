"""Store faults surface as 500 responses instead of crashing the request path."""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from product_api.application.interfaces import ProductRepository
from product_api.application.services import ProductService
from product_api.domain.entities import Product
from product_api.infrastructure.dependencies import get_product_service


class VanishingProductRepository(ProductRepository):
    """Reports a product on read, but the row is gone by the time of the write."""

    async def get_by_owner(self, owner: str) -> Product | None:
        return Product(owner=owner, name="Widget", description="A widget")

    async def create(self, product: Product) -> Product:
        return product

    async def update(self, product: Product) -> int:
        return 0

    async def delete(self, owner: str) -> int:
        return 0


class UnreachableProductRepository(ProductRepository):
    """Every call fails as if the database were down."""

    def _fail(self):
        raise OperationalError("SELECT 1", {}, ConnectionError("database is unreachable"))

    async def get_by_owner(self, owner: str) -> Product | None:
        self._fail()

    async def create(self, product: Product) -> Product:
        self._fail()

    async def update(self, product: Product) -> int:
        self._fail()

    async def delete(self, owner: str) -> int:
        self._fail()


@pytest.mark.asyncio
@pytest.mark.parametrize("method,body", [("PUT", {"name": "Gadget"}), ("DELETE", None)])
async def test_write_touching_no_row_is_server_error(
    app, client: AsyncClient, issue_identifier, method: str, body
):
    app.dependency_overrides[get_product_service] = lambda: ProductService(
        VanishingProductRepository()
    )
    headers = {"uuid": await issue_identifier("alice")}

    response = await client.request(method, "/products", json=body, headers=headers)

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method,body",
    [
        ("POST", {"name": "Widget", "description": "A widget"}),
        ("GET", None),
        ("PUT", {"name": "Gadget"}),
        ("DELETE", None),
    ],
)
async def test_unreachable_store_is_server_error(
    app, client: AsyncClient, issue_identifier, method: str, body
):
    app.dependency_overrides[get_product_service] = lambda: ProductService(
        UnreachableProductRepository()
    )
    headers = {"uuid": await issue_identifier("alice")}

    response = await client.request(method, "/products", json=body, headers=headers)

    assert response.status_code == 500
    assert "unreachable" not in response.text
