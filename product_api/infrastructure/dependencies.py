"""FastAPI dependency injection — wires infrastructure to application layer.

Process-wide state (the identity registry and the database handle) is owned
by the application instance and read from ``request.app.state``.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.application.interfaces import IdentityRegistry
from product_api.application.services import IdentityService, OwnershipGuard, ProductService
from product_api.domain.entities import AuthenticatedOwner
from product_api.domain.exceptions import OwnershipError
from product_api.infrastructure.database.session import get_db_session
from product_api.infrastructure.database.repositories import SQLAlchemyProductRepository


def get_identity_registry(request: Request) -> IdentityRegistry:
    """Provides the identity registry owned by the running application."""
    return request.app.state.identity_registry


def get_identity_service(
    registry: IdentityRegistry = Depends(get_identity_registry),
) -> IdentityService:
    return IdentityService(registry)


def get_ownership_guard(
    registry: IdentityRegistry = Depends(get_identity_registry),
) -> OwnershipGuard:
    return OwnershipGuard(registry)


def get_authenticated_owner(
    identifier: str | None = Header(None, alias="uuid"),
    guard: OwnershipGuard = Depends(get_ownership_guard),
) -> AuthenticatedOwner:
    """Runs the ownership check on the ``uuid`` header; rejects with 403."""
    try:
        return guard.authenticate(identifier)
    except OwnershipError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=e.reason)


async def get_product_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProductService, None]:
    """Provides a ProductService instance with its repository wired up."""
    repository = SQLAlchemyProductRepository(session)
    yield ProductService(repository)
