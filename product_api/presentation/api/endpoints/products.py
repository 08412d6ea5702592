"""Product CRUD endpoints — each caller owns at most one product."""

from fastapi import APIRouter, Depends, HTTPException, status

from product_api.application.schemas import ProductCreate, ProductUpdate, ProductResponse
from product_api.application.services import ProductService
from product_api.domain.entities import AuthenticatedOwner
from product_api.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from product_api.infrastructure.dependencies import (
    get_authenticated_owner,
    get_product_service,
)

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    owner: AuthenticatedOwner = Depends(get_authenticated_owner),
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Create the caller's product."""
    try:
        product = await service.create_product(owner.key, data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ProductResponse.model_validate(product, from_attributes=True)


@router.get("", response_model=ProductResponse, status_code=status.HTTP_302_FOUND)
async def get_product(
    owner: AuthenticatedOwner = Depends(get_authenticated_owner),
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Retrieve the caller's product."""
    try:
        product = await service.get_product(owner.key)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ProductResponse.model_validate(product, from_attributes=True)


@router.put("", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    data: ProductUpdate,
    owner: AuthenticatedOwner = Depends(get_authenticated_owner),
    service: ProductService = Depends(get_product_service),
) -> None:
    """Merge the given fields into the caller's product."""
    try:
        await service.update_product(owner.key, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    owner: AuthenticatedOwner = Depends(get_authenticated_owner),
    service: ProductService = Depends(get_product_service),
) -> None:
    """Delete the caller's product."""
    try:
        await service.delete_product(owner.key)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
