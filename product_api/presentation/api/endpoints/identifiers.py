"""Identifier issuance and identity lookup endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from product_api.application.schemas import IdentityResponse
from product_api.application.services import IdentityService
from product_api.domain.entities import AuthenticatedOwner
from product_api.domain.exceptions import EntityNotFoundError
from product_api.infrastructure.dependencies import (
    get_authenticated_owner,
    get_identity_service,
)

router = APIRouter(prefix="/identifiers", tags=["Identifiers"])


@router.post("", response_model=str, status_code=status.HTTP_200_OK)
def create_identifier(
    username: str = Query(..., description="Name to register the identifier under"),
    service: IdentityService = Depends(get_identity_service),
) -> str:
    """Issue a new identifier. No identifier header is required."""
    identity = service.issue_identifier(username)
    return identity.key


@router.get("", response_model=IdentityResponse, status_code=status.HTTP_302_FOUND)
def get_own_identifier(
    owner: AuthenticatedOwner = Depends(get_authenticated_owner),
    service: IdentityService = Depends(get_identity_service),
) -> IdentityResponse:
    """Return the identity of the caller's ``uuid`` header."""
    identity = service.get_identity(owner.id)
    return IdentityResponse(id=identity.key, username=identity.username)


@router.get("/{identifier}", response_model=IdentityResponse, status_code=status.HTTP_302_FOUND)
def get_identifier(
    identifier: str,
    service: IdentityService = Depends(get_identity_service),
) -> IdentityResponse:
    """Look an identity up by identifier in the path."""
    try:
        identity = service.find_identity(identifier)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return IdentityResponse(id=identity.key, username=identity.username)
