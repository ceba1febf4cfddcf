"""
Provider endpoints.

These routes expose the provider collection: listing with optional
``minPrice``/``maxPrice`` bounds, lookup, creation and deletion by
``provider_id``.  There is no authentication; any caller may use every
operation.  Errors raised by ``ProviderService`` are turned into
``{"error": ...}`` responses by the handlers in ``core.errors``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from insureconnect_api.app.api.deps import get_provider_service
from insureconnect_api.app.schemas.provider import (
    ErrorResponse,
    MessageResponse,
    ProviderCreate,
    ProviderRead,
)
from insureconnect_api.app.services.provider_service import ProviderService

router = APIRouter()

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.get("", response_model=List[ProviderRead], responses=_ERRORS)
async def list_providers(
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    service: ProviderService = Depends(get_provider_service),
) -> List[ProviderRead]:
    """Return providers sorted by price, cheapest first.

    - **minPrice**, **maxPrice**: optional inclusive price bounds.
      They are accepted as strings so that malformed values produce the
      API's own 400 message instead of a generic validation error.
    """
    return await service.list_providers(min_price=min_price, max_price=max_price)


@router.post(
    "",
    response_model=ProviderRead,
    status_code=status.HTTP_201_CREATED,
    responses=_ERRORS,
)
async def create_provider(
    provider_in: ProviderCreate,
    service: ProviderService = Depends(get_provider_service),
) -> ProviderRead:
    """Create a provider.

    Returns 400 if a field is missing, the price is not a non‑negative
    JSON number or the ``provider_id`` is already taken.
    """
    return await service.create_provider(provider_in)


@router.get("/{provider_id}", response_model=ProviderRead, responses={404: {"model": ErrorResponse}})
async def get_provider(
    provider_id: str,
    service: ProviderService = Depends(get_provider_service),
) -> ProviderRead:
    return await service.get_provider(provider_id)


@router.delete("/{provider_id}", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
async def delete_provider(
    provider_id: str,
    service: ProviderService = Depends(get_provider_service),
) -> MessageResponse:
    await service.delete_provider(provider_id)
    return MessageResponse(message="Provider deleted successfully")
