"""
Development seed endpoint.

``POST /api/seed`` wipes the provider collection and loads the bundled
sample dataset.  It is meant for bootstrapping local environments and
is destructive; there is no confirmation step.
"""

import logging

from fastapi import APIRouter, Depends, status

from insureconnect_api.app.api.deps import get_provider_service
from insureconnect_api.app.core.errors import InsureConnectError, StoreError
from insureconnect_api.app.schemas.provider import ErrorResponse, SeedResponse
from insureconnect_api.app.services.provider_service import ProviderService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/seed",
    response_model=SeedResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def seed_database(service: ProviderService = Depends(get_provider_service)) -> SeedResponse:
    """Replace all providers with the sample dataset."""
    try:
        count = await service.reset_and_seed()
    except InsureConnectError as exc:
        # Whatever went wrong, callers only see the generic seed failure.
        logger.error("Seeding failed: %s", exc.message)
        raise StoreError("Error seeding database") from exc
    return SeedResponse(message="Database seeded successfully", count=count)
