"""
Health check endpoint.

Always answers 200 with a constant payload, even when the database is
unavailable; it reports that the process is up, not that the store is
reachable.
"""

from fastapi import APIRouter

from insureconnect_api.app.schemas.provider import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="OK", message="InsureConnect API is running")
