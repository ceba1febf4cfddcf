"""
FastAPI dependencies.

The provider service is created by ``create_app`` and stored on
``app.state``; routes obtain it here so tests can run several
independent apps side by side.
"""

from fastapi import Request

from insureconnect_api.app.services.provider_service import ProviderService


def get_provider_service(request: Request) -> ProviderService:
    return request.app.state.provider_service
