"""
Top‑level API router.

Aggregates the domain routers.  ``create_app`` mounts it under
``/api``, the prefix the listing front end has always used.
"""

from fastapi import APIRouter

from .endpoints import health, providers, seed

router = APIRouter()

router.include_router(providers.router, prefix="/providers", tags=["providers"])
router.include_router(health.router, tags=["health"])
router.include_router(seed.router, tags=["seed"])
