"""
Top-level API router.

Aggregates the domain routers under a single router which ``main``
mounts at ``/api``.
"""

from fastapi import APIRouter

from .endpoints import health, records

router = APIRouter()

router.include_router(records.router, prefix="/records", tags=["records"])
router.include_router(health.router, prefix="/health", tags=["health"])
