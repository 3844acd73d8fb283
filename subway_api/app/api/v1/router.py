"""
Top‑level router for version 1 of the API.

This router aggregates the domain‑specific routers.  Each endpoint
module declares its own path prefix, so they are included here
without one.
"""

from fastapi import APIRouter

from .endpoints import lines, stations

router = APIRouter()

router.include_router(lines.router)
router.include_router(stations.router)
