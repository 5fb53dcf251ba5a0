"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: Routes sit at the root path, where the frontend expects them.
The session and greeting routers are open; job and bid routers mix
open and protected routes, so auth is declared per route with
Depends(get_current_identity) rather than at include time.
"""

from fastapi import APIRouter

from solosphere.api.auth import router as auth_router
from solosphere.api.bids import router as bids_router
from solosphere.api.health import router as health_router
from solosphere.api.jobs import router as jobs_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(jobs_router, tags=["jobs"])
api_router.include_router(bids_router, tags=["bids"])
