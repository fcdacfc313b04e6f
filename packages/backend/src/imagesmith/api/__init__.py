"""API route aggregation.

All routers registered here get mounted in main.py. Every route is open:
this service issues tokens but does not check them.
"""

from fastapi import APIRouter

from imagesmith.api.auth import router as auth_router
from imagesmith.api.health import router as health_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])
