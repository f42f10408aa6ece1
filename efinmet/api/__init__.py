"""API routers for the EFIN METAR service."""

from fastapi import APIRouter

from .health import router as health_router
from .metars import router as metars_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(metars_router)

__all__ = ["api_router"]
