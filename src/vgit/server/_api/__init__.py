from fastapi import APIRouter

from ._health import router as health_router
from ._repositories import router as repositories_router

API_PREFIX = "/api"

api_router = APIRouter(prefix=API_PREFIX)

api_router.include_router(health_router)
api_router.include_router(repositories_router)

__all__ = ["API_PREFIX", "api_router"]
