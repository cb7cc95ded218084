from fastapi import APIRouter

from .endpoints.health import router as health_router
from .endpoints.profiles import router as profiles_router
from .endpoints.stats import router as stats_router

api_router = APIRouter()


api_router.include_router(health_router)
api_router.include_router(stats_router)
api_router.include_router(profiles_router)
