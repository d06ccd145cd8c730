from fastapi import APIRouter

from pathcodec.routers.health import router as health_router
from pathcodec.routers.paths import router as paths_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health_router)
api_router.include_router(paths_router)
