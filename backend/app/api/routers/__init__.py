from fastapi import APIRouter

from app.api.routers.system import router as system_router
from app.api.routers.v1 import router as v1_router
from app.api.routers.v2 import router as v2_router


api_router = APIRouter()
api_router.include_router(v1_router, prefix="/v1", tags=["v1"])
api_router.include_router(v2_router, prefix="/v2", tags=["v2"])

__all__ = ["api_router", "system_router"]
