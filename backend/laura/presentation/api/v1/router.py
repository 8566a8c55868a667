"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from laura.presentation.api.v1.endpoints.health import router as health_router
from laura.presentation.api.v1.endpoints.documents import router as documents_router
from laura.presentation.api.v1.endpoints.chat import router as chat_router

ENDPOINT_ROUTERS = (health_router, documents_router, chat_router)

router = APIRouter(prefix="/v1")
for endpoint_router in ENDPOINT_ROUTERS:
    router.include_router(endpoint_router)
