"""Top-level API router: includes versioned sub-routers.

The v1 endpoints are also served unversioned (``/api/documents``,
``/api/chat``, ``/api/health``), the paths the web client calls.
"""

from fastapi import APIRouter

from laura.presentation.api.v1.router import ENDPOINT_ROUTERS
from laura.presentation.api.v1.router import router as v1_router

router = APIRouter(prefix="/api")
router.include_router(v1_router)
for endpoint_router in ENDPOINT_ROUTERS:
    router.include_router(endpoint_router, include_in_schema=False)
