"""Health check endpoint: no dependencies, always available."""

from fastapi import APIRouter

from laura.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the current application health status and active chat model."""
    settings = get_settings()
    return {
        "status": "ok",
        "model": settings.mistral_model,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
