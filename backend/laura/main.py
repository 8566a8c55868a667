"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from laura.config import get_settings
from laura.infrastructure.logging.log_config import setup_logging
from laura.infrastructure.memory import InMemoryDocumentRepository
from laura.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging and report configuration gaps."""
    settings = get_settings()
    setup_logging()

    if not settings.mistral_api_key:
        logger.warning(
            "Mistral API key missing. Set MISTRAL_API_KEY (preferred) or "
            "VITE_MISTRAL_API_KEY; document upload and chat will fail."
        )
    logger.info(
        "%s %s ready (model=%s, embeddings=%s)",
        settings.app_title,
        settings.app_version,
        settings.mistral_model,
        settings.mistral_embedding_model,
    )

    yield

    # RAG context is not persisted; documents are dropped with the process.
    logger.info(
        "Shutting down with %d document(s) in memory",
        app.state.document_repository.count(),
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    The application owns the single in-memory document store for its
    lifetime (``app.state.document_repository``).
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.document_repository = InMemoryDocumentRepository()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "laura.main:app",
        host="0.0.0.0",
        port=4000,
        reload=True,
    )
