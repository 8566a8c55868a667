"""Documents API: upload plain-text documents for retrieval, list and clear them."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from laura.application.schemas import (
    ClearDocumentsResponse,
    DocumentListResponse,
    DocumentSummarySchema,
)
from laura.application.services import DocumentIngestionService, UploadedText
from laura.config import Settings, get_settings
from laura.domain.entities import DocumentSummary
from laura.domain.exceptions import UpstreamError, ValidationError
from laura.infrastructure.dependencies import get_document_service
from laura.presentation.api.v1.errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["Documents"])


# ── Helpers ──────────────────────────────────────────────────────────

def _to_response(summaries: list[DocumentSummary]) -> DocumentListResponse:
    return DocumentListResponse(
        documents=[
            DocumentSummarySchema(id=s.id, name=s.name, chunks=s.chunk_count)
            for s in summaries
        ]
    )


async def _read_upload(upload_file: UploadFile, settings: Settings) -> UploadedText:
    """Read and validate one uploaded file; raises HTTPException on rejection."""
    filename = upload_file.filename or "untitled.txt"
    content = await upload_file.read(settings.max_upload_size_bytes + 1)

    if len(content) > settings.max_upload_size_bytes:
        limit_mb = settings.max_upload_size_bytes / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File exceeds size limit of {limit_mb:g}MB: {filename}",
        )

    mime_type = (upload_file.content_type or "").split(";")[0].strip().lower()
    if mime_type not in settings.allowed_upload_mime_types:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"File type not allowed: {filename}",
        )

    if filename.lower().endswith(tuple(settings.blocked_upload_extensions)):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Executable files are not allowed: {filename}",
        )

    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File {filename} is empty or unreadable.",
        )

    return UploadedText(name=filename, text=text)


# ── Endpoints ────────────────────────────────────────────────────────

@router.get("", response_model=DocumentListResponse)
async def list_documents(
    service: DocumentIngestionService = Depends(get_document_service),
) -> DocumentListResponse:
    """List every document currently available for retrieval."""
    return _to_response(service.list_documents())


@router.post("", response_model=DocumentListResponse)
async def upload_documents(
    files: list[UploadFile] | None = File(default=None),
    service: DocumentIngestionService = Depends(get_document_service),
    settings: Settings = Depends(get_settings),
) -> DocumentListResponse:
    """Upload one or more plain-text documents, chunk and embed them.

    Every file is validated before any embedding call. Returns the summaries
    of all stored documents.
    """
    if not files:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="No files uploaded."
        )

    uploads = [await _read_upload(f, settings) for f in files]

    try:
        summaries = await service.upload(uploads)
    except (UpstreamError, ValidationError) as e:
        logger.error("Upload failed: %s", e)
        raise to_http_exception(e) from e

    return _to_response(summaries)


@router.delete("", response_model=ClearDocumentsResponse)
async def clear_documents(
    service: DocumentIngestionService = Depends(get_document_service),
) -> ClearDocumentsResponse:
    """Remove all uploaded documents."""
    service.clear()
    return ClearDocumentsResponse(status="cleared")
