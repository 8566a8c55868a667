"""Pydantic v2 schemas (DTOs) for document upload and listing."""

from pydantic import BaseModel, Field


class DocumentSummarySchema(BaseModel):
    """Summary of an uploaded document."""

    id: str
    name: str
    chunks: int = Field(..., ge=0, description="Number of embedded chunks")


class DocumentListResponse(BaseModel):
    documents: list[DocumentSummarySchema] = Field(default_factory=list)


class ClearDocumentsResponse(BaseModel):
    status: str = "cleared"
