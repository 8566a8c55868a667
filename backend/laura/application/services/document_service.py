"""Document ingestion service: orchestrates chunking, embedding generation, and storage.

This is an application service that coordinates:
1. Splitting document text into overlapping windows
2. Generating embeddings via the EmbeddingProvider (one batched call per document)
3. Storing the finished Document via the DocumentRepository

A document is stored only after all of its chunks were embedded; a failing
upstream call leaves the repository untouched for that document.
"""

import logging
import time
from dataclasses import dataclass

from laura.application.interfaces import DocumentRepository, EmbeddingProvider
from laura.application.services.chunking import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    chunk_text,
)
from laura.application.services.llm_usage_logger import LLMUsageLogger
from laura.domain.entities import Chunk, Document, DocumentSummary, TokenUsage
from laura.domain.exceptions import UpstreamError, ValidationError
from laura.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("DocumentIngestionService")


@dataclass(frozen=True)
class UploadedText:
    """A decoded plain-text upload awaiting ingestion."""

    name: str
    text: str


class DocumentIngestionService:
    """Application service for uploading, listing, and clearing documents."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        repository: DocumentRepository,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        usage_logger: LLMUsageLogger | None = None,
    ):
        self._embedding_provider = embedding_provider
        self._repository = repository
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap
        self._usage_logger = usage_logger or LLMUsageLogger()

    # ── Upload Operations ────────────────────────────────────────────

    async def upload(self, files: list[UploadedText]) -> list[DocumentSummary]:
        """Ingest every file in order and return all current document summaries.

        All files are validated before the first embedding call. Documents are
        stored one by one, so an upstream failure on a later file keeps the
        earlier ones.
        """
        if not files:
            raise ValidationError("No files uploaded.")
        for uploaded in files:
            if not uploaded.text.strip():
                raise ValidationError(f"File {uploaded.name} is empty or unreadable.")

        for uploaded in files:
            await self.ingest(uploaded.name, uploaded.text)

        return self.list_documents()

    async def ingest(self, name: str, text: str) -> Document:
        """Chunk, embed, and store a single document.

        Returns:
            The stored Document.

        Raises:
            ValidationError: If the text is blank.
            ConfigError: If the embedding provider is not configured.
            UpstreamError: If embedding fails or returns unusable vectors.
        """
        text = text.strip()
        if not text:
            raise ValidationError(f"File {name} is empty or unreadable.")

        plog.separator(f"Ingesting: {name}")
        plog.step_start(PipelineStage.UPLOAD, f"Received document '{name}'", chars=len(text))

        text_chunks = chunk_text(text, self._chunk_size, self._chunk_overlap)
        plog.step_complete(
            PipelineStage.CHUNKING,
            f"Split into {len(text_chunks)} chunk(s)",
            size=self._chunk_size,
            overlap=self._chunk_overlap,
        )

        embeddings = await self._embed([c.text for c in text_chunks], name)

        document = Document(
            name=name,
            chunks=tuple(
                Chunk(index=c.index + 1, text=c.text, embedding=tuple(vector))
                for c, vector in zip(text_chunks, embeddings, strict=True)
            ),
        )
        self._repository.save(document)
        plog.step_complete(
            PipelineStage.STORE,
            f"Stored '{name}'",
            id=document.id,
            chunks=len(document.chunks),
        )
        return document

    # ── Query Operations ─────────────────────────────────────────────

    def list_documents(self) -> list[DocumentSummary]:
        return [document.summary() for document in self._repository.get_all()]

    def clear(self) -> None:
        removed = self._repository.count()
        self._repository.clear()
        logger.info("Cleared document store (%d documents removed)", removed)

    # ── Helpers ──────────────────────────────────────────────────────

    async def _embed(self, texts: list[str], name: str) -> list[list[float]]:
        """Embed all chunk texts of one document in a single upstream call."""
        model = self._embedding_provider.model
        start = time.monotonic()

        try:
            with plog.timed_step(PipelineStage.EMBEDDING, f"Embedding {len(texts)} chunk(s)"):
                embeddings = await self._embedding_provider.generate_embeddings(texts)
                if len(embeddings) != len(texts):
                    raise UpstreamError(
                        provider=self._embedding_provider.provider_name,
                        status_code=502,
                        message=f"Expected {len(texts)} embeddings, got {len(embeddings)}",
                    )
                self._check_dimensions(embeddings)
        except UpstreamError as e:
            self._usage_logger.log_error(
                model=model,
                provider=e.provider,
                feature="embedding",
                duration_ms=int((time.monotonic() - start) * 1000),
                error=e,
                request_context=name,
            )
            raise

        self._usage_logger.log_request(
            model=model,
            provider=self._embedding_provider.provider_name,
            feature="embedding",
            usage=TokenUsage(),
            duration_ms=int((time.monotonic() - start) * 1000),
            request_context=f"{name} chunks={len(texts)}",
        )
        return embeddings

    def _check_dimensions(self, embeddings: list[list[float]]) -> None:
        """Reject vectors whose size differs from each other or from stored chunks."""
        dimensions = {len(vector) for vector in embeddings}
        for document in self._repository.get_all():
            if document.chunks:
                dimensions.add(len(document.chunks[0].embedding))
                break

        if len(dimensions) > 1 or 0 in dimensions:
            raise UpstreamError(
                provider=self._embedding_provider.provider_name,
                status_code=502,
                message=f"Inconsistent embedding dimensions: {sorted(dimensions)}",
            )
