"""Domain entities for uploaded documents and their embedded chunks."""

import uuid
from dataclasses import dataclass, field


def _new_id() -> str:
    return uuid.uuid4().hex


def format_citation(document_name: str, chunk_index: int) -> str:
    """Human-readable reference to a chunk, e.g. ``"Notes.txt • chunk 3"``."""
    return f"{document_name} • chunk {chunk_index}"


@dataclass(frozen=True)
class Chunk:
    """An embedded window of a document's text.

    ``index`` is 1-based within the parent document. Chunks are created at
    ingestion time and never mutated afterwards.
    """

    index: int
    text: str
    embedding: tuple[float, ...]
    id: str = field(default_factory=_new_id)


@dataclass(frozen=True)
class DocumentSummary:
    """Lightweight view of a stored document for API listings."""

    id: str
    name: str
    chunk_count: int


@dataclass(frozen=True)
class Document:
    """An uploaded plain-text document that exclusively owns its chunks."""

    name: str
    chunks: tuple[Chunk, ...]
    id: str = field(default_factory=_new_id)

    def summary(self) -> DocumentSummary:
        return DocumentSummary(id=self.id, name=self.name, chunk_count=len(self.chunks))


@dataclass(frozen=True)
class RetrievedChunk:
    """A chunk that scored above the relevance threshold for a query."""

    score: float
    document: Document
    chunk: Chunk

    @property
    def citation(self) -> str:
        return format_citation(self.document.name, self.chunk.index)
