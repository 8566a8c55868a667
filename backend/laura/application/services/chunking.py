"""Fixed-window text chunking with overlap."""

from dataclasses import dataclass

# ── Chunking constants ──────────────────────────────────────────────
DEFAULT_CHUNK_SIZE = 800  # characters per window
DEFAULT_CHUNK_OVERLAP = 100  # characters shared by consecutive windows


@dataclass(frozen=True)
class TextChunk:
    """A trimmed text window with its zero-based position among kept windows."""

    index: int
    text: str


def chunk_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
) -> list[TextChunk]:
    """Split text into overlapping fixed-size windows.

    Windows start every ``chunk_size - chunk_overlap`` characters. Each window
    is stripped; blank windows are dropped without consuming an index, so
    indices are dense over the kept chunks.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    if not 0 <= chunk_overlap < chunk_size:
        raise ValueError("chunk_overlap must be in [0, chunk_size)")

    step = chunk_size - chunk_overlap
    chunks: list[TextChunk] = []
    for start in range(0, len(text), step):
        window = text[start : start + chunk_size].strip()
        if window:
            chunks.append(TextChunk(index=len(chunks), text=window))
    return chunks
