"""Similarity search over every stored chunk."""

import logging
from collections.abc import Sequence

from laura.application.interfaces import DocumentRepository
from laura.application.services.similarity import cosine_similarity
from laura.domain.entities import RetrievedChunk

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3
DEFAULT_THRESHOLD = 0.2


class Retriever:
    """Ranks all stored chunks against a query embedding.

    A full linear scan: every chunk of every document is scored, the list is
    sorted by descending score, cut to the top ``limit`` and finally filtered
    to scores strictly above ``threshold``. The sort is stable, so equal
    scores keep store order.
    """

    def __init__(
        self,
        repository: DocumentRepository,
        *,
        top_k: int = DEFAULT_TOP_K,
        threshold: float = DEFAULT_THRESHOLD,
    ):
        self._repository = repository
        self._top_k = top_k
        self._threshold = threshold

    def retrieve(
        self,
        query_embedding: Sequence[float],
        *,
        limit: int | None = None,
        threshold: float | None = None,
    ) -> list[RetrievedChunk]:
        limit = self._top_k if limit is None else limit
        threshold = self._threshold if threshold is None else threshold

        scored = [
            RetrievedChunk(
                score=cosine_similarity(query_embedding, chunk.embedding),
                document=document,
                chunk=chunk,
            )
            for document in self._repository.get_all()
            for chunk in document.chunks
        ]
        scored.sort(key=lambda item: item.score, reverse=True)

        results = [item for item in scored[:limit] if item.score > threshold]
        logger.debug(
            "Retrieved %d/%d chunks (limit=%d, threshold=%.2f)",
            len(results),
            len(scored),
            limit,
            threshold,
        )
        return results
