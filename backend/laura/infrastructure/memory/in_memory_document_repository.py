"""In-memory implementation of DocumentRepository.

Documents live for the lifetime of the process. There is no locking:
concurrent uploads race and the last writer wins.
"""

import logging

from laura.application.interfaces import DocumentRepository
from laura.domain.entities import Document

logger = logging.getLogger(__name__)


class InMemoryDocumentRepository(DocumentRepository):
    """Dict-backed document store keyed by document id (insertion-ordered)."""

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}

    def save(self, document: Document) -> None:
        replaced = document.id in self._documents
        self._documents[document.id] = document
        logger.debug(
            "%s document %s (%s, %d chunks)",
            "Replaced" if replaced else "Stored",
            document.id,
            document.name,
            len(document.chunks),
        )

    def get_all(self) -> list[Document]:
        return list(self._documents.values())

    def clear(self) -> None:
        self._documents.clear()

    def count(self) -> int:
        return len(self._documents)
