"""Abstract repository interface (port) for uploaded documents."""

from abc import ABC, abstractmethod

from laura.domain.entities import Document


class DocumentRepository(ABC):
    """Port for document storage used by ingestion and retrieval.

    Documents are replaced as a whole; individual chunks are never updated.
    """

    @abstractmethod
    def save(self, document: Document) -> None:
        """Insert or replace a document by its id."""
        ...

    @abstractmethod
    def get_all(self) -> list[Document]:
        """Return every stored document."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove all documents."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of stored documents."""
        ...
