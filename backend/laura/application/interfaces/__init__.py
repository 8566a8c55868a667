from .chat_provider import ChatProvider
from .embedding_provider import EmbeddingProvider
from .document_repository import DocumentRepository

__all__ = [
    "ChatProvider",
    "EmbeddingProvider",
    "DocumentRepository",
]
