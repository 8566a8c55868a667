"""Mistral infrastructure package."""

from .mistral_chat_client import MistralChatClient
from .mistral_embedding_provider import MistralEmbeddingProvider

__all__ = ["MistralChatClient", "MistralEmbeddingProvider"]
