"""Domain entities for chat messages: framework-independent."""

from dataclasses import dataclass, field

CHAT_ROLES = ("system", "user", "assistant")


@dataclass
class ChatMessage:
    """A single message in a chat conversation.

    Messages are supplied by the caller on every request and never stored
    server-side.
    """

    role: str  # "system" | "user" | "assistant"
    content: str = ""


@dataclass
class TokenUsage:
    """Token usage statistics from a completion."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class ChatCompletionResult:
    """Result from a chat completion call."""

    model: str
    content: str
    finish_reason: str  # "stop" | "length" | "error"
    usage: TokenUsage = field(default_factory=TokenUsage)
    provider: str = ""
