"""Usage logging for upstream Mistral calls (chat completions and embeddings).

Logs every upstream AI request (chat, embedding) with token usage, timing
and outcome. Nothing is persisted; the log stream is the record.
"""

import logging

from laura.domain.entities import TokenUsage

logger = logging.getLogger(__name__)


class LLMUsageLogger:
    """Writes one log line per upstream request with tokens, timing and outcome.

    Usage:
        usage_logger = LLMUsageLogger()
        usage_logger.log_request(
            model="mistral-small",
            provider="mistral",
            feature="chat",
            usage=result.usage,
            duration_ms=42,
        )
    """

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def log_request(
        self,
        *,
        model: str,
        provider: str,
        feature: str,
        usage: TokenUsage,
        duration_ms: int,
        request_context: str | None = None,
    ) -> None:
        """Log a successful LLM request.

        Args:
            model: Model identifier (e.g. "mistral-small").
            provider: Provider name (e.g. "mistral").
            feature: Which subsystem triggered the call ("chat", "embedding").
            usage: Token usage from the completion result.
            duration_ms: Wall-clock time of the request in milliseconds.
            request_context: Additional context (e.g. filename, citation count).
        """
        ctx_str = f" ctx={request_context}" if request_context else ""
        self._log.info(
            "LLM [%s] provider=%s model=%s tokens=%d %dms%s",
            feature,
            provider,
            model,
            usage.total_tokens,
            duration_ms,
            ctx_str,
        )

    def log_error(
        self,
        *,
        model: str,
        provider: str,
        feature: str,
        duration_ms: int,
        error: Exception,
        request_context: str | None = None,
    ) -> None:
        """Log a failed LLM request."""
        ctx_str = f" ctx={request_context}" if request_context else ""
        self._log.error(
            "LLM [%s] provider=%s model=%s failed after %dms: %s%s",
            feature,
            provider,
            model,
            duration_ms,
            error,
            ctx_str,
        )
