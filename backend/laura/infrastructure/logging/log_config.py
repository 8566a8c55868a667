"""Logging setup for the API process.

Levels are configured per category from Settings, so outbound HTTP noise
can be muted while the pipeline stays verbose.
"""

import logging
import sys

from laura.config import Settings, get_settings

# Settings field → loggers it controls.
LOGGER_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("log_level_http", ("httpx", "httpcore")),
    ("log_level_uvicorn", ("uvicorn", "uvicorn.access", "uvicorn.error")),
    ("log_level_pipeline", ("DocumentIngestionService", "RagChatService")),
    ("log_level_mistral", ("laura.infrastructure.mistral",)),
)


def level_from_name(name: str) -> int:
    """``"debug"`` → ``logging.DEBUG``; unknown names map to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category log levels. Called from the app lifespan."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(level_from_name(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))
        root.addHandler(handler)

    for field_name, logger_names in LOGGER_CATEGORIES:
        level = level_from_name(getattr(settings, field_name))
        for logger_name in logger_names:
            logging.getLogger(logger_name).setLevel(level)
