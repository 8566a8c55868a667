"""Colored console logging for the ingestion and chat pipelines.

Each pipeline stage gets its own color and label so a document upload or
a chat turn can be followed step by step in the terminal:

    UPLOAD / STORE   green
    CHUNK            yellow
    EMBED            magenta
    RETRIEVE         blue
    GENERATE         cyan
    failures         red
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, NamedTuple

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_GRAY = "\033[90m"


class Stage(NamedTuple):
    label: str
    color: str


class PipelineStage:
    """Stages of document ingestion and retrieval-augmented chat."""

    UPLOAD = Stage("UPLOAD", _GREEN)
    CHUNKING = Stage("CHUNK", "\033[93m")
    EMBEDDING = Stage("EMBED", "\033[95m")
    STORE = Stage("STORE", _GREEN)
    RETRIEVAL = Stage("RETRIEVE", "\033[94m")
    GENERATION = Stage("GENERATE", "\033[96m")


def _paint(color: str, text: str) -> str:
    return f"{color}{text}{_RESET}"


def _details(fields: dict[str, Any]) -> str:
    if not fields:
        return ""
    joined = " | ".join(f"{key}={value}" for key, value in fields.items())
    return " " + _paint(_GRAY, f"({joined})")


class PipelineLogger:
    """Stage-aware logger wrapping ``logging.getLogger(component_name)``.

    Usage:
        plog = PipelineLogger("DocumentIngestionService")
        plog.step_start(PipelineStage.UPLOAD, "Received notes.txt", chars=1200)
        with plog.timed_step(PipelineStage.EMBEDDING, "Embedding 2 chunk(s)"):
            ...
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: Stage, message: str, **fields: Any) -> None:
        tag = _paint(stage.color + _BOLD, f"[{stage.label}]")
        self._logger.info("%s %s%s", tag, _paint(stage.color, message), _details(fields))

    def step_complete(self, stage: Stage, message: str, **fields: Any) -> None:
        tag = _paint(stage.color, f"[{stage.label}]")
        self._logger.info("%s %s%s", tag, _paint(_GREEN, f"✓ {message}"), _details(fields))

    def step_error(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        line = f"{_paint(_RED + _BOLD, f'[{stage.label}]')} {_paint(_RED, message)}"
        if error is not None:
            line += " " + _paint(_DIM, f"-> {type(error).__name__}: {error}")
        self._logger.error(line)

    def separator(self, title: str = "") -> None:
        if not title:
            self._logger.info(_paint(_GRAY, "─" * 60))
            return
        self._logger.info(_paint(_GRAY, f"{'─' * 10} {title} {'─' * max(0, 50 - len(title))}"))

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **fields: Any):
        """Log start and outcome of a block together with its wall time."""
        self.step_start(stage, message, **fields)
        started = time.perf_counter()
        try:
            yield
        except Exception as e:
            self.step_error(
                stage, f"{message} failed after {time.perf_counter() - started:.2f}s", error=e
            )
            raise
        self.step_complete(stage, f"{message} ({time.perf_counter() - started:.2f}s)")
